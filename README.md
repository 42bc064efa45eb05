# tftui

A small immediate-mode widget toolkit for 240×320 RGB565 touch displays. It
comes with `VirtualDisplay`, an in-memory frame buffer with a simulated touch
panel, so the same interface can run in a desktop window.

The package has three modules:

- `tftui.display` has the `VirtualDisplay` frame buffer, the `Font` cell size,
  and the helpers `get_color`, `color_to_rgb`, `map_range` and `clamp`.
- `tftui.widgets` has the `UI` class, which lays out and draws buttons,
  sliders and text. It also has `UIStyle`, `Vec2`, `IntValue`, the
  `WidgetGroup` record, `translate_coordinates` and the `UIError` exception.
- `tftui.app` has the two-screen `DemoApp` and the `main` function behind the
  `tftui-demo` command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demo

```
tftui-demo [--glyphs FILE] [--fps N]
```

This command opens a 240×320 pygame window that shows two widget groups. The
first group has a button and a slider, and the second has a button and a text
label. Each button switches to the other group. Press the mouse inside the
window to touch the screen.

- `--glyphs FILE` loads a raw 16×32 bitmap font. The file holds 64 bytes per
  character: 32 rows of two bytes, with the most significant bit leftmost.
  Characters are indexed by character code.
- `--fps N` sets the frame rate limit. The default is 30.

## Using the library

```python
from tftui.display import VirtualDisplay, Font, get_color
from tftui.widgets import UI, UIStyle, Vec2, IntValue

display = VirtualDisplay()
style = UIStyle(
    font=Font(16, 32),
    button_color=get_color(31, 0, 0),
    text_color=get_color(31, 31, 31),
    slider_bg_color=get_color(0, 31, 0),
    slider_drag_color=get_color(0, 10, 0),
    slider_height=35,
    slider_drag_width=5,
    spacing=Vec2(5, 5),
)
ui = UI(display, style)

volume = IntValue(50)

ui.begin_group()
ui.button("Press me", lambda button_id: print("pressed", button_id), Vec2(0, 0))
ui.slider("volume %d", volume, 0, 100)
ui.end_group()

ui.set_group(0)
ui.draw_group()

display.press(120, 100)   # touch position in screen pixels
ui.update()
display.release()
print(volume.value)
```

### Widgets and layout

- Widgets are placed top to bottom, separated by `style.spacing.y`.
- `UI.sameline()` places the next text or button to the right of the previous
  widget.
- `UI.set_next_widget_pos(pos)` moves the layout cursor.
- A button with a zero `size` takes the size of its label.
- The slider label is a printf-style format such as `"value %d"`, and is cut to
  15 characters.
- A slider spans the display width.

Each group holds at most 8 buttons, 8 sliders and 8 texts, and there can be at
most 8 groups. Going over a limit raises `UIError`. Adding a widget when there
is no current group also raises `UIError`, and so does an empty slider range
(`ValueError`). `UI.set_group` raises `IndexError` for an unknown index.

`UI.draw_group()` clears the screen to colour 1 and redraws every widget of the
current group in the order it was declared.

### Touch input

`UI.update()` reads `VirtualDisplay.touch()`. Touches are raw panel
coordinates: x runs from 300 to 5500 and y from 300 to 6500.
`translate_coordinates` turns them into pixels. On the first update of a press,
`UI.update()` calls the callback of every button under the point, passing the
button's index. On every update while the press lasts, it moves any slider
under the point and redraws it. After each handled touch it sleeps for
`UI.tick_delay` seconds (0.05 by default). Set it to 0 to turn the delay off.

### Colours and rendering

Colours are 16-bit RGB565 values:

- `get_color(r, g, b)` packs 5-bit red, 6-bit green and 5-bit blue.
- `color_to_rgb` expands a colour to 8-bit channels.
- `VirtualDisplay.to_rgb()` returns the whole frame buffer as row-major RGB
  bytes.

The drawing primitives are `fill_screen`, `fill_rect`, `set_pixel`,
`draw_char` and `draw_string`. Text is drawn from its bottom-left corner.
Smaller fonts are sampled down from the 16×32 glyph cell.

## What it does not do

- It ships no font data. A `VirtualDisplay` created without `glyphs` draws
  every character blank, so labels stay invisible unless you pass a glyph table
  (or `--glyphs` to the demo).
- It drives no physical screen or touch controller. The only display is the
  in-memory `VirtualDisplay`, and touches come from `press` and `release`.