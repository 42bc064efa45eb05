import pytest

from tftui.display import Font, VirtualDisplay
from tftui.widgets import (
    MAX_BUTTONS,
    MAX_GROUPS,
    UI,
    IntValue,
    UIError,
    UIStyle,
    Vec2,
    WidgetType,
    translate_coordinates,
)

GLYPH_A = bytes(65 * 64) + b"\xff" * 64

BUTTON_COLOR = 0xF800
TEXT_COLOR = 0xFFFF
SLIDER_BG = 0x07E0
DRAG_COLOR = 0x0140


def make_style():
    return UIStyle(
        font=Font(8, 16),
        bg_color=0,
        text_color=TEXT_COLOR,
        button_color=BUTTON_COLOR,
        slider_bg_color=SLIDER_BG,
        slider_drag_color=DRAG_COLOR,
        slider_height=35,
        slider_drag_width=5,
        spacing=Vec2(5, 5),
    )


@pytest.fixture
def display():
    return VirtualDisplay(glyphs=GLYPH_A)


@pytest.fixture
def ui(display):
    interface = UI(display, make_style())
    interface.tick_delay = 0
    return interface


def test_vec2_size():
    a = Vec2(0, 0)
    assert a.x == 0
    assert a.y == 0


def test_vec2_addition():
    assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ((300, 300), (0, 0)),
        ((5500, 6500), (240, 320)),
        ((2900, 3400), (120, 160)),
        ((0, 0), (0, 0)),
        ((10000, 10000), (240, 320)),
    ],
)
def test_translate_coordinates(raw, expected):
    assert translate_coordinates(*raw) == expected


def test_widget_without_group_raises(ui):
    with pytest.raises(UIError):
        ui.text("hello")


def test_layout_stacks_widgets_vertically(ui):
    ui.begin_group()
    ui.button("OK", lambda i: None, Vec2(0, 0))
    ui.text("Info")
    ui.end_group()
    group = ui.groups[0]
    assert group.buttons[0].position == Vec2(0, 0)
    assert group.buttons[0].size == Vec2(16, 16)
    assert group.texts[0].position == Vec2(0, 21)
    assert group.order == [WidgetType.BUTTON, WidgetType.TEXT]
    assert len(group) == 2


def test_sameline_places_widget_to_the_right(ui):
    ui.begin_group()
    ui.button("OK", lambda i: None, Vec2(0, 0))
    ui.sameline()
    ui.text("Info")
    ui.text("Next")
    ui.end_group()
    group = ui.groups[0]
    assert group.texts[0].position == Vec2(21, 0)
    assert group.texts[1].position == Vec2(0, 21)


def test_button_explicit_size(ui):
    ui.begin_group()
    ui.button("OK", lambda i: None, Vec2(50, 30))
    ui.end_group()
    assert ui.groups[0].buttons[0].size == Vec2(50, 30)


def test_end_group_resets_cursor(ui):
    ui.begin_group()
    ui.text("Info")
    assert ui.cursor_pos == Vec2(0, 21)
    ui.end_group()
    assert ui.cursor_pos == Vec2(0, 0)


def test_max_buttons(ui):
    ui.begin_group()
    for _ in range(MAX_BUTTONS):
        ui.button("B", lambda i: None, Vec2(0, 0))
    with pytest.raises(UIError):
        ui.button("B", lambda i: None, Vec2(0, 0))
    assert len(ui.groups[0].buttons) == MAX_BUTTONS


def test_max_groups(ui):
    for _ in range(MAX_GROUPS):
        ui.begin_group()
        ui.end_group()
    with pytest.raises(UIError):
        ui.begin_group()


def test_set_group_invalid_index(ui):
    ui.begin_group()
    ui.end_group()
    with pytest.raises(IndexError):
        ui.set_group(1)


def test_slider_empty_range_raises(ui):
    ui.begin_group()
    with pytest.raises(ValueError):
        ui.slider("v %d", IntValue(1), 5, 5)


def test_slider_label_formatted_and_truncated(ui):
    ui.begin_group()
    ui.slider("v %d", IntValue(42), 0, 100)
    ui.slider("abcdefghijklmnop %d", IntValue(7), 0, 100)
    ui.end_group()
    sliders = ui.groups[0].sliders
    assert sliders[0].label == "v 42"
    assert sliders[1].label == "abcdefghijklmno"
    assert sliders[0].size == Vec2(240, 51)
    assert sliders[1].position == Vec2(0, 56)


def test_draw_group_draws_button_and_text(ui, display):
    ui.begin_group()
    ui.button("OK", lambda i: None, Vec2(0, 0))
    ui.text("A")
    ui.end_group()
    ui.set_group(0)
    ui.draw_group()
    assert display.pixel(1, 1) == BUTTON_COLOR
    assert display.pixel(3, 24) == TEXT_COLOR
    assert display.pixel(200, 300) == 1
    assert len(ui.groups[0]) == 2
    assert ui.draw_widgets is False


def test_draw_group_draws_slider_grabber(ui, display):
    ui.begin_group()
    ui.slider("v %d", IntValue(50), 0, 100)
    ui.end_group()
    ui.set_group(0)
    ui.draw_group()
    assert display.pixel(121, 20) == DRAG_COLOR
    assert display.pixel(10, 20) == SLIDER_BG


def test_update_button_fires_once_per_press(ui, display):
    presses = []
    ui.begin_group()
    ui.button("OK", presses.append, Vec2(0, 0))
    ui.end_group()
    ui.set_group(0)
    display.press(5, 5)
    ui.update()
    ui.update()
    assert presses == [0]
    display.release()
    ui.update()
    display.press(5, 5)
    ui.update()
    assert presses == [0, 0]


def test_update_miss_does_not_fire(ui, display):
    presses = []
    ui.begin_group()
    ui.button("OK", presses.append, Vec2(0, 0))
    ui.end_group()
    ui.set_group(0)
    display.press(200, 300)
    ui.update()
    assert presses == []


def test_update_moves_slider(ui, display):
    value = IntValue(50)
    ui.begin_group()
    ui.slider("v %d", value, 0, 100)
    ui.end_group()
    ui.set_group(0)
    ui.draw_group()
    display.press(60, 30)
    ui.update()
    assert value.value == 25
    assert ui.groups[0].sliders[0].label == "v 25"
    assert display.pixel(61, 20) == DRAG_COLOR
    assert display.pixel(121, 20) == SLIDER_BG


def test_button_callback_switches_group(ui, display):
    def toggle(_):
        ui.set_group(1 if ui.current_group is ui.groups[0] else 0)
        ui.draw_group()

    ui.begin_group()
    ui.button("Second", toggle, Vec2(0, 0))
    ui.end_group()
    ui.begin_group()
    ui.button("First", toggle, Vec2(0, 0))
    ui.text("A")
    ui.end_group()
    ui.set_group(0)
    ui.draw_group()
    display.press(5, 5)
    ui.update()
    assert ui.current_group is ui.groups[1]
    assert display.pixel(3, 24) == TEXT_COLOR