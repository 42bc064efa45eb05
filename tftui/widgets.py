"""Immediate-mode widgets (buttons, sliders, text) laid out on a touch display."""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from tftui.display import (
    DISPLAY_HEIGHT,
    DISPLAY_WIDTH,
    TOUCH_X_RANGE,
    TOUCH_Y_RANGE,
    Font,
    VirtualDisplay,
    clamp,
    map_range,
)

log = logging.getLogger(__name__)

MAX_BUTTONS = 8
MAX_SLIDERS = 8
MAX_TEXTS = 8
MAX_GROUPS = 8

SLIDER_LABEL_LENGTH = 15
SCREEN_CLEAR_COLOR = 1

ButtonCallback = Callable[[int], None]


class UIError(Exception):
    """Raised when a widget cannot be created or a group cannot be used."""


@dataclass(frozen=True)
class Vec2:
    """A 2D integer vector."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)


@dataclass
class IntValue:
    """A mutable integer shared between a slider and its owner."""

    value: int = 0


@dataclass
class UIStyle:
    """Colours, font and spacing used when laying out and drawing widgets."""

    font: Font = field(default_factory=lambda: Font(16, 32))
    bg_color: int = 0
    text_color: int = 0
    button_color: int = 0
    button_padding: int = 0
    slider_bg_color: int = 0
    slider_drag_color: int = 0
    slider_height: int = 0
    slider_drag_width: int = 0
    spacing: Vec2 = field(default_factory=Vec2)
    padding: int = 0


class WidgetType(enum.Enum):
    BUTTON = enum.auto()
    SLIDER = enum.auto()
    TEXT = enum.auto()


@dataclass
class ButtonInfo:
    label: str
    callback: ButtonCallback
    position: Vec2
    size: Vec2
    font: Font


@dataclass
class SliderInfo:
    id: int
    format: str
    label: str
    value: IntValue
    min_value: int
    max_value: int
    position: Vec2
    size: Vec2
    slider_pos: Vec2
    font: Font


@dataclass
class TextInfo:
    label: str
    position: Vec2
    size: Vec2
    font: Font


@dataclass
class WidgetGroup:
    """The widgets of one screen, in the order they were declared."""

    buttons: list[ButtonInfo] = field(default_factory=list)
    sliders: list[SliderInfo] = field(default_factory=list)
    texts: list[TextInfo] = field(default_factory=list)
    order: list[WidgetType] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.order)

    def clear(self) -> None:
        self.buttons.clear()
        self.sliders.clear()
        self.texts.clear()
        self.order.clear()


def translate_coordinates(x: int, y: int) -> tuple[int, int]:
    """Convert raw touch-panel coordinates to display pixels."""
    px = clamp(map_range(x, *TOUCH_X_RANGE, 0, DISPLAY_WIDTH), 0, DISPLAY_WIDTH)
    py = clamp(map_range(y, *TOUCH_Y_RANGE, 0, DISPLAY_HEIGHT), 0, DISPLAY_HEIGHT)
    return px, py


def _point_in_rect(x: int, y: int, pos: Vec2, size: Vec2) -> bool:
    return pos.x <= x <= pos.x + size.x and pos.y <= y <= pos.y + size.y


def _format_label(fmt: str, value: int) -> str:
    try:
        text = fmt % value
    except TypeError:
        text = fmt
    return text[:SLIDER_LABEL_LENGTH]


class UI:
    """Builds widget groups, draws the current one and reacts to touches."""

    tick_delay = 0.05

    def __init__(self, display: VirtualDisplay, style: UIStyle) -> None:
        self.display = display
        self.style = style
        self.groups: list[WidgetGroup] = []
        self.current_group: WidgetGroup | None = None
        self.cursor_pos = Vec2()
        self.previous_cursor_pos = Vec2()
        self.previous_widget_size = Vec2()
        self.draw_widgets = False
        self._sameline = False
        self._click_timer = 0
        display.fill_screen(style.bg_color)

    # layout helpers

    def _reset_context(self) -> None:
        self.cursor_pos = Vec2()
        self.previous_cursor_pos = Vec2()
        self.previous_widget_size = Vec2()
        self.draw_widgets = False
        self._sameline = False

    def _text_size(self, text: str) -> Vec2:
        width, height = self.display.font_metrics(self.style.font)
        return Vec2(width * len(text), height)

    def _draw_string(self, text: str, x: int, y: int) -> None:
        self.display.draw_string(self.style.font, x, y, text, self.style.text_color)

    def _advance_cursor(self, size: Vec2) -> None:
        self.previous_cursor_pos = self.cursor_pos
        self.previous_widget_size = size
        if not self._sameline:
            self.cursor_pos = Vec2(
                self.cursor_pos.x, self.cursor_pos.y + size.y + self.style.spacing.y
            )
        self._sameline = False

    def _sameline_position(self) -> Vec2:
        return Vec2(
            self.previous_cursor_pos.x + self.previous_widget_size.x + self.style.spacing.x,
            self.previous_cursor_pos.y,
        )

    def _require_group(self, kind: str, label: str) -> WidgetGroup:
        if self.current_group is None:
            raise UIError(f"no widget group to add {kind} to: {label!r}")
        return self.current_group

    # groups

    def begin_group(self) -> None:
        """Start collecting widgets into a new group."""
        if len(self.groups) >= MAX_GROUPS:
            raise UIError(f"maximum of {MAX_GROUPS} widget groups reached")
        group = WidgetGroup()
        self.groups.append(group)
        self.current_group = group

    def end_group(self) -> None:
        """Finish the group being built and reset the layout cursor."""
        group = self._require_group("end", "group")
        log.debug(
            "end group: buttons=%d sliders=%d texts=%d",
            len(group.buttons), len(group.sliders), len(group.texts),
        )
        self.cursor_pos = Vec2()
        self.previous_cursor_pos = Vec2()

    def set_group(self, index: int) -> None:
        """Make the group at index the current one."""
        if not 0 <= index < len(self.groups):
            raise IndexError(f"no widget group {index}")
        self.current_group = self.groups[index]

    def draw_group(self) -> None:
        """Clear the screen and draw every widget of the current group."""
        group = self._require_group("draw", "group")
        self.display.fill_screen(SCREEN_CLEAR_COLOR)
        self._reset_context()
        self.draw_widgets = True

        buttons = iter(list(group.buttons))
        sliders = iter(list(group.sliders))
        texts = iter(list(group.texts))
        order = list(group.order)
        group.clear()

        try:
            for kind in order:
                if kind is WidgetType.BUTTON:
                    button = next(buttons)
                    self.style.font = button.font
                    self.set_next_widget_pos(button.position)
                    self.button(button.label, button.callback, button.size)
                elif kind is WidgetType.SLIDER:
                    slider = next(sliders)
                    self.style.font = slider.font
                    self.set_next_widget_pos(slider.position)
                    self.slider(slider.format, slider.value, slider.min_value, slider.max_value)
                else:
                    text = next(texts)
                    self.style.font = text.font
                    self.set_next_widget_pos(text.position)
                    self.text(text.label)
        finally:
            self.draw_widgets = False

    # widgets

    def sameline(self) -> None:
        """Place the next widget to the right of the previous one."""
        self._sameline = True

    def set_next_widget_pos(self, pos: Vec2) -> None:
        """Move the layout cursor to pos."""
        self.previous_cursor_pos = self.cursor_pos
        self.cursor_pos = pos

    def text(self, label: str) -> None:
        """Add a line of text."""
        group = self._require_group("text", label)
        if len(group.texts) >= MAX_TEXTS:
            raise UIError(f"maximum of {MAX_TEXTS} texts reached")

        size = self._text_size(label)
        position = self._sameline_position() if self._sameline else self.cursor_pos
        info = TextInfo(label=label, position=position, size=size, font=self.style.font)

        if self.draw_widgets:
            self._draw_string(label, position.x, position.y + size.y)

        group.texts.append(info)
        group.order.append(WidgetType.TEXT)
        self._advance_cursor(size)

    def button(self, label: str, callback: ButtonCallback, size: Vec2) -> None:
        """Add a button; a zero size fits the button to its label."""
        group = self._require_group("button", label)
        if len(group.buttons) >= MAX_BUTTONS:
            raise UIError(f"maximum of {MAX_BUTTONS} buttons reached")

        position = self._sameline_position() if self._sameline else self.cursor_pos
        if size.x == 0 or size.y == 0:
            size = self._text_size(label)
        info = ButtonInfo(
            label=label, callback=callback, position=position, size=size, font=self.style.font
        )

        if self.draw_widgets:
            padding = self.style.button_padding
            self.display.fill_rect(
                position.x, position.y,
                position.x + size.x + padding, position.y + size.y,
                self.style.button_color,
            )
            self._draw_string(label, position.x + padding, position.y + size.y)

        group.buttons.append(info)
        group.order.append(WidgetType.BUTTON)
        self._advance_cursor(size)

    def slider(self, label: str, value: IntValue, min_value: int, max_value: int) -> None:
        """Add a horizontal slider; label is a printf-style format for the value."""
        group = self._require_group("slider", label)
        if len(group.sliders) >= MAX_SLIDERS:
            raise UIError(f"maximum of {MAX_SLIDERS} sliders reached")
        if min_value == max_value:
            raise ValueError("slider range must not be empty")

        style = self.style
        position = self.cursor_pos
        label_height = self._text_size(label).y
        info = SliderInfo(
            id=len(group.sliders),
            format=label,
            label=_format_label(label, value.value),
            value=value,
            min_value=min_value,
            max_value=max_value,
            position=position,
            size=Vec2(self.display.width, style.slider_height),
            slider_pos=Vec2(position.x, position.y + label_height),
            font=style.font,
        )

        if self.draw_widgets:
            self._draw_string(info.label, position.x, position.y + label_height)
            self.display.fill_rect(
                info.slider_pos.x, info.slider_pos.y,
                info.size.x, info.slider_pos.y + info.size.y,
                style.slider_bg_color,
            )
            self._draw_grabber(info, style.slider_drag_color)

        info.size = Vec2(info.size.x, info.size.y + label_height)
        group.sliders.append(info)
        group.order.append(WidgetType.SLIDER)
        self._advance_cursor(info.size)

    def _draw_grabber(self, slider: SliderInfo, color: int) -> None:
        drag_x = map_range(
            slider.value.value, slider.min_value, slider.max_value,
            slider.position.x, slider.size.x,
        )
        drag_y = slider.slider_pos.y
        self.display.fill_rect(
            drag_x, drag_y,
            drag_x + self.style.slider_drag_width, drag_y + self.style.slider_height,
            color,
        )

    def _update_slider(self, slider: SliderInfo, press_x: int) -> None:
        style = self.style
        self._draw_grabber(slider, style.slider_bg_color)

        new_value = map_range(
            press_x, slider.position.x, slider.size.x, slider.min_value, slider.max_value
        )
        slider.value.value = clamp(new_value, slider.min_value, slider.max_value)

        old_size = self._text_size(slider.label)
        self.display.fill_rect(
            slider.position.x, slider.position.y + 2,
            slider.position.x + old_size.x, slider.position.y + old_size.y - 1,
            style.bg_color,
        )
        slider.label = _format_label(slider.format, slider.value.value)
        self._draw_string(slider.label, slider.position.x, slider.position.y + old_size.y)
        log.debug("slider %d value %d", slider.id, slider.value.value)

        self._draw_grabber(slider, style.slider_drag_color)

    # input

    def update(self) -> None:
        """Poll the touch panel and dispatch presses to the current group's widgets."""
        if self.current_group is None:
            log.debug("no widget group selected, nothing will be drawn")
            return

        touch = self.display.touch()
        if touch is None:
            self._click_timer = 0
            return

        clicked = self._click_timer == 0
        if clicked:
            self._click_timer += 1

        x, y = translate_coordinates(*touch)
        log.debug("pressed at %d %d", x, y)

        if clicked:
            for index, button in enumerate(list(self.current_group.buttons)):
                if _point_in_rect(x, y, button.position, button.size):
                    log.debug("button %d pressed", index)
                    button.callback(index)

        for slider in list(self.current_group.sliders):
            if _point_in_rect(x, y, slider.position, slider.size):
                self._update_slider(slider, x)

        if self.tick_delay > 0:
            time.sleep(self.tick_delay)