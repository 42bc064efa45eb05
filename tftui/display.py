"""An in-memory RGB565 display with a bitmap font renderer and a simulated touch panel."""

from __future__ import annotations

from dataclasses import dataclass

DISPLAY_WIDTH = 240
DISPLAY_HEIGHT = 320

GLYPH_WIDTH = 16
GLYPH_HEIGHT = 32
GLYPH_BYTES = GLYPH_HEIGHT * 2

TOUCH_X_RANGE = (300, 5500)
TOUCH_Y_RANGE = (300, 6500)

_BLANK_GLYPH = bytes(GLYPH_BYTES)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def map_range(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Linearly re-map an integer from one range onto another, truncating toward zero."""
    return _trunc_div((value - in_min) * (out_max - out_min), in_max - in_min) + out_min


def clamp(value: int, low: int, high: int) -> int:
    """Limit value to the closed interval [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def get_color(r: int, g: int, b: int) -> int:
    """Pack 5-bit red, 6-bit green and 5-bit blue components into an RGB565 value."""
    return ((r & 0x1F) << 11) | ((g & 0x3F) << 5) | (b & 0x1F)


def color_to_rgb(color: int) -> tuple[int, int, int]:
    """Expand an RGB565 value to 8-bit channels, scaling every channel by 255/31."""
    r = (color >> 11) & 0x1F
    g = (color >> 5) & 0x3F
    b = color & 0x1F
    return tuple(min(channel * 255 // 31, 255) for channel in (r, g, b))  # type: ignore[return-value]


@dataclass(frozen=True)
class Font:
    """Nominal cell size of a font; glyphs are scaled down from the 16x32 master."""

    size_x: int
    size_y: int

    def __post_init__(self) -> None:
        if self.size_x <= 0 or self.size_y <= 0:
            raise ValueError(f"font size must be positive, got {self.size_x}x{self.size_y}")


class VirtualDisplay:
    """A frame buffer of RGB565 pixels with drawing primitives and touch input."""

    def __init__(
        self,
        width: int = DISPLAY_WIDTH,
        height: int = DISPLAY_HEIGHT,
        glyphs: bytes = b"",
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"display size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.glyphs = bytes(glyphs)
        self._pixels = [0] * (width * height)
        self._touch_x = -1
        self._touch_y = -1

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int) -> int:
        """Return the colour stored at (x, y)."""
        if not self._in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} display")
        return self._pixels[y * self.width + x]

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store a colour at (x, y); points outside the display are clipped."""
        if self._in_bounds(x, y):
            self._pixels[y * self.width + x] = color & 0xFFFF

    def fill_screen(self, color: int) -> None:
        """Paint the whole display in one colour."""
        self._pixels = [color & 0xFFFF] * (self.width * self.height)

    def fill_rect(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Fill the rectangle [x1, x2) x [y1, y2)."""
        for x in range(x1, x2):
            for y in range(y1, y2):
                self.set_pixel(x, y, color)

    def _glyph(self, code: int) -> bytes:
        start = code * GLYPH_BYTES
        glyph = self.glyphs[start:start + GLYPH_BYTES]
        return glyph if len(glyph) == GLYPH_BYTES else _BLANK_GLYPH

    def draw_char(self, font: Font, x: int, y: int, char: str | int, color: int) -> None:
        """Draw one character with its bottom-left corner at (x, y)."""
        code = ord(char) if isinstance(char, str) else char
        step_row = GLYPH_HEIGHT // font.size_y
        step_col = GLYPH_WIDTH // font.size_x
        if step_row == 0 or step_col == 0:
            raise ValueError(
                f"font {font.size_x}x{font.size_y} exceeds the {GLYPH_WIDTH}x{GLYPH_HEIGHT} glyph cell"
            )
        glyph = self._glyph(code)
        for row in range(0, GLYPH_HEIGHT, step_row):
            bits = (glyph[row * 2] << 8) | glyph[row * 2 + 1]
            for col in range(0, GLYPH_WIDTH, step_col):
                if bits & (1 << (15 - col)):
                    self.set_pixel(
                        x + col // step_col,
                        y + row // step_row - font.size_y,
                        color,
                    )

    def draw_string(self, font: Font, x: int, y: int, text: str | bytes, color: int) -> None:
        """Draw text left to right, one font cell per character."""
        for offset, char in enumerate(text):
            self.draw_char(font, x + offset * font.size_x, y, char, color)

    def font_metrics(self, font: Font) -> tuple[int, int]:
        """Return the width and height of one character cell."""
        return font.size_x, font.size_y

    def touch(self) -> tuple[int, int] | None:
        """Return the raw touch-panel coordinates, or None when nothing is pressed."""
        if self._touch_x > 0 and self._touch_y > 0:
            return self._touch_x, self._touch_y
        return None

    def press(self, x: int, y: int) -> None:
        """Register a press at display pixel (x, y), converted to touch-panel units."""
        self._touch_x = map_range(x, 0, self.width, *TOUCH_X_RANGE)
        self._touch_y = map_range(y, 0, self.height, *TOUCH_Y_RANGE)

    def release(self) -> None:
        """End the current press."""
        self._touch_x = -1
        self._touch_y = -1

    def to_rgb(self) -> bytes:
        """Render the frame buffer as row-major 8-bit RGB bytes."""
        cache: dict[int, tuple[int, int, int]] = {}
        out = bytearray()
        for color in self._pixels:
            rgb = cache.get(color)
            if rgb is None:
                rgb = cache[color] = color_to_rgb(color)
            out.extend(rgb)
        return bytes(out)