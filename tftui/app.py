"""Two-screen demo: a button and a slider on one screen, a button and text on the other."""

from __future__ import annotations

import argparse
from pathlib import Path

from tftui.display import Font, VirtualDisplay, get_color
from tftui.widgets import UI, IntValue, UIStyle, Vec2

FRAME_RATE = 30


class DemoApp:
    """Builds the demo widget groups on a display and flips between them."""

    def __init__(self, display: VirtualDisplay) -> None:
        self.display = display
        self.font_small = Font(8, 16)
        self.font_medium = Font(12, 24)
        self.font_large = Font(16, 32)
        self.slider_value = IntValue(50)
        self.group = 0

        self.style = UIStyle(
            font=self.font_large,
            text_color=get_color(31, 31, 31),
            button_color=get_color(31, 0, 0),
            slider_bg_color=get_color(0, 31, 0),
            slider_drag_color=get_color(0, 10, 0),
            slider_height=35,
            slider_drag_width=5,
            spacing=Vec2(5, 5),
            padding=10,
        )
        self.ui = UI(display, self.style)
        self._build()

    def _build(self) -> None:
        ui = self.ui
        fit_to_label = Vec2(0, 0)

        ui.begin_group()
        self.style.font = self.font_large
        ui.button("Go to second", self.toggle_group, fit_to_label)
        ui.slider("label %d", self.slider_value, 0, 100)
        ui.end_group()

        ui.begin_group()
        self.style.font = self.font_large
        ui.button("Go to first", self.toggle_group, fit_to_label)
        ui.text("Information")
        ui.end_group()

        ui.set_group(0)
        ui.draw_group()

    def toggle_group(self, button_id: int) -> None:
        """Switch to the other screen and redraw it."""
        self.group ^= 1
        self.ui.set_group(self.group)
        self.ui.draw_group()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the touch display widget demo in a window.")
    parser.add_argument(
        "--glyphs",
        type=Path,
        help="raw 16x32 bitmap font: 64 bytes per character, indexed by character code",
    )
    parser.add_argument("--fps", type=int, default=FRAME_RATE, help="frame rate limit")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open a window showing the demo and feed mouse presses to it as touches."""
    args = _parse_args(argv)
    glyphs = args.glyphs.read_bytes() if args.glyphs else b""

    import pygame

    display = VirtualDisplay(glyphs=glyphs)
    app = DemoApp(display)
    size = (display.width, display.height)

    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("tftui")
        clock = pygame.time.Clock()
        pressing = False
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == pygame.MOUSEBUTTONDOWN:
                    pressing = True
                elif event.type == pygame.MOUSEBUTTONUP:
                    display.release()
                    pressing = False
                if pressing:
                    display.press(*pygame.mouse.get_pos())
            if not running:
                break

            app.ui.update()

            frame = pygame.image.frombuffer(display.to_rgb(), size, "RGB")
            screen.blit(frame, (0, 0))
            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())