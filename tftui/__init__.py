"""Immediate-mode widgets for small RGB565 touch displays, with a virtual display and a demo."""

__version__ = "0.1.0"
__all__ = ["display", "widgets", "app"]