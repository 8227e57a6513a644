"""Shared helpers for laying out and formatting exported drawings."""

from .config import StyleConfig
from .turtle import BoundingBox, Canvas


def frame_for(canvas: Canvas, style: StyleConfig) -> BoundingBox:
    """Padded page frame around everything drawn on ``canvas``.

    Never zero-sized, so an empty canvas still exports a valid document.
    """
    return canvas.bounds().padded(style.padding, style.min_extent)


def fmt(x: float, precision: int) -> str:
    """Fixed-point number with trailing zeros stripped and no ``-0``."""
    s = f"{x:.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s in ("-0", ""):
        s = "0"
    return s
