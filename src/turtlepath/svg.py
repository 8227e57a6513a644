"""SVG export of turtle drawings."""

import logging

from .config import Config
from .frame import fmt, frame_for
from .turtle import Canvas

logger = logging.getLogger(__name__)


class SvgExporter:
    """Exports turtle paths to an SVG document.

    Turtle coordinates are y-up while SVG is y-down, so every y is negated
    on the way out, viewBox included.
    """

    encoding = "utf-8"

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.style = self.config.style

    def export(self, canvas: Canvas) -> str:
        """Convert turtle paths to an SVG string."""
        p = self.style.precision
        box = frame_for(canvas, self.style)
        width, height = fmt(box.width, p), fmt(box.height, p)
        view_box = f"{fmt(box.min_x, p)} {fmt(-box.max_y, p)} {width} {height}"

        lines = ['<?xml version="1.0" encoding="UTF-8"?>']
        lines.append(
            '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" baseProfile="full" '
            f'width="{width}" height="{height}" viewBox="{view_box}">'
        )
        lines.append(
            f'  <g stroke="{self.style.stroke}" stroke-width="{fmt(self.style.stroke_width, p)}" '
            'fill="none" stroke-linecap="round" stroke-linejoin="round">'
        )

        paths = canvas.paths()
        for path in paths:
            head, *tail = path
            d = [f"M{fmt(head.x, p)} {fmt(-head.y, p)}"]
            d.extend(f"L{fmt(pt.x, p)} {fmt(-pt.y, p)}" for pt in tail)
            lines.append(f'    <path d="{" ".join(d)}" />')

        lines.append("  </g>")
        lines.append("</svg>")
        logger.debug("SVG: %d paths, viewBox %s", len(paths), view_box)
        return "\n".join(lines) + "\n"
