"""Encapsulated PostScript export of turtle drawings."""

import logging
import math

from .config import Config
from .frame import fmt, frame_for
from .turtle import Canvas

logger = logging.getLogger(__name__)


class EpsExporter:
    """Exports turtle paths to an EPS document.

    PostScript is y-up like the turtle, so coordinates are written as is.
    """

    encoding = "ascii"

    def __init__(self, config: Config | None = None, title: str = "turtlepath"):
        self.config = config or Config()
        self.style = self.config.style
        self.title = title

    def export(self, canvas: Canvas) -> str:
        """Convert turtle paths to an EPS string."""
        p = self.style.precision
        box = frame_for(canvas, self.style)
        r, g, b = self.style.stroke_rgb()

        lines = [
            "%!PS-Adobe-3.0 EPSF-3.0",
            "%%Creator: turtlepath",
            f"%%Title: {self.title}",
            "%%BoundingBox: {} {} {} {}".format(
                math.floor(box.min_x),
                math.floor(box.min_y),
                math.ceil(box.max_x),
                math.ceil(box.max_y),
            ),
            f"%%HiResBoundingBox: {fmt(box.min_x, p)} {fmt(box.min_y, p)} "
            f"{fmt(box.max_x, p)} {fmt(box.max_y, p)}",
            "%%Pages: 1",
            "%%EndComments",
            "gsave",
            f"{fmt(self.style.stroke_width, p)} setlinewidth",
            f"{fmt(r, p)} {fmt(g, p)} {fmt(b, p)} setrgbcolor",
            "1 setlinecap",
            "1 setlinejoin",
        ]

        paths = canvas.paths()
        for path in paths:
            head, *tail = path
            lines.append("newpath")
            lines.append(f"{fmt(head.x, p)} {fmt(head.y, p)} moveto")
            lines.extend(f"{fmt(pt.x, p)} {fmt(pt.y, p)} lineto" for pt in tail)
            lines.append("stroke")

        lines += ["grestore", "showpage", "%%EOF"]
        logger.debug("EPS: %d paths, bounding box %s", len(paths), lines[3])
        return "\n".join(lines) + "\n"
