"""GCode generation from turtle paths."""

import logging

from .config import Config
from .frame import fmt
from .turtle import Canvas

logger = logging.getLogger(__name__)


class GcodeExporter:
    """Exports turtle paths to gcode for a servo-lifted pen plotter."""

    encoding = "ascii"

    def __init__(self, config: Config | None = None, comment: str = ""):
        self.config = config or Config()
        self.pen = self.config.pen
        self.wa = self.config.work_area
        self.style = self.config.style
        self.comment = comment

    def export(self, canvas: Canvas) -> str:
        """Convert turtle paths to a gcode string."""
        p = self.style.precision
        lines = []

        if self.comment:
            lines.append(f"; {self.comment}")
        lines.append("; turtlepath")
        lines.append("")
        lines.append("G21 ; mm")
        lines.append("G90 ; absolute")
        lines.append(f"M280 P0 S{self.pen.up_angle} ; pen up")
        lines.append("G28 ; home")
        lines.append("")

        self._check_work_area(canvas)

        for path in canvas.paths():
            # Move to start with pen up
            start, *rest = path
            lines.append(f"G0 X{fmt(start.x, p)} Y{fmt(start.y, p)} F{self.pen.travel_speed}")
            lines.append(f"M280 P0 S{self.pen.down_angle} ; pen down")

            for pt in rest:
                lines.append(f"G1 X{fmt(pt.x, p)} Y{fmt(pt.y, p)} F{self.pen.draw_speed}")

            lines.append(f"M280 P0 S{self.pen.up_angle} ; pen up")
            lines.append("")

        # Footer
        lines.append("G0 X0 Y0 F{} ; return home".format(self.pen.travel_speed))
        lines.append(f"M280 P0 S{self.pen.up_angle} ; pen up")
        lines.append("M84 ; motors off")

        return "\n".join(lines) + "\n"

    def _check_work_area(self, canvas: Canvas):
        """Log a warning when the drawing leaves the machine's work area."""
        if not canvas.segments:
            return
        box = canvas.bounds()
        inside = (
            box.min_x >= self.wa.left
            and box.max_x <= self.wa.right
            and box.min_y >= self.wa.bottom
            and box.max_y <= self.wa.top
        )
        if not inside:
            logger.warning(
                "Drawing X[%.2f, %.2f] Y[%.2f, %.2f] exceeds work area X[%s, %s] Y[%s, %s]",
                box.min_x,
                box.max_x,
                box.min_y,
                box.max_y,
                self.wa.left,
                self.wa.right,
                self.wa.bottom,
                self.wa.top,
            )
