"""Turtle graphics state machine and path accumulation."""

import math
from dataclasses import dataclass, field, replace
from typing import BinaryIO


class TurtleError(ValueError):
    """Raised for invalid turtle commands (non-finite input, empty state stack)."""


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y


ORIGIN = Point()


@dataclass(frozen=True)
class Segment:
    """A drawn line between two points."""

    start: Point
    end: Point

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


@dataclass(frozen=True)
class BoundingBox:
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, p: Point) -> bool:
        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y

    def padded(self, padding: float, min_extent: float = 0.0) -> "BoundingBox":
        """Grow each axis to at least ``min_extent``, then pad by a fraction of it."""
        min_x, max_x = _widen(self.min_x, self.max_x, min_extent)
        min_y, max_y = _widen(self.min_y, self.max_y, min_extent)
        pad_x = (max_x - min_x) * padding
        pad_y = (max_y - min_y) * padding
        return BoundingBox(min_x - pad_x, min_y - pad_y, max_x + pad_x, max_y + pad_y)


def _widen(lo: float, hi: float, extent: float) -> tuple[float, float]:
    if hi - lo >= extent:
        return lo, hi
    center = (lo + hi) / 2
    return center - extent / 2, center + extent / 2


@dataclass
class TurtleState:
    position: Point = ORIGIN
    heading: float = 0.0
    pen_down: bool = True


def _finite(value, what: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise TurtleError(f"{what} must be a number, got {value!r}") from None
    if not math.isfinite(value):
        raise TurtleError(f"{what} must be finite, got {value}")
    return value


def normalize_heading(degrees: float) -> float:
    heading = degrees % 360.0
    # tiny negative angles round up to exactly 360.0
    return 0.0 if heading >= 360.0 else heading


@dataclass
class Canvas:
    """Turtle graphics state machine.

    Headings follow the compass convention: 0 degrees points up (+y) and
    ``right`` turns clockwise. Only pen-down moves produce segments.
    """

    _states: list[TurtleState] = field(default_factory=lambda: [TurtleState()])
    _segments: list[Segment] = field(default_factory=list)
    # indices into _segments where a new path begins
    _breaks: set[int] = field(default_factory=set)

    @property
    def _state(self) -> TurtleState:
        return self._states[-1]

    @property
    def position(self) -> Point:
        return self._state.position

    @property
    def heading(self) -> float:
        return self._state.heading

    @property
    def is_down(self) -> bool:
        return self._state.pen_down

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    # movement

    def forward(self, distance: float):
        distance = _finite(distance, "distance")
        rad = math.radians(self.heading)
        src = self.position
        dst = Point(src.x + distance * math.sin(rad), src.y + distance * math.cos(rad))
        if not (math.isfinite(dst.x) and math.isfinite(dst.y)):
            raise TurtleError(f"moving {distance} from {src} leaves the finite plane")
        if self.is_down:
            self._segments.append(Segment(src, dst))
        self._state.position = dst

    def backward(self, distance: float):
        self.forward(-_finite(distance, "distance"))

    def right(self, degrees: float):
        degrees = _finite(degrees, "angle")
        self._state.heading = normalize_heading(self.heading + degrees)

    def left(self, degrees: float):
        degrees = _finite(degrees, "angle")
        self._state.heading = normalize_heading(self.heading - degrees)

    def pen_up(self):
        if self.is_down:
            self._break_path()
        self._state.pen_down = False

    def pen_down(self):
        self._state.pen_down = True

    def goto(self, x: float | Point, y: float | None = None):
        """Jump to an absolute position without drawing."""
        if isinstance(x, Point):
            x, y = x.x, x.y
        elif y is None:
            raise TurtleError("goto needs a Point or both x and y")
        dst = Point(_finite(x, "x"), _finite(y, "y"))
        self._state.position = dst
        self._break_path()

    def home(self):
        self.goto(ORIGIN)

    def push(self):
        """Save position, heading and pen state."""
        self._states.append(replace(self._state))

    def pop(self):
        """Restore the state saved by the matching ``push``."""
        if len(self._states) < 2:
            raise TurtleError("pop without matching push")
        self._states.pop()
        self._break_path()

    def _break_path(self):
        self._breaks.add(len(self._segments))

    # inspection

    def paths(self) -> list[list[Point]]:
        """Group consecutive connected segments into polylines."""
        paths: list[list[Point]] = []
        for i, seg in enumerate(self._segments):
            if paths and i not in self._breaks and paths[-1][-1] == seg.start:
                paths[-1].append(seg.end)
            else:
                paths.append([seg.start, seg.end])
        return paths

    def bounds(self) -> BoundingBox:
        if not self._segments:
            return BoundingBox()
        xs = [p.x for seg in self._segments for p in (seg.start, seg.end)]
        ys = [p.y for seg in self._segments for p in (seg.start, seg.end)]
        return BoundingBox(min(xs), min(ys), max(xs), max(ys))

    # export

    def save_svg(self, sink: BinaryIO, config=None):
        from .export import ExportFormat, write

        write(self, sink, ExportFormat.SVG, config)

    def save_eps(self, sink: BinaryIO, config=None):
        from .export import ExportFormat, write

        write(self, sink, ExportFormat.EPS, config)

    def save_gcode(self, sink: BinaryIO, config=None):
        from .export import ExportFormat, write

        write(self, sink, ExportFormat.GCODE, config)

    def save(self, path, fmt=None, config=None):
        """Write to a file, picking the format from the suffix unless given."""
        from .export import save

        return save(self, path, fmt, config)
