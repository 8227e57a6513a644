"""Export formats and the exporter registry."""

import logging
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from .config import Config
from .eps import EpsExporter
from .gcode import GcodeExporter
from .svg import SvgExporter
from .turtle import Canvas

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    SVG = "svg"  # Scalable Vector Graphics
    EPS = "eps"  # Encapsulated PostScript
    GCODE = "gcode"  # pen plotter


EXPORTERS = {
    ExportFormat.SVG: SvgExporter,
    ExportFormat.EPS: EpsExporter,
    ExportFormat.GCODE: GcodeExporter,
}

SUFFIXES = {
    ".svg": ExportFormat.SVG,
    ".eps": ExportFormat.EPS,
    ".gcode": ExportFormat.GCODE,
    ".nc": ExportFormat.GCODE,
}


def as_format(fmt: ExportFormat | str) -> ExportFormat:
    try:
        return ExportFormat(fmt.lower())
    except ValueError:
        choices = ", ".join(f.value for f in ExportFormat)
        raise ValueError(f"Unknown export format {fmt!r} (choose from {choices})") from None


def get_exporter(fmt: ExportFormat | str, config: Config | None = None):
    """Exporter instance for ``fmt`` (an ExportFormat or its name)."""
    return EXPORTERS[as_format(fmt)](config)


def format_for_path(path: str | Path) -> ExportFormat:
    suffix = Path(path).suffix.lower()
    if suffix not in SUFFIXES:
        raise ValueError(f"Cannot infer export format from {str(path)!r}; pass one explicitly")
    return SUFFIXES[suffix]


def render(canvas: Canvas, fmt: ExportFormat | str, config: Config | None = None) -> bytes:
    """Serialize ``canvas`` to the bytes of a document in ``fmt``."""
    exporter = get_exporter(fmt, config)
    return exporter.export(canvas).encode(exporter.encoding)


def write(
    canvas: Canvas,
    sink: BinaryIO,
    fmt: ExportFormat | str,
    config: Config | None = None,
) -> int:
    """Write ``canvas`` to a binary sink. Write errors propagate to the caller."""
    fmt = as_format(fmt)
    data = render(canvas, fmt, config)
    sink.write(data)
    logger.debug("Wrote %d bytes of %s", len(data), fmt.value)
    return len(data)


def save(
    canvas: Canvas,
    path: str | Path,
    fmt: ExportFormat | str | None = None,
    config: Config | None = None,
) -> Path:
    """Write ``canvas`` to ``path``; the format defaults to the file suffix."""
    path = Path(path)
    fmt = as_format(fmt) if fmt else format_for_path(path)
    with open(path, "wb") as f:
        write(canvas, f, fmt, config)
    logger.debug("Saved %s", path)
    return path
