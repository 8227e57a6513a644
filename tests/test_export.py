import io

import pytest

from turtlepath.eps import EpsExporter
from turtlepath.export import ExportFormat, format_for_path, get_exporter, render, save, write
from turtlepath.gcode import GcodeExporter
from turtlepath.svg import SvgExporter


@pytest.mark.parametrize(
    "fmt, cls",
    [("svg", SvgExporter), ("EPS", EpsExporter), (ExportFormat.GCODE, GcodeExporter)],
)
def test_get_exporter(fmt, cls):
    assert isinstance(get_exporter(fmt), cls)


def test_get_exporter_rejects_unknown_format():
    with pytest.raises(ValueError, match="pdf"):
        get_exporter("pdf")


@pytest.mark.parametrize(
    "path, fmt",
    [("a.svg", ExportFormat.SVG), ("b.EPS", ExportFormat.EPS), ("c.nc", ExportFormat.GCODE)],
)
def test_format_for_path(path, fmt):
    assert format_for_path(path) is fmt


def test_format_for_path_rejects_unknown_suffix():
    with pytest.raises(ValueError):
        format_for_path("drawing.png")


def test_write_returns_byte_count(corner):
    buf = io.BytesIO()
    n = write(corner, buf, "svg")
    assert n == len(buf.getvalue())
    assert buf.getvalue() == render(corner, ExportFormat.SVG)


def test_save_infers_format_from_suffix(corner, tmp_path):
    path = save(corner, tmp_path / "corner.eps")
    assert path.read_bytes().startswith(b"%!PS-Adobe-3.0 EPSF-3.0")


def test_canvas_save_with_explicit_format(corner, tmp_path):
    path = corner.save(tmp_path / "corner.out", fmt="svg")
    assert b"<svg" in path.read_bytes()


def test_save_to_missing_directory_raises(corner, tmp_path):
    with pytest.raises(OSError):
        save(corner, tmp_path / "missing" / "corner.svg")
