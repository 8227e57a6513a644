import io
import math

import pytest

from turtlepath.config import Config, StyleConfig
from turtlepath.eps import EpsExporter
from turtlepath.turtle import Canvas


def _eps(canvas, config=None):
    buf = io.BytesIO()
    canvas.save_eps(buf, config)
    return buf.getvalue().decode("ascii")


def _bounding_box(text):
    for line in text.splitlines():
        if line.startswith("%%BoundingBox:"):
            return [int(v) for v in line.split()[1:]]
    raise AssertionError("no %%BoundingBox")


def test_header_and_trailer(corner):
    text = _eps(corner)
    lines = text.splitlines()
    assert lines[0] == "%!PS-Adobe-3.0 EPSF-3.0"
    assert "%%EndComments" in lines
    assert lines[-1] == "%%EOF"
    assert "showpage" in lines


def test_corner_is_drawn_unflipped(corner):
    lines = _eps(corner).splitlines()
    start = lines.index("newpath")
    assert lines[start : start + 5] == [
        "newpath",
        "0 0 moveto",
        "0 100 lineto",
        "100 100 lineto",
        "stroke",
    ]


def test_bounding_box_contains_every_endpoint(gapped_square):
    llx, lly, urx, ury = _bounding_box(_eps(gapped_square))
    for seg in gapped_square.segments:
        for p in (seg.start, seg.end):
            assert llx <= p.x <= urx
            assert lly <= p.y <= ury


def test_bounding_box_rounds_outward():
    t = Canvas()
    t.right(45)
    t.forward(33.3)
    llx, lly, urx, ury = _bounding_box(_eps(t))
    box = t.bounds().padded(0.1, 10.0)
    assert (llx, lly) == (math.floor(box.min_x), math.floor(box.min_y))
    assert (urx, ury) == (math.ceil(box.max_x), math.ceil(box.max_y))


def test_one_stroke_per_connected_run(gapped_square):
    text = _eps(gapped_square)
    assert text.count(" moveto") == 2
    assert text.count(" lineto") == 4
    assert text.count("\nstroke\n") == 2


def test_empty_canvas_is_a_valid_document():
    text = _eps(Canvas())
    assert _bounding_box(text) == [-6, -6, 6, 6]
    assert "moveto" not in text
    assert text.rstrip().endswith("%%EOF")


def test_stroke_style_from_config(corner):
    config = Config(style=StyleConfig(stroke="#f00", stroke_width=2))
    text = EpsExporter(config).export(corner)
    assert "2 setlinewidth" in text
    assert "1 0 0 setrgbcolor" in text


def test_write_failure_propagates(corner, failing_sink):
    with pytest.raises(OSError):
        corner.save_eps(failing_sink)
