"""Shared pytest fixtures for turtlepath tests."""

import pytest

from turtlepath.turtle import Canvas


class FailingSink:
    """Binary sink whose writes always fail, like a full disk."""

    def write(self, data):
        raise OSError(28, "No space left on device")


@pytest.fixture
def corner():
    t = Canvas()
    t.forward(100)
    t.right(90)
    t.forward(100)
    return t


@pytest.fixture
def gapped_square():
    from turtlepath.cli import demo_canvas

    return demo_canvas()


@pytest.fixture
def failing_sink():
    return FailingSink()
