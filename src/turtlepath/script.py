"""A small Logo-style command language for turtle drawings.

Programs are whitespace separated commands, ``#`` comments run to the end of
the line, and ``repeat N [ ... ]`` blocks may nest::

    # square
    repeat 4 [ fd 100 rt 90 ]
"""

import logging
from dataclasses import dataclass, field

from .turtle import Canvas, TurtleError

logger = logging.getLogger(__name__)


class ScriptError(ValueError):
    """Raised for malformed programs and for commands the turtle rejects."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(f"line {line}: {message}" if line is not None else message)


# alias -> (canvas method, number of numeric arguments)
COMMANDS = {
    "forward": ("forward", 1),
    "fd": ("forward", 1),
    "backward": ("backward", 1),
    "back": ("backward", 1),
    "bk": ("backward", 1),
    "right": ("right", 1),
    "rt": ("right", 1),
    "left": ("left", 1),
    "lt": ("left", 1),
    "penup": ("pen_up", 0),
    "pen_up": ("pen_up", 0),
    "pu": ("pen_up", 0),
    "pendown": ("pen_down", 0),
    "pen_down": ("pen_down", 0),
    "pd": ("pen_down", 0),
    "goto": ("goto", 2),
    "home": ("home", 0),
    "push": ("push", 0),
    "pop": ("pop", 0),
}


@dataclass
class Command:
    name: str
    args: tuple[float, ...] = ()
    line: int = 0


@dataclass
class Repeat:
    count: int
    body: list = field(default_factory=list)
    line: int = 0


def tokenize(text: str) -> list[tuple[str, int]]:
    tokens = []
    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.split("#", 1)[0]
        for tok in line.replace("[", " [ ").replace("]", " ] ").split():
            tokens.append((tok, lineno))
    return tokens


def parse(text: str) -> list:
    """Parse program text into a list of Command and Repeat nodes."""
    tokens = tokenize(text)
    program, pos = _parse_block(tokens, 0, nested=False)
    return program


def _parse_block(tokens, pos: int, nested: bool) -> tuple[list, int]:
    block = []
    while pos < len(tokens):
        word, line = tokens[pos]
        pos += 1
        key = word.lower()

        if key == "]":
            if not nested:
                raise ScriptError("unexpected ']'", line)
            return block, pos

        if key == "repeat":
            count_tok, pos = _take(tokens, pos, "repeat", line)
            try:
                count = int(count_tok)
            except ValueError:
                raise ScriptError(f"repeat count must be an integer, got {count_tok!r}", line) from None
            if count < 0:
                raise ScriptError(f"repeat count must not be negative, got {count}", line)
            open_tok, pos = _take(tokens, pos, "repeat", line)
            if open_tok != "[":
                raise ScriptError(f"expected '[' after repeat count, got {open_tok!r}", line)
            body, pos = _parse_block(tokens, pos, nested=True)
            block.append(Repeat(count, body, line))
            continue

        if key not in COMMANDS:
            raise ScriptError(f"unknown command {word!r}", line)
        name, arity = COMMANDS[key]
        args = []
        for _ in range(arity):
            tok, pos = _take(tokens, pos, word, line)
            try:
                args.append(float(tok))
            except ValueError:
                raise ScriptError(f"{word} expects a number, got {tok!r}", line) from None
        block.append(Command(name, tuple(args), line))

    if nested:
        raise ScriptError("missing ']'", tokens[-1][1] if tokens else None)
    return block, pos


def _take(tokens, pos: int, command: str, line: int) -> tuple[str, int]:
    if pos >= len(tokens):
        raise ScriptError(f"{command} is missing an argument", line)
    return tokens[pos][0], pos + 1


def run(program: list, canvas: Canvas) -> Canvas:
    """Execute parsed commands on ``canvas``."""
    for node in program:
        if isinstance(node, Repeat):
            for _ in range(node.count):
                run(node.body, canvas)
            continue
        try:
            getattr(canvas, node.name)(*node.args)
        except TurtleError as e:
            raise ScriptError(str(e), node.line) from e
    return canvas


def render(text: str, canvas: Canvas | None = None) -> Canvas:
    """Parse and run ``text``, returning the canvas it drew on."""
    canvas = canvas if canvas is not None else Canvas()
    program = parse(text)
    logger.debug("Parsed %d top-level commands", len(program))
    run(program, canvas)
    logger.info("Drew %d segments", len(canvas.segments))
    return canvas
