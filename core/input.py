# core/input.py
from __future__ import annotations
from enum import Enum
from typing import Optional, TextIO
from .errors import UnknownKey, EmptyLine, CantReadLine
from .movement import Direction

class Command(Enum):
    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"
    QUIT = " "

    @property
    def direction(self) -> Optional[Direction]:
        return _DIRECTIONS.get(self)

_DIRECTIONS = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}

KEYMAP = {c.value: c for c in Command}

def decode(ch: str) -> Command:
    try:
        return KEYMAP[ch]
    except KeyError:
        raise UnknownKey(ch) from None

def decode_line(line: str) -> Command:
    """Only the first character counts; the line terminator itself is never a key."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    if not line:
        raise EmptyLine()
    return decode(line[0])

def read_command(stream: TextIO) -> Command:
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise CantReadLine(e) from e
    if line == "":
        # readline() only returns "" at end of input
        eof = EOFError("end of input")
        raise CantReadLine(eof) from eof
    return decode_line(line)
