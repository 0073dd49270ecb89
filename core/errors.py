# core/errors.py
from __future__ import annotations
from enum import Enum

class InputErrorKind(Enum):
    UNKNOWN_KEY = "unknown_key"
    EMPTY_LINE = "empty_line"
    CANT_READ_LINE = "cant_read_line"

class SnakeInputError(Exception):
    """Base for everything that can go wrong turning a line of input into a command."""
    kind: InputErrorKind

    @property
    def message(self) -> str:
        return str(self)

class UnknownKey(SnakeInputError):
    kind = InputErrorKind.UNKNOWN_KEY

    def __init__(self, key: str):
        super().__init__(f"Unknown key pressed '{key}'.")
        self.key = key

class EmptyLine(SnakeInputError):
    kind = InputErrorKind.EMPTY_LINE

    def __init__(self):
        super().__init__("Failed to parse input from line because it's empty!")

class CantReadLine(SnakeInputError):
    kind = InputErrorKind.CANT_READ_LINE

    def __init__(self, cause: BaseException):
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause
