# core/movement.py  (pure body motion, no game rules)
from __future__ import annotations
from enum import Enum
from typing import Callable, List
from .position import Position

DirectionDelta = Callable[[Position], Position]

class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

def delta_for(direction: Direction) -> DirectionDelta:
    dx, dy = direction.value
    return lambda p: p.moved(dx, dy)

def shift(body: List[Position], delta: DirectionDelta) -> None:
    """
    Follow-the-leader step, in place: every segment takes the position of the
    one ahead of it, then the head alone is moved by `delta`.
    """
    if not body:
        raise ValueError("cannot shift an empty body")
    for i in range(len(body) - 1, 0, -1):
        body[i] = body[i - 1]
    body[0] = delta(body[0])
