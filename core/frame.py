# core/frame.py
from __future__ import annotations
from enum import IntEnum
from typing import Sequence
import numpy as np
from .position import Position

class CellKind(IntEnum):
    EMPTY = 0
    BODY = 1
    APPLE = 2
    HEAD = 3

def build_frame(body: Sequence[Position], apple: Position, size: int) -> np.ndarray:
    """
    Snapshot the board as a read-only (size, size) uint8 grid indexed [y, x].

    Write order is apple, head, then the rest of the body, so a body segment
    sharing a cell with the head or apple shows as BODY.
    """
    for p in (apple, *body):
        # negative indices would silently wrap in numpy
        if p.is_out_of_bounds(size):
            raise ValueError(f"{p} is outside a {size}x{size} frame")

    grid = np.full((size, size), CellKind.EMPTY, dtype=np.uint8)
    grid[apple.y, apple.x] = CellKind.APPLE
    head = body[0]
    grid[head.y, head.x] = CellKind.HEAD
    for p in body[1:]:
        grid[p.y, p.x] = CellKind.BODY

    grid.setflags(write=False)
    return grid
