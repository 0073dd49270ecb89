# core/position.py
from __future__ import annotations
from dataclasses import dataclass
from .interfaces import RandomSource

@dataclass(frozen=True)
class Position:
    """Grid coordinate. x grows to the right, y grows downwards (row 0 is the top)."""
    x: int
    y: int

    @classmethod
    def random(cls, bound: int, rng: RandomSource) -> "Position":
        return cls(rng.randrange(bound), rng.randrange(bound))

    def is_out_of_bounds(self, bound: int) -> bool:
        return self.x < 0 or self.x >= bound or self.y < 0 or self.y >= bound

    def moved(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
