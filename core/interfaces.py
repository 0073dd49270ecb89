# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Dict, Any, Protocol
import numpy as np

@dataclass(frozen=True)
class Snapshot:
    body: Tuple[Tuple[int,int], ...]   # head first
    apple: Tuple[int,int]
    grid_size: int
    turn: int
    running: bool
    reason: str | None

    @property
    def head(self) -> Tuple[int,int]:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

class RandomSource(Protocol):
    """Anything with random.Random's randrange (stdlib Random, or a scripted stub in tests)."""
    def randrange(self, stop: int) -> int: ...

class Renderer(Protocol):
    def open(self, cfg: Any) -> None: ...
    def draw(self, frame: np.ndarray) -> None: ...
    def close(self) -> None: ...

class TurnLogger(Protocol):
    def log(self, turn: int, record: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...

class NullLogger:
    def log(self, turn: int, record: Dict[str, Any]) -> None:
        pass
    def flush(self) -> None:
        pass
    def close(self) -> None:
        pass
