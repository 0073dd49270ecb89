# core/game_state.py  (pure rules, no I/O)
from __future__ import annotations
from enum import Enum
from typing import List, Optional, Sequence
import random
import numpy as np
from .interfaces import Snapshot, RandomSource
from .position import Position
from .movement import shift, delta_for
from .input import Command
from .frame import build_frame
from config import AppConfig

class TerminationReason(str, Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    SELF_COLLISION = "self_collision"
    QUIT = "quit"

class GameState:
    """
    Body, apple and grid size plus the per-turn state machine.

    Running until `apply` hits one of the TerminationReason cases; after that
    every further `apply` is a no-op that returns False.
    """
    def __init__(
        self,
        grid_size: int,
        body: Sequence[Position],
        apple: Position,
        rng: RandomSource,
        apple_on_any_segment: bool = True,
        apple_avoids_body: bool = False,
    ):
        if not body:
            raise ValueError("body needs at least one segment")
        self.grid_size = grid_size
        self.body: List[Position] = list(body)
        self.apple = apple
        self.rng = rng
        self.apple_on_any_segment = apple_on_any_segment
        self.apple_avoids_body = apple_avoids_body
        self.turn = 0
        self.reason: Optional[TerminationReason] = None

    @classmethod
    def new(cls, cfg: AppConfig, rng: Optional[RandomSource] = None) -> "GameState":
        rng = rng if rng is not None else random.Random(cfg.seed)
        head = Position.random(cfg.grid_size, rng)
        game = cls(cfg.grid_size, [head], head, rng,
                   apple_on_any_segment=cfg.apple_on_any_segment,
                   apple_avoids_body=cfg.apple_avoids_body)
        game.apple = game._place_apple(avoid_body=True)
        return game

    # ---- state ----
    @property
    def running(self) -> bool:
        return self.reason is None

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    # ---- turn ----
    def apply(self, command: Command) -> bool:
        if not self.running:
            return False
        self.turn += 1

        if command is Command.QUIT:
            self.reason = TerminationReason.QUIT
            return False

        shift(self.body, delta_for(command.direction))

        if self.head.is_out_of_bounds(self.grid_size):
            self.reason = TerminationReason.OUT_OF_BOUNDS
            return False
        if self.self_collision():
            self.reason = TerminationReason.SELF_COLLISION
            return False

        if self.ate_apple():
            self.apple = self._place_apple(avoid_body=self.apple_avoids_body)
            # the copy sits on the tail until the next shift pulls them apart
            self.body.append(self.body[-1])
        return True

    def self_collision(self) -> bool:
        head = self.body[0]
        return any(seg == head for seg in self.body[1:])

    def ate_apple(self) -> bool:
        if self.apple_on_any_segment:
            return self.apple in self.body
        return self.head == self.apple

    def _place_apple(self, avoid_body: bool) -> Position:
        if not avoid_body:
            return Position.random(self.grid_size, self.rng)
        occ = set(self.body)
        free = [Position(x, y) for y in range(self.grid_size) for x in range(self.grid_size)
                if Position(x, y) not in occ]
        if not free:
            return Position.random(self.grid_size, self.rng)
        return free[self.rng.randrange(len(free))]

    # ---- views ----
    def frame(self) -> np.ndarray:
        return build_frame(self.body, self.apple, self.grid_size)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            body=tuple(p.as_tuple() for p in self.body),
            apple=self.apple.as_tuple(),
            grid_size=self.grid_size,
            turn=self.turn,
            running=self.running,
            reason=self.reason.value if self.reason else None,
        )
