# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

class ScriptedRng:
    """randrange stub that replays a fixed list of values (each taken modulo stop)."""
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.values.pop(0) % stop

@pytest.fixture
def scripted_rng():
    return ScriptedRng

@pytest.fixture
def game_factory():
    from core.game_state import GameState
    from core.position import Position
    def make(body, apple, size=15, rng=None, **kwargs):
        rng = rng if rng is not None else ScriptedRng([0] * 64)
        return GameState(size, [Position(*p) for p in body], Position(*apple), rng, **kwargs)
    return make
