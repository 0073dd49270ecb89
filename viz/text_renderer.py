# viz/text_renderer.py
from __future__ import annotations
import sys
from typing import List, Optional, TextIO
import numpy as np
from core.frame import CellKind

GLYPHS = {
    CellKind.EMPTY: "[ ]",
    CellKind.BODY: "[@]",
    CellKind.APPLE: "[a]",
    CellKind.HEAD: "[%]",
}
UNKNOWN_GLYPH = "[ ]"

def render_cell(kind: int) -> str:
    return GLYPHS.get(kind, UNKNOWN_GLYPH)

def render_frame(frame: np.ndarray) -> List[str]:
    return ["".join(render_cell(int(k)) for k in row) for row in frame]

class TextRenderer:
    """Writes each frame as rows of 3-character glyphs and flushes."""
    def __init__(self, out: Optional[TextIO] = None):
        self.out = out if out is not None else sys.stdout

    def open(self, cfg) -> None:
        pass

    def draw(self, frame: np.ndarray) -> None:
        for line in render_frame(frame):
            self.out.write(line + "\n")
        self.out.flush()

    def close(self) -> None:
        self.out.flush()
