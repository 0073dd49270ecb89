# core/game_log.py
from __future__ import annotations
import csv, os
from typing import Dict, Any, Optional
from .interfaces import Snapshot, TurnLogger, NullLogger

ALL_KEYS = [
    "turn", "command",
    "head_x", "head_y", "length",
    "apple_x", "apple_y",
    "running", "reason",
]

class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, turn: int, record: Dict[str, Any]) -> None:
        record = {"turn": turn, **record}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(record.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(record)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

def turn_record(command: Optional[str], snap: Snapshot) -> Dict[str, Any]:
    hx, hy = snap.head
    ax, ay = snap.apple
    return {
        "command": command,
        "head_x": hx, "head_y": hy,
        "length": snap.length,
        "apple_x": ax, "apple_y": ay,
        "running": int(snap.running),
        "reason": snap.reason or "",
    }

def make_logger(path: Optional[str]) -> TurnLogger:
    if not path:
        return NullLogger()
    return CSVLogger(path, fieldnames=ALL_KEYS)
