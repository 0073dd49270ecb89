# config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal

@dataclass(frozen=True, slots=True)
class AppConfig:
    # shared / global
    grid_size: int = 15
    seed: Optional[int] = None

    # gameplay
    reprompt_on_error: bool = False      # False = abort on first bad input line
    apple_on_any_segment: bool = True    # apple counts as eaten when any segment covers it
    apple_avoids_body: bool = False      # relocation re-draws until the apple is off the body

    # render
    renderer: Literal["text", "pygame"] = "text"
    render_cell: int = 32
    render_title: str = "Snake"
    render_record_dir: Optional[str] = None

    # logging
    log_path: Optional[str] = None

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.renderer not in ("text", "pygame"):
            raise ValueError(f"unknown renderer {self.renderer!r}")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
