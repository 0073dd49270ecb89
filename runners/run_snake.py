# runners/run_snake.py
from __future__ import annotations
import sys
from typing import Optional, TextIO
from config import AppConfig
from core.errors import SnakeInputError, InputErrorKind
from core.game_log import make_logger, turn_record
from core.game_state import GameState, TerminationReason
from core.input import read_command
from core.interfaces import Renderer, TurnLogger, RandomSource
from viz.text_renderer import TextRenderer

RECOVERABLE = (InputErrorKind.UNKNOWN_KEY, InputErrorKind.EMPTY_LINE)

def make_renderer(cfg: AppConfig, out: Optional[TextIO] = None) -> Renderer:
    if cfg.renderer == "pygame":
        from viz.renderer_pygame import PygameRenderer  # local import, pygame is only needed here
        return PygameRenderer()
    return TextRenderer(out)

def play(
    game: GameState,
    cfg: AppConfig,
    inp: TextIO,
    renderer: Renderer,
    logger: TurnLogger,
    err: Optional[TextIO] = None,
) -> TerminationReason:
    """
    Drive `game` to termination: one input line, one turn, one frame.

    Input errors end the game by raising, unless cfg.reprompt_on_error is set,
    in which case unknown keys and empty lines are reported and skipped.
    A failed read is never retried.
    """
    err = err if err is not None else sys.stderr
    renderer.draw(game.frame())
    logger.log(game.turn, turn_record(None, game.snapshot()))

    while game.running:
        try:
            cmd = read_command(inp)
        except SnakeInputError as e:
            if cfg.reprompt_on_error and e.kind in RECOVERABLE:
                print(e.message, file=err)
                continue
            raise

        if game.apply(cmd):
            renderer.draw(game.frame())
        logger.log(game.turn, turn_record(cmd.name.lower(), game.snapshot()))

    logger.flush()
    return game.reason

def main(cfg: AppConfig, rng: Optional[RandomSource] = None,
         inp: Optional[TextIO] = None, out: Optional[TextIO] = None,
         err: Optional[TextIO] = None) -> int:
    inp = inp if inp is not None else sys.stdin
    err = err if err is not None else sys.stderr

    game = GameState.new(cfg, rng)
    rend = make_renderer(cfg, out)
    rend.open(cfg)
    logger = make_logger(cfg.log_path)
    try:
        reason = play(game, cfg, inp, rend, logger, err)
    except SnakeInputError as e:
        print(e.message, file=err)
        return 1
    finally:
        logger.close()
        rend.close()

    print(f"Game over: {reason.value.replace('_', ' ')} (length {game.length}, turns {game.turn})", file=err)
    return 0
