# main.py
import argparse
import sys

from config import AppConfig
from runners.run_snake import main as snake

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Turn-based terminal snake. w/a/s/d + Enter to move, space + Enter to quit.")
    p.add_argument("--grid-size", type=int, default=AppConfig().grid_size)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--renderer", choices=["text", "pygame"], default="text")
    p.add_argument("--reprompt", action="store_true", help="skip bad input lines instead of aborting")
    p.add_argument("--log-csv", default=None, help="append one row per turn to this CSV file")
    p.add_argument("--record-dir", default=None, help="save pygame frames as PNGs here")
    return p.parse_args(argv)

def config_from_args(args) -> AppConfig:
    return AppConfig(
        grid_size=args.grid_size,
        seed=args.seed,
        renderer=args.renderer,
        reprompt_on_error=args.reprompt,
        log_path=args.log_csv,
        render_record_dir=args.record_dir,
    )

def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        cfg = config_from_args(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return snake(cfg)

if __name__ == "__main__":
    sys.exit(main())
