"""Command-line entry point for the arcade."""

from __future__ import annotations

import argparse

from termarcade.game import FRAME_DELAY, Game


def _delay(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"delay must not be negative: {text}")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="termarcade", description="Play Space Invaders or Frogger in the terminal."
    )
    parser.add_argument(
        "--delay",
        type=_delay,
        default=FRAME_DELAY,
        help="seconds to wait between frames",
    )
    args = parser.parse_args(argv)
    game = Game(frame_delay=args.delay)
    game.initialise()
    game.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())