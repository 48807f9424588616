"""Entry point for the dungeon layout viewer."""

from __future__ import annotations

import argparse

from config import settings
from game_core.game import Viewer


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate and view a dungeon layout.")
    parser.add_argument("--seed", type=int, default=None, help="layout seed (wall clock when omitted)")
    parser.add_argument("--width", type=int, default=settings.MAP_WIDTH, help="map width in tiles")
    parser.add_argument("--height", type=int, default=settings.MAP_HEIGHT, help="map height in tiles")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    Viewer(seed=args.seed, size=(args.width, args.height)).run()


if __name__ == "__main__":
    main()
