#!/usr/bin/env python3
"""
Minesweeper engine - Main entry point.

Usage:
    python main.py play [--rows R] [--cols C] [--mines M] [--seed S] --keys KEYS
    python main.py score [--rows R] [--cols C] [--mines M] [--seed S] [--click R C]
"""
import argparse
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import (  # noqa: E402
    BoardConfig,
    MinefieldError,
    calculate_3bv,
    create_grid,
    find_openings,
    place_mines,
)
from session import GameSession  # noqa: E402


NAMED_KEYS = {
    "<cr>": "Enter",
    "<space>": " ",
    "<esc>": "Escape",
    "<left>": "ArrowLeft",
    "<right>": "ArrowRight",
    "<up>": "ArrowUp",
    "<down>": "ArrowDown",
}


def split_keys(script: str) -> list:
    """
    Split a key script into key identifiers.

    Plain characters are single keys; names in angle brackets such as
    <cr> or <space> stand for the named keys.
    """
    keys = []
    index = 0
    while index < len(script):
        if script[index] == "<":
            end = script.find(">", index)
            name = script[index:end + 1].lower() if end != -1 else ""
            if name in NAMED_KEYS:
                keys.append(NAMED_KEYS[name])
                index = end + 1
                continue
        keys.append(script[index])
        index += 1
    return keys


def play(args: argparse.Namespace) -> None:
    """Replay a key script and show the resulting board."""
    config = BoardConfig(rows=args.rows, cols=args.cols, num_mines=args.mines)
    session = GameSession(config, rng=random.Random(args.seed))

    for key in split_keys(args.keys):
        session.feed_key(key)
        if not session.is_playing:
            break

    print(session.render())
    if session.three_bv is not None:
        print(f"3BV: {session.three_bv} | clicks: {session.clicks}")


def score(args: argparse.Namespace) -> None:
    """Generate a board around a first click and print its 3BV."""
    config = BoardConfig(rows=args.rows, cols=args.cols, num_mines=args.mines)
    grid = create_grid(config.rows, config.cols)
    click = tuple(args.click) if args.click else (config.rows // 2, config.cols // 2)
    place_mines(grid, config.num_mines, click, rng=random.Random(args.seed))

    print(grid.render(reveal_all=True))
    print(f"\nFirst click: {click}")
    print(f"Openings: {len(find_openings(grid))}")
    print(f"3BV: {calculate_3bv(grid)}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Minesweeper engine")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_board_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--rows", type=int, default=9, help="Board rows")
        sub.add_argument("--cols", type=int, default=9, help="Board columns")
        sub.add_argument("--mines", type=int, default=10, help="Mine count")
        sub.add_argument("--seed", type=int, default=None, help="Layout seed")

    play_parser = subparsers.add_parser("play", help="Replay vim keys")
    add_board_args(play_parser)
    play_parser.add_argument(
        "--keys", required=True, help="Key script, e.g. '4j4li' or 'G$<cr>'"
    )

    score_parser = subparsers.add_parser("score", help="Print a board's 3BV")
    add_board_args(score_parser)
    score_parser.add_argument(
        "--click", type=int, nargs=2, metavar=("ROW", "COL"),
        help="First click (default: board center)",
    )

    args = parser.parse_args()
    try:
        if args.command == "play":
            play(args)
        elif args.command == "score":
            score(args)
    except MinefieldError as error:
        print(f"Error: {error}")
        sys.exit(1)


if __name__ == "__main__":
    main()
