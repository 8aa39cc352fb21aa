#!/usr/bin/env python3
"""Watch random play on the minesweeper environment."""
import sys
import time
import os
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import BoardConfig  # noqa: E402
from session import MinesweeperEnv  # noqa: E402


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 9, mines: int = 10,
         seed: int = None):
    """Run demo games, picking a random hidden cell each step."""
    config = BoardConfig(rows=size, cols=size, num_mines=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    picker = np.random.default_rng(seed)

    print(f"Board: {size}x{size} with {mines} mines ({100*config.density:.1f}% density)")

    wins = 0

    for game in range(games):
        obs, _ = env.reset(seed=None if seed is None else seed + game)
        done = False
        step = 0
        info = {}

        while not done:
            valid = np.flatnonzero(env.get_action_mask())
            action = int(picker.choice(valid))
            row, col = action // size, action % size

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} | 3BV {info['3bv']} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())
            time.sleep(delay)

        if info.get("game_state") == "WON":
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")
        time.sleep(1.0)

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, mines=args.mines,
         seed=args.seed)
