#!/usr/bin/env python3
"""Watch the solver play Minesweeper."""
import time
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from board import Board, GameStatus
from game import BoardConfig
from runner import GameLoop, LocalGame, LoopConfig, RetryPolicy


def mines_for(size: int, mines=None) -> int:
    """Mine count for an NxN board, about 12% of the cells unless given."""
    return mines if mines is not None else int(size * size * 0.12)


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(
    delay: float = 0.3,
    games: int = 5,
    size: int = 9,
    mines: int = 10,
    max_iterations: int = 100,
):
    """Run demo games with visualization."""
    config = BoardConfig(height=size, width=size, num_mines=mines)
    game = LocalGame(
        config=config,
        retry_policy=RetryPolicy(max_retries=1, backoff_seconds=0.0),
    )

    print(f"Board: {size}x{size} with {mines} mines ({100*mines/(size*size):.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for number in range(games):
        def show(step: int, board: Board) -> None:
            counts = loop.orchestrator.counts
            clear_screen()
            print(f"=== Game {number + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Moves: {counts.total} (guesses: {counts.random_reveals})\n")
            print(board.render())

        game.new_game()
        loop = GameLoop(
            game,
            game,
            game,
            config=LoopConfig(max_iterations=max_iterations, step_delay=delay),
            on_step=show,
        )
        result = loop.run()

        clear_screen()
        print(f"=== Game {number + 1}/{games} | Step {result.steps} ===\n")
        print(loop.orchestrator.last_board.render())
        if result.status is GameStatus.WON:
            wins += 1
            print(f"\n*** WIN! ***")
        elif result.status is GameStatus.LOST:
            print(f"\n*** LOST (hit mine) ***")
        else:
            print(f"\n*** STUCK ***")

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between steps")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~12%% of cells)")
    parser.add_argument("--max-iterations", type=int, default=100, help="Solving step cap per game")
    args = parser.parse_args()

    mines = mines_for(args.size, args.mines)

    demo(
        delay=args.delay,
        games=args.games,
        size=args.size,
        mines=mines,
        max_iterations=args.max_iterations,
    )
