#!/usr/bin/env python3
"""
Minesweeper Auto-Solver - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}] [--seed N]
    python main.py evaluate [--games N] [--seed N] [--output FILE]
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from agents import RandomAgent
from game import BoardConfig, BEGINNER, INTERMEDIATE, EXPERT
from runner import Evaluator, GameLoop, LocalGame, LoopConfig, RetryPolicy


DIFFICULTIES = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def board_config_from_args(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from preset or explicit sizes."""
    preset = DIFFICULTIES[args.difficulty]
    return BoardConfig(
        width=args.width or preset.width,
        height=args.height or preset.height,
        num_mines=args.mines if args.mines is not None else preset.num_mines,
    )


def play(args: argparse.Namespace) -> None:
    """Play a single local game, printing every board."""
    config = board_config_from_args(args)
    game = LocalGame(
        config=config,
        retry_policy=RetryPolicy(args.retries, args.backoff),
    )
    game.new_game(seed=args.seed)

    loop = GameLoop(
        game,
        game,
        game,
        config=LoopConfig(
            max_iterations=args.max_iterations,
            step_delay=args.delay,
            verbose=True,
        ),
        random_agent=RandomAgent(seed=args.seed),
    )
    result = loop.run()

    print(f"\nGame status: {result.status.name.lower()}")
    print(f"  Steps: {result.steps}")
    print(f"  Reveals: {result.moves.reveals}")
    print(f"  Flags: {result.moves.flags}")
    print(f"  Random reveals: {result.moves.random_reveals}")


def evaluate(args: argparse.Namespace) -> None:
    """Play many local games and print aggregate results."""
    config = board_config_from_args(args)
    evaluator = Evaluator(
        config,
        num_games=args.games,
        loop_config=LoopConfig(max_iterations=args.max_iterations),
        seed=args.seed,
    )

    print(
        f"Evaluating solver over {args.games} games "
        f"({config.width}x{config.height}, {config.num_mines} mines)..."
    )
    results = evaluator.evaluate()

    print("Results:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Loss rate: {results['loss_rate']:.1%}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")
    print(f"  Avg random moves: {results['avg_random_moves']:.2f}")

    if args.output:
        evaluator.save(args.output)
        print(f"Results saved to: {args.output}")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Board size options shared by all commands."""
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="beginner",
        help="Preset board size",
    )
    parser.add_argument("--width", type=int, default=None, help="Override columns")
    parser.add_argument("--height", type=int, default=None, help="Override rows")
    parser.add_argument("--mines", type=int, default=None, help="Override mine count")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--max-iterations", type=int, default=100, help="Solving step cap per game"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper Auto-Solver - Play and evaluate the solver"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Solve one local game")
    add_board_arguments(play_parser)
    play_parser.add_argument(
        "--delay", type=float, default=0.0, help="Pause between steps (seconds)"
    )
    play_parser.add_argument(
        "--retries", type=int, default=3, help="Click confirmation checks"
    )
    play_parser.add_argument(
        "--backoff", type=float, default=1.0, help="Pause between checks (seconds)"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate the solver")
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--output", default=None, help="Write results to this JSON file"
    )

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
