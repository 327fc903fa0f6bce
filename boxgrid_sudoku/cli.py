"""
Command line generator: prints puzzles and solutions to the console and
writes them as SVG/PNG files, optionally collected into one PDF.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from .difficulty import DEFAULT_DIFFICULTY, DIFFICULTY_LEVELS
from .errors import ExportError
from .export import EXPORT_FORMATS, PAGE_SIZES, create_pdf, write_pair
from .game import NewGame, generate
from .generator import DEFAULT_MAX_ATTEMPTS, count_solutions
from .grid import SUPPORTED_SIZES, format_grid


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="boxgrid-sudoku",
        description="Generate Sudoku puzzles of size 4, 6 or 9 and export them.",
    )
    parser.add_argument(
        "-s", "--size", type=int, choices=SUPPORTED_SIZES, default=9, help="Grid size"
    )
    parser.add_argument(
        "-d",
        "--difficulty",
        choices=DIFFICULTY_LEVELS,
        default=DEFAULT_DIFFICULTY,
        help="Difficulty level",
    )
    parser.add_argument(
        "-n", "--count", type=int, default=1, help="Number of Sudokus to generate"
    )
    parser.add_argument(
        "-o", "--output", type=str, default="output", help="Output directory"
    )
    parser.add_argument(
        "--format",
        choices=EXPORT_FORMATS + ("none",),
        default="svg",
        help="File format for puzzle and solution files",
    )
    parser.add_argument("--pdf", type=str, default=None, help="Also write a PDF booklet")
    parser.add_argument(
        "--pagesize", choices=sorted(PAGE_SIZES), default="a4", help="PDF page size"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible output"
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Backtracking attempts before using the fallback grid",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def print_game(game: NewGame) -> None:
    print(f"Puzzle ID: {game.puzzle_id} ({game.size}x{game.size}, {game.difficulty})")
    print(format_grid(game.puzzle))
    print()
    print(f"Solution for ID: {game.puzzle_id}")
    print(format_grid(game.solution))
    print(f"Lives: {game.lives}  Hints: {game.hints}")
    # carving does not enforce uniqueness, only report it
    unique = count_solutions(game.puzzle, game.size, limit=2) == 1
    print(f"Unique solution: {'yes' if unique else 'no'}")
    print()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    count = max(1, args.count)
    games = []

    try:
        for _ in range(count):
            game = generate(args.size, args.difficulty, rng, max(0, args.attempts))
            games.append(game)
            print_game(game)

            if args.format != "none":
                puzzle_path, solution_path = write_pair(game, args.output, args.format)
                print(f"Generated: {puzzle_path} and {solution_path}")

        if args.pdf:
            pages = create_pdf(games, args.pdf, pagesize=PAGE_SIZES[args.pagesize])
            print(f"PDF created: {args.pdf} ({pages} pages)")
    except ExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
