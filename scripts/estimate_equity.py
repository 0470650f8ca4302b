#!/usr/bin/env python3
"""Estimate the win probability of a Hold'em hand."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pocketodds.game.cards import HoleCards, parse_cards, street_name, BOARD_CHECKPOINTS
from pocketodds.game.equity import EquityCalculator, EquityConfig
from pocketodds.game.errors import EquityError
from pocketodds.game.evaluator import get_hand_class
from pocketodds.viz import EquityDisplay, EquityReport


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Estimate Texas Hold'em equity against random opponents"
    )
    parser.add_argument(
        "-H", "--hole",
        required=True,
        help="Your hole cards (e.g., 'AsAh' or '10h 9h')",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Known board cards: 0, 3, 4 or 5 of them (e.g., 'Ks7d2c')",
    )
    parser.add_argument(
        "-n", "--opponents",
        type=int,
        default=1,
        help="Number of opponents (default: 1)",
    )
    parser.add_argument(
        "-t", "--trials",
        type=int,
        default=10000,
        help="Number of simulated trials (default: 10000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible estimate",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=1,
        help="Worker processes (default: 1)",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Use best-five-card evaluation instead of the fast heuristic",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)
    console = Console()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    # Parse cards
    try:
        hole = HoleCards.from_string(args.hole)
        board = parse_cards(args.board) if args.board else []
    except ValueError as e:
        console.print(f"[red]Invalid card format: {e}. Use format like: AH, 10S, KC, QD[/]")
        return 1

    if street_name(len(board)) is None:
        counts = ", ".join(str(n) for n in BOARD_CHECKPOINTS)
        console.print(f"[red]Board must have {counts} cards, got {len(board)}[/]")
        return 1

    evaluator = "exact" if args.exact else "heuristic"

    try:
        config = EquityConfig(
            num_simulations=args.trials,
            evaluator=evaluator,
            num_workers=args.workers,
        )
        calculator = EquityCalculator(config)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task(f"Simulating {args.trials:,} trials...")

            def callback(completed, total):
                progress.update(task, description=f"Trial {completed:,}/{total:,}")

            result = calculator.simulate(
                hole,
                board,
                num_opponents=args.opponents,
                rng=args.seed,
                callback=callback,
            )
    except EquityError as e:
        console.print(f"[red]{e}[/]")
        return 1

    report = EquityReport(
        hole=hole,
        board=board,
        num_opponents=args.opponents,
        result=result,
        evaluator=evaluator,
    )
    if len(board) == 5:
        report.hand_class = get_hand_class(hole, board, evaluator)
    if args.seed is not None:
        report.notes.append(f"Seed {args.seed}")

    EquityDisplay(console).show(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
