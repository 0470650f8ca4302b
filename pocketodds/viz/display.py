"""Terminal display of equity results."""

from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pocketodds.game.cards import Card, HoleCards, street_name
from pocketodds.game.equity import EquityResult


# Equity at or above each threshold gets the paired color
EQUITY_COLORS = [
    (0.7, "green"),
    (0.4, "yellow"),
    (0.0, "red"),
]


def equity_style(equity: float) -> str:
    """Color for an equity value."""
    for threshold, color in EQUITY_COLORS:
        if equity >= threshold:
            return color
    return "red"


def format_equity(equity: float) -> str:
    return f"{equity * 100:.2f}%"


@dataclass
class EquityReport:
    """Inputs and outcome of one estimate."""
    hole: HoleCards
    board: list[Card]
    num_opponents: int
    result: EquityResult
    evaluator: str = "heuristic"
    hand_class: Optional[str] = None
    notes: list[str] = field(default_factory=list)

    @property
    def street(self) -> str:
        return street_name(len(self.board)) or f"{len(self.board)} board cards"


class EquityDisplay:
    """Render equity reports with rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def build_table(self, report: EquityReport) -> Table:
        """Build the summary table for a report."""
        table = Table(title="Win Probability", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value", justify="right")

        board = " ".join(str(c) for c in report.board) or "-"
        result = report.result

        table.add_row("Street", report.street.title())
        table.add_row("Hand", f"{report.hole} ({report.hole.canonical})")
        table.add_row("Board", board)
        if report.hand_class:
            table.add_row("Made hand", report.hand_class)
        table.add_row("Opponents", str(report.num_opponents))
        table.add_row("Trials", f"{result.trials:,}")
        table.add_row("Evaluator", report.evaluator)
        table.add_row("Win", format_equity(result.win_rate))
        table.add_row("Tie", format_equity(result.tie_rate))
        table.add_row("Lose", format_equity(result.loss_rate))
        table.add_row(
            "Equity",
            Text(format_equity(result.equity), style=f"bold {equity_style(result.equity)}"),
        )

        return table

    def show(self, report: EquityReport) -> None:
        self.console.print(self.build_table(report))
        for note in report.notes:
            self.console.print(f"[dim]{note}[/]")
