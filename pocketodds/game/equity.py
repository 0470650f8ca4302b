"""Monte Carlo equity simulation."""

import logging
from concurrent.futures import FIRST_COMPLETED, ProcessPoolExecutor, wait
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

from .cards import Card, HoleCards, known_cards, normalize_board, remaining_deck
from .dealing import RandomSource, deal_trial, make_rng, spawn_streams
from .errors import (
    InsufficientDeckError,
    InvalidConfigError,
    InvalidOpponentCountError,
    InvalidTrialCountError,
    SimulationCancelled,
)
from .evaluator import HandResult, compare_hands, get_evaluator

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]
CancelCheck = Callable[[], bool]


@dataclass
class EquityConfig:
    """Configuration for equity simulation."""
    num_simulations: int = 10000
    max_opponents: int = 9          # Table-size policy
    evaluator: str = "heuristic"    # "heuristic" or "exact"
    num_workers: int = 1            # >1 runs chunks in a process pool
    chunk_size: int = 2500          # Trials per worker task
    progress_interval: int = 500    # Trials between progress callbacks

    def __post_init__(self):
        for name in ("num_simulations", "max_opponents", "num_workers", "chunk_size"):
            if getattr(self, name) < 1:
                raise InvalidConfigError(f"{name} must be at least 1, got {getattr(self, name)}")
        if self.progress_interval < 0:
            raise InvalidConfigError(
                f"progress_interval must not be negative, got {self.progress_interval}"
            )


@dataclass
class EquityResult:
    """Win/tie/loss counts over a batch of trials."""
    wins: int = 0
    ties: int = 0
    losses: int = 0

    @property
    def trials(self) -> int:
        return self.wins + self.ties + self.losses

    @property
    def equity(self) -> float:
        """Wins plus half of ties, as a fraction of trials."""
        if self.trials == 0:
            return 0.0
        return (self.wins + 0.5 * self.ties) / self.trials

    @property
    def win_rate(self) -> float:
        return self.wins / self.trials if self.trials else 0.0

    @property
    def tie_rate(self) -> float:
        return self.ties / self.trials if self.trials else 0.0

    @property
    def loss_rate(self) -> float:
        return self.losses / self.trials if self.trials else 0.0

    def __add__(self, other: "EquityResult") -> "EquityResult":
        return EquityResult(
            wins=self.wins + other.wins,
            ties=self.ties + other.ties,
            losses=self.losses + other.losses,
        )


def _score_trial(
    hole: Sequence[Card],
    full_board: list[Card],
    opponents: list[tuple[Card, Card]],
    evaluate: Callable[[Sequence[Card]], HandResult],
) -> int:
    """Compare the player's hand with the best opponent hand."""
    hero = evaluate(list(hole) + full_board)

    best_opp = None
    for opp_hole in opponents:
        opp = evaluate(list(opp_hole) + full_board)
        if best_opp is None or compare_hands(opp, best_opp) > 0:
            best_opp = opp

    return compare_hands(hero, best_opp)


def _run_trials(
    hole: Sequence[Card],
    board: list[Optional[Card]],
    pool: list[Card],
    num_opponents: int,
    num_trials: int,
    rng: np.random.Generator,
    evaluate: Callable[[Sequence[Card]], HandResult],
    callback: Optional[ProgressCallback] = None,
    cancel: Optional[CancelCheck] = None,
    progress_interval: int = 0,
) -> EquityResult:
    wins = ties = losses = 0

    for i in range(num_trials):
        if cancel is not None and cancel():
            raise SimulationCancelled(f"Simulation cancelled after {i} of {num_trials} trials")

        full_board, opponents = deal_trial(pool, board, num_opponents, rng)
        outcome = _score_trial(hole, full_board, opponents, evaluate)

        if outcome > 0:
            wins += 1
        elif outcome == 0:
            ties += 1
        else:
            losses += 1

        done = i + 1
        if callback and progress_interval and done < num_trials and done % progress_interval == 0:
            callback(done, num_trials)

    return EquityResult(wins, ties, losses)


def _trial_worker(
    hole: tuple[Card, ...],
    board: list[Optional[Card]],
    pool: list[Card],
    num_opponents: int,
    num_trials: int,
    seed: np.random.SeedSequence,
    evaluator: str,
) -> EquityResult:
    """Run one chunk of trials in a worker process."""
    return _run_trials(
        hole, board, pool, num_opponents, num_trials,
        make_rng(seed), get_evaluator(evaluator),
    )


def _chunk_sizes(total: int, chunk_size: int) -> list[int]:
    full, rest = divmod(total, chunk_size)
    return [chunk_size] * full + ([rest] if rest else [])


class EquityCalculator:
    """
    Monte Carlo equity against random opponent hands.

    Each trial completes the unknown board, deals two cards to every
    opponent and compares the player's hand with the best of them.
    Trials run serially on one generator, or in chunks across a process
    pool with an independent seed stream per chunk.
    """

    def __init__(self, config: Optional[EquityConfig] = None):
        self.config = config or EquityConfig()
        self.evaluate = get_evaluator(self.config.evaluator)

    def simulate(
        self,
        hole,
        board: Optional[Sequence[Optional[Card]]] = None,
        num_opponents: int = 1,
        num_simulations: Optional[int] = None,
        rng: RandomSource = None,
        callback: Optional[ProgressCallback] = None,
        cancel: Optional[CancelCheck] = None,
    ) -> EquityResult:
        """
        Simulate trials and count wins, ties and losses.

        Args:
            hole: Player's HoleCards or any 2 cards
            board: Known board cards, or 5 slots with None for unknowns
            num_opponents: Number of opponents
            num_simulations: Number of trials (default from config)
            rng: Random generator or seed
            callback: Optional callback(completed, total) for progress
            cancel: Optional predicate checked between trials

        Returns:
            EquityResult with win/tie/loss counts
        """
        max_opp = self.config.max_opponents
        if not 1 <= num_opponents <= max_opp:
            raise InvalidOpponentCountError(
                f"Opponent count must be between 1 and {max_opp}, got {num_opponents}"
            )

        trials = self.config.num_simulations if num_simulations is None else num_simulations
        if trials < 1:
            raise InvalidTrialCountError(f"Number of simulations must be positive, got {trials}")

        hole = HoleCards.coerce(hole).cards
        slots = normalize_board(board)
        known = known_cards(slots)
        pool = remaining_deck(list(hole) + known)

        needed = slots.count(None) + 2 * num_opponents
        if len(pool) < needed:
            raise InsufficientDeckError(
                f"Need {needed} cards for the board and {num_opponents} opponents, "
                f"only {len(pool)} remaining"
            )

        rng = make_rng(rng)
        workers = self.config.num_workers
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Simulating %s vs %d opponent(s) on [%s]: %d trials, %s evaluator, %d worker(s)",
                " ".join(str(c) for c in hole), num_opponents,
                " ".join(str(c) for c in known), trials, self.config.evaluator, workers,
            )

        if workers > 1 and trials > self.config.chunk_size:
            result = self._simulate_parallel(
                hole, slots, pool, num_opponents, trials, rng, callback, cancel,
            )
        else:
            result = _run_trials(
                hole, slots, pool, num_opponents, trials, rng, self.evaluate,
                callback=callback, cancel=cancel,
                progress_interval=self.config.progress_interval,
            )

        if callback:
            callback(trials, trials)

        logger.debug(
            "Finished %d trials: %d wins, %d ties, %d losses, equity %.4f",
            result.trials, result.wins, result.ties, result.losses, result.equity,
        )
        return result

    def _simulate_parallel(
        self,
        hole: tuple[Card, ...],
        slots: list[Optional[Card]],
        pool: list[Card],
        num_opponents: int,
        trials: int,
        rng: np.random.Generator,
        callback: Optional[ProgressCallback],
        cancel: Optional[CancelCheck],
    ) -> EquityResult:
        sizes = _chunk_sizes(trials, self.config.chunk_size)
        seeds = spawn_streams(rng, len(sizes))
        result = EquityResult()
        completed = 0

        with ProcessPoolExecutor(max_workers=self.config.num_workers) as executor:
            pending = {
                executor.submit(
                    _trial_worker, hole, slots, pool, num_opponents,
                    size, seed, self.config.evaluator,
                )
                for size, seed in zip(sizes, seeds)
            }

            while pending:
                if cancel is not None and cancel():
                    for future in pending:
                        future.cancel()
                    raise SimulationCancelled(
                        f"Simulation cancelled after {completed} of {trials} trials"
                    )

                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    chunk = future.result()
                    result += chunk
                    completed += chunk.trials

                if callback and pending:
                    callback(completed, trials)

        return result

    def equity(
        self,
        hole,
        board: Optional[Sequence[Optional[Card]]] = None,
        num_opponents: int = 1,
        num_simulations: Optional[int] = None,
        rng: RandomSource = None,
    ) -> float:
        """Equity (0-1) of the hole cards; see simulate()."""
        return self.simulate(hole, board, num_opponents, num_simulations, rng).equity


def calculate_equity(
    hand,
    board: Optional[Sequence[Optional[Card]]] = None,
    num_opponents: int = 1,
    num_simulations: int = 10000,
    rng: RandomSource = None,
    evaluator: str = "heuristic",
) -> float:
    """
    Calculate hand equity against random opponent(s).

    Args:
        hand: Hero's hand
        board: Board cards
        num_opponents: Number of opponents
        num_simulations: Number of simulations
        rng: Random generator or seed
        evaluator: Hand evaluator name

    Returns:
        Equity (0-1)
    """
    calculator = EquityCalculator(EquityConfig(evaluator=evaluator))
    return calculator.equity(hand, board, num_opponents, num_simulations, rng)
