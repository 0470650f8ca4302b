"""Hand evaluation and equity simulation engine."""

from .cards import (
    Card,
    HoleCards,
    Rank,
    Suit,
    full_deck,
    remaining_deck,
    parse_cards,
    normalize_board,
    street_name,
    BOARD_CHECKPOINTS,
)
from .dealing import make_rng, shuffle, deal_trial
from .evaluator import (
    HandCategory,
    HandResult,
    compare_hands,
    evaluate_hand,
    evaluate_hand_exact,
    get_evaluator,
    get_hand_class,
)
from .equity import EquityCalculator, EquityConfig, EquityResult, calculate_equity
from .errors import (
    EquityError,
    InvalidStateError,
    InsufficientCardsError,
    InvalidOpponentCountError,
    InsufficientDeckError,
    InvalidBoardError,
    InvalidTrialCountError,
    InvalidConfigError,
    SimulationCancelled,
)

__all__ = [
    "Card",
    "HoleCards",
    "Rank",
    "Suit",
    "full_deck",
    "remaining_deck",
    "parse_cards",
    "normalize_board",
    "street_name",
    "BOARD_CHECKPOINTS",
    "make_rng",
    "shuffle",
    "deal_trial",
    "HandCategory",
    "HandResult",
    "compare_hands",
    "evaluate_hand",
    "evaluate_hand_exact",
    "get_evaluator",
    "get_hand_class",
    "EquityCalculator",
    "EquityConfig",
    "EquityResult",
    "calculate_equity",
    "EquityError",
    "InvalidStateError",
    "InsufficientCardsError",
    "InvalidOpponentCountError",
    "InsufficientDeckError",
    "InvalidBoardError",
    "InvalidTrialCountError",
    "InvalidConfigError",
    "SimulationCancelled",
]
