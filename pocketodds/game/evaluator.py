"""
Hand evaluation and comparison.

Two evaluators produce the same HandResult shape:

- ``heuristic`` derives the category from flags computed over all the
  cards at once (any flush, any straight, rank frequencies) and orders
  hands within a category by the five highest rank ordinals. It does not
  pick a best five-card subset, so a seven-card hand holding a straight
  and a flush in different cards scores as a straight flush, and kickers
  are only approximated.
- ``exact`` scores the best five-card hand through the treys lookup
  tables.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Sequence

from treys import Evaluator
from treys.lookup import LookupTable

from .cards import Card
from .errors import InsufficientCardsError


class HandCategory(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}


@dataclass(frozen=True, order=True)
class HandResult:
    """Evaluated hand: category first, tiebreak within the category."""
    category: HandCategory
    tiebreak: int

    @property
    def label(self) -> str:
        return self.category.label


def compare_hands(a: HandResult, b: HandResult) -> int:
    """Negative if a is weaker than b, zero on a tie, positive if stronger."""
    if a.category != b.category:
        return a.category - b.category
    return a.tiebreak - b.tiebreak


WHEEL = {12, 3, 2, 1, 0}  # A-5-4-3-2 as rank ordinals
MIN_HAND_SIZE = 5


def _is_straight(distinct_desc: list[int]) -> bool:
    for i in range(len(distinct_desc) - 4):
        if distinct_desc[i] - distinct_desc[i + 4] == 4:
            return True
    return WHEEL.issubset(distinct_desc)


def _tiebreak(values_desc: list[int]) -> int:
    # Base-13 number of the five highest ordinals, duplicates included
    value = 0
    for i in range(5):
        value = value * 13 + (values_desc[i] if i < len(values_desc) else 0)
    return value


def evaluate_hand(cards: Sequence[Card]) -> HandResult:
    """
    Classify 5 or more cards with the frequency/flush/straight heuristic.

    Args:
        cards: Hole plus board cards

    Returns:
        HandResult with category and tiebreak
    """
    if len(cards) < MIN_HAND_SIZE:
        raise InsufficientCardsError(
            f"Need at least {MIN_HAND_SIZE} cards to evaluate a hand, got {len(cards)}"
        )

    values = sorted((card.ordinal for card in cards), reverse=True)
    freqs = sorted(Counter(values).values(), reverse=True)
    freqs.append(0)

    is_flush = max(Counter(card.suit for card in cards).values()) >= 5
    is_straight = _is_straight(sorted(set(values), reverse=True))
    tiebreak = _tiebreak(values)

    if is_flush and is_straight:
        category = HandCategory.STRAIGHT_FLUSH
    elif freqs[0] == 4:
        category = HandCategory.FOUR_OF_A_KIND
    elif freqs[0] == 3 and freqs[1] == 2:
        category = HandCategory.FULL_HOUSE
    elif is_flush:
        category = HandCategory.FLUSH
    elif is_straight:
        category = HandCategory.STRAIGHT
    elif freqs[0] == 3:
        category = HandCategory.THREE_OF_A_KIND
    elif freqs[0] == 2 and freqs[1] == 2:
        category = HandCategory.TWO_PAIR
    elif freqs[0] == 2:
        category = HandCategory.ONE_PAIR
    else:
        category = HandCategory.HIGH_CARD

    return HandResult(category, tiebreak)


# treys ranks run 1 (royal flush) to 7462 (worst high card)
_TREYS_BANDS = [
    (LookupTable.MAX_STRAIGHT_FLUSH, HandCategory.STRAIGHT_FLUSH),
    (LookupTable.MAX_FOUR_OF_A_KIND, HandCategory.FOUR_OF_A_KIND),
    (LookupTable.MAX_FULL_HOUSE, HandCategory.FULL_HOUSE),
    (LookupTable.MAX_FLUSH, HandCategory.FLUSH),
    (LookupTable.MAX_STRAIGHT, HandCategory.STRAIGHT),
    (LookupTable.MAX_THREE_OF_A_KIND, HandCategory.THREE_OF_A_KIND),
    (LookupTable.MAX_TWO_PAIR, HandCategory.TWO_PAIR),
    (LookupTable.MAX_PAIR, HandCategory.ONE_PAIR),
    (LookupTable.MAX_HIGH_CARD, HandCategory.HIGH_CARD),
]

_treys_evaluator = Evaluator()


def evaluate_hand_exact(cards: Sequence[Card]) -> HandResult:
    """Score the best five-card hand out of 5 to 7 cards with treys."""
    if len(cards) < MIN_HAND_SIZE:
        raise InsufficientCardsError(
            f"Need at least {MIN_HAND_SIZE} cards to evaluate a hand, got {len(cards)}"
        )
    if len(cards) > 7:
        raise ValueError(f"Exact evaluation supports at most 7 cards, got {len(cards)}")

    treys_cards = [c.to_treys() for c in cards]
    rank = _treys_evaluator.evaluate(treys_cards[:2], treys_cards[2:])

    for max_rank, category in _TREYS_BANDS:
        if rank <= max_rank:
            break
    return HandResult(category, LookupTable.MAX_HIGH_CARD + 1 - rank)


EVALUATORS: dict[str, Callable[[Sequence[Card]], HandResult]] = {
    "heuristic": evaluate_hand,
    "exact": evaluate_hand_exact,
}


def get_evaluator(name: str) -> Callable[[Sequence[Card]], HandResult]:
    """Look up an evaluator by name."""
    try:
        return EVALUATORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown evaluator: {name} (choose from {', '.join(EVALUATORS)})"
        ) from None


def get_hand_class(
    hole: Sequence[Card],
    board: Sequence[Card],
    evaluator: str = "heuristic",
) -> str:
    """
    Get the hand class (e.g., "Two Pair", "Flush").

    Args:
        hole: Hole cards
        board: Known board cards
        evaluator: Evaluator name

    Returns:
        Hand class string
    """
    return get_evaluator(evaluator)(list(hole) + list(board)).label
