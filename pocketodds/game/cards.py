"""Card, hole hand and board representation utilities."""

import re
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Sequence

from treys import Card as TreysCard

from .errors import InvalidBoardError, InvalidStateError


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}
STR_RANK["10"] = 10

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

BOARD_SIZE = 5

# Known board counts at which an estimate is meaningful
BOARD_CHECKPOINTS = {0: "preflop", 3: "flop", 4: "turn", 5: "river"}

_CARD_TOKEN = re.compile(r"10|[2-9TJQKA]", re.IGNORECASE)


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: int  # 2-14
    suit: int  # 0-3

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @property
    def ordinal(self) -> int:
        """Position of the rank in 2..A, from 0 (deuce) to 12 (ace)."""
        return self.rank - Rank.TWO

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '10s' or 'AH'."""
        s = s.strip()
        if len(s) not in (2, 3):
            raise ValueError(f"Invalid card string: {s}")
        rank_str = s[:-1].upper()
        suit_char = s[-1].lower()

        if rank_str not in STR_RANK:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_char not in STR_SUIT:
            raise ValueError(f"Invalid suit: {suit_char}")

        return cls(rank=Rank(STR_RANK[rank_str]), suit=Suit(STR_SUIT[suit_char]))

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


def parse_cards(s: str) -> list[Card]:
    """
    Parse a run of card codes.

    Codes may be separated by whitespace or commas, or written back to
    back: 'AsKh', '10s 9h' and 'Ah,Kd,2c' are all accepted.
    """
    cards = []
    for chunk in re.split(r"[\s,]+", s.strip()):
        pos = 0
        while pos < len(chunk):
            match = _CARD_TOKEN.match(chunk, pos)
            if match is None or match.end() >= len(chunk):
                raise ValueError(f"Invalid card string: {chunk[pos:]}")
            cards.append(Card.from_string(chunk[pos:match.end() + 1]))
            pos = match.end() + 1
    return cards


@dataclass(frozen=True)
class HoleCards:
    """The two private cards dealt to one player."""
    card1: Card
    card2: Card

    def __post_init__(self):
        if self.card1 == self.card2:
            raise InvalidStateError(f"Duplicate hole card: {self.card1}")
        # Ensure card1 has higher or equal rank
        if self.card1.rank < self.card2.rank:
            high, low = self.card2, self.card1
            object.__setattr__(self, "card1", high)
            object.__setattr__(self, "card2", low)

    @property
    def cards(self) -> tuple[Card, Card]:
        return (self.card1, self.card2)

    @property
    def is_pair(self) -> bool:
        """Check if hand is a pocket pair."""
        return self.card1.rank == self.card2.rank

    @property
    def is_suited(self) -> bool:
        """Check if hand is suited."""
        return self.card1.suit == self.card2.suit

    @property
    def canonical(self) -> str:
        """
        Get canonical hand notation (e.g., 'AKs', 'QQ', '72o').

        This groups equivalent hands regardless of specific suits.
        """
        r1 = RANK_STR[self.card1.rank]
        r2 = RANK_STR[self.card2.rank]

        if self.is_pair:
            return f"{r1}{r2}"
        elif self.is_suited:
            return f"{r1}{r2}s"
        else:
            return f"{r1}{r2}o"

    def __iter__(self):
        return iter(self.cards)

    def __str__(self) -> str:
        return f"{self.card1}{self.card2}"

    def __repr__(self) -> str:
        return f"HoleCards({self.card1}, {self.card2})"

    @classmethod
    def from_string(cls, s: str) -> "HoleCards":
        """Parse hole cards from string like 'AsKh' or '10h 9h'."""
        cards = parse_cards(s)
        if len(cards) != 2:
            raise ValueError(f"Hole cards need exactly 2 cards: {s}")
        return cls(*cards)

    @classmethod
    def coerce(cls, hole) -> "HoleCards":
        """Accept HoleCards or any 2-card sequence."""
        if isinstance(hole, cls):
            return hole
        cards = list(hole)
        if len(cards) != 2:
            raise InvalidStateError(f"Hole cards must be exactly 2 cards, got {len(cards)}")
        return cls(*cards)


def full_deck() -> list[Card]:
    """All 52 cards, rank-major then suit."""
    return [
        Card(Rank(rank), Suit(suit))
        for rank in range(2, 15)
        for suit in range(4)
    ]


def remaining_deck(used: Iterable[Card]) -> list[Card]:
    """Full deck minus the used cards, which must be distinct."""
    used = list(used)
    dupes = [card for card, n in Counter(used).items() if n > 1]
    if dupes:
        raise InvalidStateError(
            f"Duplicate cards detected: {' '.join(str(c) for c in dupes)}"
        )
    used_set = set(used)
    return [card for card in full_deck() if card not in used_set]


def normalize_board(board: Optional[Sequence[Optional[Card]]]) -> list[Optional[Card]]:
    """
    Expand a board to its 5 slots.

    None marks an unknown slot. A board shorter than 5 is padded with
    unknown slots at the end.
    """
    slots = list(board or [])
    if len(slots) > BOARD_SIZE:
        raise InvalidBoardError(f"Board has at most {BOARD_SIZE} cards, got {len(slots)}")
    return slots + [None] * (BOARD_SIZE - len(slots))


def known_cards(board: Sequence[Optional[Card]]) -> list[Card]:
    """Known cards of a board, in slot order."""
    return [card for card in board if card is not None]


def street_name(known_count: int) -> Optional[str]:
    """Street for a known board count, or None if it is not a checkpoint."""
    return BOARD_CHECKPOINTS.get(known_count)
