"""Tests for card, hole hand and board representation."""

import pytest

from pocketodds.game.cards import (
    Card, HoleCards, Rank, Suit, full_deck, remaining_deck,
    parse_cards, normalize_board, known_cards, street_name,
)
from pocketodds.game.errors import InvalidBoardError, InvalidStateError


class TestCard:
    def test_from_string(self):
        card = Card.from_string("As")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_from_string_ten(self):
        card = Card.from_string("Th")
        assert card.rank == Rank.TEN
        assert card.suit == Suit.HEARTS

    def test_from_string_ten_numeric(self):
        assert Card.from_string("10S") == Card.from_string("Ts")

    def test_from_string_uppercase_suit(self):
        card = Card.from_string("AH")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.HEARTS

    def test_from_string_lowercase(self):
        card = Card.from_string("kd")
        assert card.rank == Rank.KING
        assert card.suit == Suit.DIAMONDS

    def test_str(self):
        card = Card(Rank.ACE, Suit.SPADES)
        assert str(card) == "As"
        assert str(Card.from_string("10c")) == "Tc"

    def test_from_string_invalid_rank(self):
        with pytest.raises(ValueError):
            Card.from_string("Xs")

    def test_from_string_invalid_suit(self):
        with pytest.raises(ValueError):
            Card.from_string("Ax")

    def test_from_string_invalid_length(self):
        with pytest.raises(ValueError):
            Card.from_string("A")

    def test_equality(self):
        card1 = Card.from_string("As")
        card2 = Card.from_string("As")
        assert card1 == card2
        assert hash(card1) == hash(card2)
        assert Card(14, 3) == card1

    def test_immutable(self):
        card = Card.from_string("As")
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_ordinal(self):
        assert Card.from_string("2c").ordinal == 0
        assert Card.from_string("Tc").ordinal == 8
        assert Card.from_string("Ac").ordinal == 12

    def test_to_treys(self):
        card = Card.from_string("As")
        treys_card = card.to_treys()
        assert isinstance(treys_card, int)


class TestParseCards:
    def test_concatenated(self):
        assert parse_cards("AsKh") == [Card.from_string("As"), Card.from_string("Kh")]

    def test_separated(self):
        cards = parse_cards("Ah, Kd 2c")
        assert [str(c) for c in cards] == ["Ah", "Kd", "2c"]

    def test_numeric_ten(self):
        cards = parse_cards("10s9h10d")
        assert [str(c) for c in cards] == ["Ts", "9h", "Td"]

    def test_empty(self):
        assert parse_cards("") == []

    def test_dangling_rank(self):
        with pytest.raises(ValueError):
            parse_cards("AsK")

    def test_invalid_token(self):
        with pytest.raises(ValueError):
            parse_cards("As1h")


class TestHoleCards:
    def test_from_string(self):
        hand = HoleCards.from_string("AsKh")
        assert hand.card1.rank == Rank.ACE
        assert hand.card2.rank == Rank.KING

    def test_from_string_wrong_count(self):
        with pytest.raises(ValueError):
            HoleCards.from_string("AsKhQd")

    def test_duplicate_card(self):
        with pytest.raises(InvalidStateError):
            HoleCards.from_string("AsAs")

    def test_card_ordering(self):
        # Lower card first in string should still have higher rank first
        hand = HoleCards.from_string("KsAs")
        assert hand.card1.rank == Rank.ACE
        assert hand.card2.rank == Rank.KING

    def test_canonical(self):
        assert HoleCards.from_string("AsAh").canonical == "AA"
        assert HoleCards.from_string("AsKs").canonical == "AKs"
        assert HoleCards.from_string("7d2c").canonical == "72o"

    def test_flags(self):
        assert HoleCards.from_string("QhQd").is_pair
        assert HoleCards.from_string("JhTh").is_suited
        assert not HoleCards.from_string("JhTc").is_suited

    def test_coerce_sequence(self):
        hand = HoleCards.coerce([Card.from_string("2c"), Card.from_string("Ad")])
        assert str(hand) == "Ad2c"

    def test_coerce_wrong_count(self):
        with pytest.raises(InvalidStateError, match="exactly 2"):
            HoleCards.coerce([Card.from_string("2c")])

    def test_immutable(self):
        hand = HoleCards.from_string("2cAd")
        assert str(hand) == "Ad2c"
        with pytest.raises(AttributeError):
            hand.card1 = Card.from_string("Ks")

    def test_hashable(self):
        a = HoleCards.from_string("AsKh")
        b = HoleCards.from_string("KhAs")
        assert a == b
        assert len({a, b}) == 1

    def test_iter(self):
        hand = HoleCards.from_string("AsKh")
        assert list(hand) == [hand.card1, hand.card2]


class TestDeck:
    def test_full_deck(self):
        deck = full_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_full_deck_deterministic(self):
        assert full_deck() == full_deck()

    def test_remaining_deck(self):
        used = parse_cards("AsKhQd")
        deck = remaining_deck(used)
        assert len(deck) == 49
        assert not set(used) & set(deck)

    def test_remaining_deck_sizes(self):
        deck = full_deck()
        for n in (0, 2, 5, 7, 20):
            remaining = remaining_deck(deck[:n])
            assert len(remaining) == 52 - n
            assert not set(deck[:n]) & set(remaining)

    def test_remaining_deck_duplicate(self):
        with pytest.raises(InvalidStateError, match="Duplicate"):
            remaining_deck(parse_cards("AsKhAs"))


class TestBoard:
    def test_normalize_pads(self, board_flop):
        slots = normalize_board(board_flop)
        assert len(slots) == 5
        assert slots[:3] == board_flop
        assert slots[3:] == [None, None]

    def test_normalize_empty(self):
        assert normalize_board(None) == [None] * 5

    def test_normalize_keeps_gaps(self):
        ks = Card.from_string("Ks")
        slots = normalize_board([None, ks, None])
        assert slots == [None, ks, None, None, None]
        assert known_cards(slots) == [ks]

    def test_normalize_too_many(self):
        with pytest.raises(InvalidBoardError):
            normalize_board(parse_cards("AsKsQsJsTs9s"))

    def test_street_name(self):
        assert street_name(0) == "preflop"
        assert street_name(3) == "flop"
        assert street_name(4) == "turn"
        assert street_name(5) == "river"
        assert street_name(1) is None
        assert street_name(2) is None
