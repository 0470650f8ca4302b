"""Shuffling and dealing from the remaining deck."""

from typing import Optional, Sequence, Union

import numpy as np

from .cards import Card

RandomSource = Union[None, int, np.random.SeedSequence, np.random.Generator]


def make_rng(seed: RandomSource = None) -> np.random.Generator:
    """
    Build a random generator.

    Args:
        seed: None for fresh entropy, an int or SeedSequence to seed,
            or an existing Generator (returned as-is)

    Returns:
        numpy Generator
    """
    return np.random.default_rng(seed)


def spawn_streams(rng: np.random.Generator, n: int) -> list[np.random.SeedSequence]:
    """Derive n independent child seed sequences from a generator."""
    entropy = rng.integers(0, 2**32, size=4, dtype=np.uint64).tolist()
    return np.random.SeedSequence(entropy).spawn(n)


def shuffle(cards: Sequence[Card], rng: np.random.Generator) -> list[Card]:
    """
    Fisher-Yates shuffle into a new list.

    For i from the last index down to 1, swap position i with a uniform
    index in [0, i]. The input sequence is left untouched.
    """
    shuffled = list(cards)
    n = len(shuffled)
    if n < 2:
        return shuffled

    # Upper bounds n, n-1, ..., 2 are exclusive, so index i draws from [0, i]
    swaps = rng.integers(0, np.arange(n, 1, -1)).tolist()
    for i, j in zip(range(n - 1, 0, -1), swaps):
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def deal_trial(
    pool: Sequence[Card],
    board: Sequence[Optional[Card]],
    num_opponents: int,
    rng: np.random.Generator,
) -> tuple[list[Card], list[tuple[Card, Card]]]:
    """
    Deal one trial from the remaining pool.

    Unknown board slots are filled first, in slot order, then each
    opponent receives the next two cards.

    Args:
        pool: Cards not held by the player or on the board
        board: Board slots, None where unknown
        num_opponents: Number of opponent hands to deal
        rng: Random generator

    Returns:
        Tuple of (full board, opponent hole cards)
    """
    deck = shuffle(pool, rng)
    idx = 0

    full_board = []
    for slot in board:
        if slot is None:
            full_board.append(deck[idx])
            idx += 1
        else:
            full_board.append(slot)

    opponents = []
    for _ in range(num_opponents):
        opponents.append((deck[idx], deck[idx + 1]))
        idx += 2

    return full_board, opponents
