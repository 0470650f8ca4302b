"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from pocketodds.game.cards import Card
from pocketodds.game.equity import EquityCalculator, EquityConfig


@pytest.fixture
def rng():
    """Seeded generator so statistical tests are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def calculator():
    return EquityCalculator()


@pytest.fixture
def exact_calculator():
    return EquityCalculator(EquityConfig(evaluator="exact"))


@pytest.fixture
def board_flop():
    return [
        Card.from_string("Ks"),
        Card.from_string("7d"),
        Card.from_string("2c"),
    ]


@pytest.fixture
def board_river():
    return [
        Card.from_string("Ks"),
        Card.from_string("7d"),
        Card.from_string("2c"),
        Card.from_string("9h"),
        Card.from_string("3s"),
    ]
