"""Errors raised by the equity engine."""


class EquityError(Exception):
    """Base class for all engine errors."""


class InvalidStateError(EquityError, ValueError):
    """Cards collide or a hand has the wrong shape."""


class InsufficientCardsError(EquityError, ValueError):
    """Fewer than 5 cards were given to a hand evaluator."""


class InvalidOpponentCountError(EquityError, ValueError):
    """Opponent count is outside the allowed table size."""


class InsufficientDeckError(EquityError, ValueError):
    """Not enough cards remain to complete the board and deal every opponent."""


class InvalidBoardError(EquityError, ValueError):
    """Board has more than 5 slots."""


class SimulationCancelled(EquityError):
    """A simulation was stopped by its cancel check."""


class InvalidTrialCountError(EquityError, ValueError):
    """Trial count is not a positive integer."""


class InvalidConfigError(EquityError, ValueError):
    """An EquityConfig field is out of range."""
