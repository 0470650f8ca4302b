"""
PocketOdds: Texas Hold'em equity estimator

Estimates a hole hand's probability of winning against random opponent
hands by Monte Carlo simulation of the unknown board and opponent cards.
"""

__version__ = "0.1.0"
