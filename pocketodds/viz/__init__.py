"""Visualization module."""

from .display import EquityDisplay, EquityReport, equity_style, format_equity

__all__ = [
    "EquityDisplay",
    "EquityReport",
    "equity_style",
    "format_equity",
]
