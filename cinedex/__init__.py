"""Cinedex desktop catalog browser for movies, series and the people behind them."""

__version__ = "0.4.0"
