"""Infrastructure layer for CoinCollector.

This package contains the SQLite persistence implementation.
"""
