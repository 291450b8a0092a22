"""CoinCollector - personal Euro coin collection manager.

Catalogs Euro coins in named collections, grouped under collection groups
owned by a user, persisted in SQLite with cascading foreign keys.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
