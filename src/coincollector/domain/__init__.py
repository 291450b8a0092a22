"""CoinCollector domain layer: entities, value types and errors."""
