"""SQLite persistence: engine, schema, row mappers and repositories."""
