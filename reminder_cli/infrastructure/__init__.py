"""Infrastructure adapters: SQLite storage, advice provider, notifiers."""
