"""Infrastructure adapters: HTTP client, database, repositories."""
