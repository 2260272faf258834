"""Infrastructure adapters: database engine, Redis cache, logging and metrics."""
