"""GraphQL read API for the school website."""

__version__ = "1.0.0"
