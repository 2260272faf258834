"""Staff directory."""
