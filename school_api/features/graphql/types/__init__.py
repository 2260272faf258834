"""Strawberry output types built from projected rows."""
