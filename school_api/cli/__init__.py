"""Command line interface for school-api."""
