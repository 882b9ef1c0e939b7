"""Command line interface for chartgate."""
