"""Module-level constants shared across chartgate."""
