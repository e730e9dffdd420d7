"""Use cases for persisting classified lines."""
