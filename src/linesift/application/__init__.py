"""Application layer orchestrating linesift features."""
