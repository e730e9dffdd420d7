"""User interfaces for linesift."""
