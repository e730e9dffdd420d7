"""Feature slices of linesift."""
