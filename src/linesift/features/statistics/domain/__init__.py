"""Domain types for run statistics."""
