"""Domain types for line classification."""
