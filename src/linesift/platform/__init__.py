"""Infrastructure adapters used by linesift."""
