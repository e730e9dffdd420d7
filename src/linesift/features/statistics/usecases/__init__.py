"""Use cases computing run statistics."""
