# Where: linesift.features.output.__init__
# What: Expose output file naming and writing.
# Why: Provide a stable import surface for the application layer.

from .usecases.writer import OutputSettings, output_path, write_category, write_classified_lines

__all__ = ["OutputSettings", "output_path", "write_category", "write_classified_lines"]
