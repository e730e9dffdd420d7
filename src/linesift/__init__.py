"""linesift: sort the lines of text files into integers, floats and strings."""

__version__ = "0.1.0"
