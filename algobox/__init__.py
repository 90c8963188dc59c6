"""Classic algorithms and data structures for strings, numbers, ranges and graphs."""

__version__ = "0.1.0"