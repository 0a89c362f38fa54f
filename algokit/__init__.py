"""Classic algorithms and data structures: numbers, sorting, searching, lists, graphs, scheduling and matrices."""

__version__ = "0.1.0"