"""Two-stack integer sorting with a restricted operation set, plus a move checker."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "sorter", "stacks"]