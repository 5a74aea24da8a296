"""Solutions to classic algorithm puzzles: linked lists, trees, heaps, windows, greedy, counting and search."""

__version__ = "0.1.0"