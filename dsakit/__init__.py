"""Classic data structures and algorithms: linked lists, hash tables, graphs, trees, sorting, searching and backtracking."""

__version__ = "0.1.0"