"""Algorithm exercises on arrays, strings, graphs, backtracking, dynamic programming, sorting and text patterns."""

__version__ = "0.1.0"
__all__ = ["arrays", "backtracking", "dynamic", "graphs", "patterns", "sorting", "text"]