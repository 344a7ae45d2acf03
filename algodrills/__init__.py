"""Classic algorithm drills: backtracking, graph search, greedy choices, sorting and small statistics."""

__version__ = "0.1.0"
__all__ = ["backtracking", "bruteforce", "graph", "greedy", "implementation", "sorting"]