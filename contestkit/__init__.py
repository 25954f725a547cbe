"""Classic programming-contest algorithms: graphs, search, sequences, dynamic programming, greedy methods and arithmetic."""

__version__ = "0.1.0"
__all__ = ["graphs", "search", "sequences", "dynamic", "greedy", "arith", "assorted"]