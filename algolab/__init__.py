"""Classic algorithms: sorting, string search, knapsack, backtracking and graph algorithms."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "knapsack",
    "shortest_paths",
    "sorting",
    "spanning_tree",
    "string_search",
    "traversal",
    "tsp",
]