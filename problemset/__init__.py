"""Solutions to classic algorithmic problems as plain Python functions, with a small command line."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "combinatorics",
    "dp",
    "graph",
    "intro",
    "linear",
    "modular",
    "scheduling",
    "searching",
    "sorting",
    "subarrays",
]