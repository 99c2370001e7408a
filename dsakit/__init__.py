"""Classic data-structure and algorithm routines, with a pattern-printing command."""

__version__ = "0.1.0"
__all__ = ["arrays", "sorting", "greedy", "tree", "notation", "heaps", "linked", "patterns"]