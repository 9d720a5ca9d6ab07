"""Exhaustive breadth-first search over the U/F/R configuration graph."""

from .bfs import SearchResult, explore_all, invert_moves

__all__ = [
    "SearchResult",
    "explore_all",
    "invert_moves",
]
