"""Pocket Table package."""

from .core.engine import PocketCubeCore
from .explorer.scramble import scramble
from .search.bfs import explore_all, invert_moves

__all__ = ["PocketCubeCore", "explore_all", "invert_moves", "scramble"]
