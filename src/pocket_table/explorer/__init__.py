"""pocket_table.explorer"""

from .scramble import scramble

__all__ = [
    "scramble",
]
