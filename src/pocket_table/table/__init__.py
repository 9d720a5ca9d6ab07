"""Table writers.

The binary table is the product; the text table is for inspection only.
"""

from .binary import (
    MAX_SOLUTION_LENGTH,
    RECORD_SIZE,
    SENTINEL,
    encode_table,
    load_table,
    lookup,
    pack_solution,
    read_record,
    unpack_solution,
    write_table,
)
from .text import format_entry, write_text_table

__all__ = [
    "MAX_SOLUTION_LENGTH",
    "RECORD_SIZE",
    "SENTINEL",
    "pack_solution",
    "unpack_solution",
    "encode_table",
    "write_table",
    "load_table",
    "read_record",
    "lookup",
    "format_entry",
    "write_text_table",
]
