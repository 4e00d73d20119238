"""ICO container layout, assembly and inspection."""

from .assembler import assemble, build_directory
from .layout import (
    BITS_PER_PIXEL,
    ENTRY_SIZE,
    HEADER_SIZE,
    ICON_TYPE,
    MAX_ENTRIES,
    MAX_SIDE,
    DirectoryEntry,
)
from .reader import iter_payloads, read_directory

__all__ = [
    "BITS_PER_PIXEL",
    "ENTRY_SIZE",
    "HEADER_SIZE",
    "ICON_TYPE",
    "MAX_ENTRIES",
    "MAX_SIDE",
    "DirectoryEntry",
    "assemble",
    "build_directory",
    "iter_payloads",
    "read_directory",
]
