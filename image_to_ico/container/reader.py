"""Read back the directory and payloads of an ICO container."""

from __future__ import annotations

from typing import Iterator

from image_to_ico.container.layout import (
    ENTRY_SIZE,
    HEADER_SIZE,
    ICON_TYPE,
    DirectoryEntry,
    unpack_header,
)
from image_to_ico.errors import CorruptContainer


def read_directory(buffer: bytes) -> list[DirectoryEntry]:
    """Parse and validate the directory of an icon container.

    Raises:
        CorruptContainer: If the header is wrong, the directory is
            truncated, or a payload lies outside the buffer.
    """
    if len(buffer) < HEADER_SIZE:
        raise CorruptContainer(f"Buffer too short for an icon header ({len(buffer)} bytes)")

    reserved, image_type, count = unpack_header(buffer)
    if reserved != 0 or image_type != ICON_TYPE:
        raise CorruptContainer(
            f"Not an icon container (reserved={reserved}, type={image_type})"
        )
    if count == 0:
        raise CorruptContainer("Icon container declares no entries")

    directory_end = HEADER_SIZE + ENTRY_SIZE * count
    if len(buffer) < directory_end:
        raise CorruptContainer(
            f"Directory of {count} entries is truncated ({len(buffer)} bytes available)"
        )

    entries = []
    for index in range(count):
        entry = DirectoryEntry.unpack(buffer, HEADER_SIZE + ENTRY_SIZE * index)
        if entry.offset < directory_end or entry.end > len(buffer):
            raise CorruptContainer(
                f"Entry {index} payload [{entry.offset}, {entry.end}) lies outside "
                f"the payload area [{directory_end}, {len(buffer)})"
            )
        entries.append(entry)
    return entries


def iter_payloads(buffer: bytes) -> Iterator[tuple[DirectoryEntry, bytes]]:
    """Yield each directory entry together with its payload bytes."""
    for entry in read_directory(buffer):
        yield entry, buffer[entry.offset:entry.end]
