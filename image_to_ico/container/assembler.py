"""Pack encoded frames into a single multi-resolution ICO buffer."""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from image_to_ico.container.layout import (
    ENTRY_SIZE,
    HEADER_SIZE,
    MAX_ENTRIES,
    MAX_SIDE,
    DirectoryEntry,
    pack_header,
)
from image_to_ico.errors import InvalidDimensions, NoFrames, TooManyFrames
from image_to_ico.imaging.encoder import Frame


def _check_frames(frames: Sequence[Frame]) -> None:
    if not frames:
        raise NoFrames("Cannot build an icon container without frames")
    if len(frames) > MAX_ENTRIES:
        raise TooManyFrames(
            f"Icon containers hold at most {MAX_ENTRIES} frames, got {len(frames)}",
            count=len(frames),
        )
    for frame in frames:
        if not 1 <= frame.side <= MAX_SIDE:
            raise InvalidDimensions(
                f"Frame side {frame.side} cannot be stored in an icon directory "
                f"(allowed 1..{MAX_SIDE})"
            )


def build_directory(frames: Sequence[Frame]) -> list[DirectoryEntry]:
    """Compute one directory entry per frame, in the given order.

    Each offset is the header size plus the whole directory size plus the
    lengths of all preceding payloads.
    """
    _check_frames(frames)
    offset = HEADER_SIZE + ENTRY_SIZE * len(frames)
    entries = []
    for frame in frames:
        entries.append(DirectoryEntry.for_payload(frame.side, frame.size, offset))
        offset += frame.size
    return entries


def assemble(frames: Sequence[Frame]) -> bytes:
    """Build the complete container: header, directory, then payloads.

    Frames keep their order and identical payloads are not merged.

    Raises:
        NoFrames: If ``frames`` is empty.
        TooManyFrames: If there are more than 65535 frames.
        InvalidDimensions: If a frame side is outside 1..256.
    """
    entries = build_directory(frames)

    parts = [pack_header(len(frames))]
    parts.extend(entry.pack() for entry in entries)
    parts.extend(frame.payload for frame in frames)
    container = b"".join(parts)

    for entry in entries:
        logger.debug(
            f"Directory entry {entry.pixel_width}x{entry.pixel_height}: "
            f"{entry.size} bytes at offset {entry.offset}"
        )
    logger.debug(f"Assembled icon container with {len(frames)} frames, {len(container)} bytes")
    return container
