"""Binary layout of the ICO container: header and directory entries.

All fields are little-endian::

    header (6 bytes)     reserved:u16=0  type:u16=1  count:u16
    entry (16 bytes)     width:u8  height:u8  color_count:u8  reserved:u8
                         planes:u16  bit_count:u16  size:u32  offset:u32

A width or height of 256 is stored as 0.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

HEADER_FORMAT = "<HHH"
ENTRY_FORMAT = "<BBBBHHII"

HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
ENTRY_SIZE = struct.calcsize(ENTRY_FORMAT)

ICON_TYPE = 1
MAX_ENTRIES = 0xFFFF
MAX_SIDE = 256
COLOR_PLANES = 1
BITS_PER_PIXEL = 32


def pack_header(count: int) -> bytes:
    return struct.pack(HEADER_FORMAT, 0, ICON_TYPE, count)


def unpack_header(data: bytes) -> tuple[int, int, int]:
    """Return ``(reserved, type, count)`` from the first six bytes."""
    return struct.unpack_from(HEADER_FORMAT, data, 0)


def encode_side(side: int) -> int:
    return 0 if side == MAX_SIDE else side


def decode_side(value: int) -> int:
    return MAX_SIDE if value == 0 else value


@dataclass(frozen=True)
class DirectoryEntry:
    """One 16-byte directory record describing a frame's payload."""

    width: int
    height: int
    size: int
    offset: int
    color_count: int = 0
    reserved: int = 0
    planes: int = COLOR_PLANES
    bit_count: int = BITS_PER_PIXEL

    @property
    def pixel_width(self) -> int:
        return decode_side(self.width)

    @property
    def pixel_height(self) -> int:
        return decode_side(self.height)

    @property
    def end(self) -> int:
        """Offset one past the last payload byte."""
        return self.offset + self.size

    @classmethod
    def for_payload(cls, side: int, size: int, offset: int) -> "DirectoryEntry":
        stored = encode_side(side)
        return cls(width=stored, height=stored, size=size, offset=offset)

    def pack(self) -> bytes:
        return struct.pack(
            ENTRY_FORMAT,
            self.width,
            self.height,
            self.color_count,
            self.reserved,
            self.planes,
            self.bit_count,
            self.size,
            self.offset,
        )

    @classmethod
    def unpack(cls, data: bytes, offset: int = 0) -> "DirectoryEntry":
        width, height, color_count, reserved, planes, bit_count, size, payload_offset = (
            struct.unpack_from(ENTRY_FORMAT, data, offset)
        )
        return cls(
            width=width,
            height=height,
            size=size,
            offset=payload_offset,
            color_count=color_count,
            reserved=reserved,
            planes=planes,
            bit_count=bit_count,
        )
