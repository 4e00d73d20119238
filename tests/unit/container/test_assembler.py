"""Tests for the ICO container assembler."""

import struct

import pytest

from image_to_ico.container.assembler import assemble, build_directory
from image_to_ico.container.layout import MAX_ENTRIES
from image_to_ico.errors import InvalidDimensions, NoFrames, TooManyFrames
from image_to_ico.imaging.encoder import Frame


@pytest.fixture
def frames():
    return [
        Frame(side=16, payload=b"a" * 10),
        Frame(side=32, payload=b"b" * 25),
        Frame(side=256, payload=b"c" * 7),
    ]


def test_header(frames):
    container = assemble(frames)
    assert container[:6] == bytes([0, 0, 1, 0, 3, 0])


def test_directory_entries(frames):
    container = assemble(frames)
    entries = [struct.unpack_from("<BBBBHHII", container, 6 + 16 * i) for i in range(3)]

    assert entries[0] == (16, 16, 0, 0, 1, 32, 10, 54)
    assert entries[1] == (32, 32, 0, 0, 1, 32, 25, 64)
    assert entries[2] == (0, 0, 0, 0, 1, 32, 7, 89)


def test_payloads_are_contiguous(frames):
    container = assemble(frames)

    assert container[54:] == b"a" * 10 + b"b" * 25 + b"c" * 7
    assert len(container) == 6 + 16 * 3 + 42


def test_offsets_follow_preceding_payloads(frames):
    entries = build_directory(frames)

    offset = 6 + 16 * len(frames)
    for entry, frame in zip(entries, frames):
        assert entry.offset == offset
        assert entry.size == frame.size
        offset += frame.size


def test_order_kept_and_duplicates_not_merged():
    frames = [Frame(side=32, payload=b"same"), Frame(side=16, payload=b"same")]
    entries = build_directory(frames)

    assert [e.pixel_width for e in entries] == [32, 16]
    assert entries[0].offset != entries[1].offset


def test_no_frames():
    with pytest.raises(NoFrames):
        assemble([])


def test_too_many_frames():
    frames = [Frame(side=1, payload=b"")] * (MAX_ENTRIES + 1)
    with pytest.raises(TooManyFrames) as exc_info:
        assemble(frames)
    assert exc_info.value.count == MAX_ENTRIES + 1


@pytest.mark.parametrize("side", [0, 257, 512])
def test_side_outside_directory_range(side):
    with pytest.raises(InvalidDimensions):
        assemble([Frame(side=side, payload=b"x")])
