"""Exception hierarchy for the image-to-ico conversion core."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base class for every failure raised by the conversion core."""


class DecodeError(ConversionError):
    """Input bytes are not a readable or supported image."""


class InvalidDimensions(ConversionError):
    """A raster or requested icon size has an unusable width/height."""


class EncodeFailure(ConversionError):
    """A resized raster could not be turned into an embeddable payload."""

    def __init__(self, message: str, side: int | None = None) -> None:
        super().__init__(message)
        self.side = side


class NoFrames(ConversionError):
    """The container would have no directory entries."""


class TooManyFrames(ConversionError):
    """More frames than the 16-bit directory count can describe."""

    def __init__(self, message: str, count: int) -> None:
        super().__init__(message)
        self.count = count


class CorruptContainer(ConversionError):
    """A buffer handed to the container reader is not a valid icon file."""


class ContainerWriteError(ConversionError):
    """The finished container could not be written to its destination."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
