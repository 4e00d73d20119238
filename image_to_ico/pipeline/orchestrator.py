"""Conversion pipeline: decode -> resample -> encode -> assemble.

The per-size resample and encode work is independent, so it is fanned out
over a thread pool. Results are always collected by size index, so the
container is byte-identical whether the work runs in parallel or
sequentially.
"""

from __future__ import annotations

import os
import stat
import tempfile
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Callable, Iterable, Sequence, TypeVar

from loguru import logger

from image_to_ico.container.assembler import assemble
from image_to_ico.container.layout import MAX_ENTRIES, MAX_SIDE
from image_to_ico.errors import (
    ContainerWriteError,
    ConversionError,
    InvalidDimensions,
    NoFrames,
    TooManyFrames,
)
from image_to_ico.imaging.decoder import decode_image, load_image
from image_to_ico.imaging.encoder import Frame, encode_frame
from image_to_ico.imaging.raster import Raster
from image_to_ico.imaging.resampler import DEFAULT_RESAMPLE, resize, resolve_filter

DEFAULT_SIZES: tuple[int, ...] = (16, 24, 32, 48, 64, 128, 256)

T = TypeVar("T")
R = TypeVar("R")


class PipelineState(Enum):
    IDLE = "idle"
    DECODING = "decoding"
    RESAMPLING = "resampling"
    ENCODING = "encoding"
    ASSEMBLING = "assembling"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one pipeline run: a finished container or an error."""

    sizes: tuple[int, ...]
    container: bytes | None = None
    error: ConversionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.container is not None


def validate_sizes(sizes: Iterable[int]) -> tuple[int, ...]:
    """Check a requested size list; order and duplicates are kept.

    Raises:
        NoFrames: If the list is empty.
        TooManyFrames: If it has more entries than a directory can hold.
        InvalidDimensions: If a size is not an integer in 1..256.
    """
    sizes = tuple(sizes)
    if not sizes:
        raise NoFrames("At least one icon size is required")
    if len(sizes) > MAX_ENTRIES:
        raise TooManyFrames(
            f"At most {MAX_ENTRIES} icon sizes are supported, got {len(sizes)}",
            count=len(sizes),
        )
    for size in sizes:
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidDimensions(f"Icon size must be an integer, got {size!r}")
        if not 1 <= size <= MAX_SIDE:
            raise InvalidDimensions(f"Icon size {size} is outside 1..{MAX_SIDE}")
    return sizes


class ConversionPipeline:
    """Turn one source image into an icon container.

    Parameters
    ----------
    sizes : Sequence[int], default=DEFAULT_SIZES
        Side lengths of the frames, in directory order
    resample : str, default="lanczos"
        Interpolation filter name (see ``RESAMPLING_FILTERS``)
    max_workers : int | None, default=None
        Thread pool size for the per-size work; ``1`` runs everything in
        the calling thread, ``None`` lets the executor choose

    Examples
    --------
    >>> result = ConversionPipeline(sizes=[16, 32]).run(png_bytes)
    >>> if result.ok:
    ...     Path("app.ico").write_bytes(result.container)
    """

    def __init__(
        self,
        sizes: Sequence[int] = DEFAULT_SIZES,
        resample: str = DEFAULT_RESAMPLE,
        max_workers: int | None = None,
    ) -> None:
        resolve_filter(resample)
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.sizes = tuple(sizes)
        self.resample = resample
        self.max_workers = max_workers
        self._state = PipelineState.IDLE

    @property
    def state(self) -> PipelineState:
        return self._state

    def _set_state(self, state: PipelineState) -> None:
        logger.debug(f"Pipeline {self._state.value} -> {state.value}")
        self._state = state

    def run(self, source_bytes: bytes) -> ConversionResult:
        """Decode ``source_bytes`` and build the container.

        Conversion failures are reported in the result, never raised.
        """
        self._state = PipelineState.IDLE
        try:
            sizes = validate_sizes(self.sizes)
            self._set_state(PipelineState.DECODING)
            source = decode_image(source_bytes)
            container = self._build(source, sizes)
        except ConversionError as exc:
            return self._fail(exc)
        return ConversionResult(sizes=self.sizes, container=container)

    def run_raster(self, source: Raster) -> ConversionResult:
        """Build the container from an already decoded raster."""
        self._state = PipelineState.IDLE
        try:
            sizes = validate_sizes(self.sizes)
            container = self._build(source, sizes)
        except ConversionError as exc:
            return self._fail(exc)
        return ConversionResult(sizes=self.sizes, container=container)

    def _build(self, source: Raster, sizes: tuple[int, ...]) -> bytes:
        self._set_state(PipelineState.RESAMPLING)
        rasters = self._fan_out(partial(self._resize, source), sizes)

        self._set_state(PipelineState.ENCODING)
        frames: list[Frame] = self._fan_out(encode_frame, rasters)

        self._set_state(PipelineState.ASSEMBLING)
        container = assemble(frames)

        self._set_state(PipelineState.DONE)
        logger.info(
            f"Converted {source.width}x{source.height} image into "
            f"{len(frames)} icon frames ({len(container)} bytes)"
        )
        return container

    def _resize(self, source: Raster, side: int) -> Raster:
        return resize(source, side, self.resample)

    def _fan_out(self, func: Callable[[T], R], items: Sequence[T]) -> list[R]:
        """Apply ``func`` to every item and return results in item order.

        On failure the error of the lowest failing index is raised and
        work that has not started yet is cancelled.
        """
        if self.max_workers == 1:
            return [func(item) for item in items]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures: list[Future[R]] = [executor.submit(func, item) for item in items]
            results = []
            for future in futures:
                try:
                    results.append(future.result())
                except BaseException:
                    for pending in futures:
                        pending.cancel()
                    raise
            return results

    def _fail(self, error: ConversionError) -> ConversionResult:
        self._set_state(PipelineState.FAILED)
        logger.error(f"Icon conversion failed: {error}")
        return ConversionResult(sizes=self.sizes, error=error)


def convert(
    source_bytes: bytes,
    sizes: Sequence[int] = DEFAULT_SIZES,
    resample: str = DEFAULT_RESAMPLE,
    max_workers: int | None = None,
) -> bytes:
    """Convert encoded image bytes into ICO container bytes.

    Raises:
        ConversionError: The specific subclass describing the failure.
    """
    result = ConversionPipeline(sizes=sizes, resample=resample, max_workers=max_workers).run(
        source_bytes
    )
    if result.error is not None:
        raise result.error
    return result.container


def _target_mode(path: Path) -> int:
    """Mode for the finished file: the existing target's, else 0666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_container(container: bytes, path: str | Path) -> Path:
    """Write a finished container to ``path`` without leaving partial files.

    The data goes to a temporary file next to the destination, which then
    replaces it in one step.

    Raises:
        ContainerWriteError: If the directory or file cannot be written.
    """
    path = Path(path)
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "wb") as f:
            f.write(container)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            except OSError as cleanup_exc:
                logger.warning(f"Failed to remove temporary file {tmp_name}: {cleanup_exc}")
        raise ContainerWriteError(f"Failed to write icon to {path}: {exc}", path=path) from exc

    logger.info(f"Icon saved to {path} ({len(container)} bytes)")
    return path


def convert_file(
    source_path: str | Path,
    destination_path: str | Path,
    sizes: Sequence[int] = DEFAULT_SIZES,
    resample: str = DEFAULT_RESAMPLE,
    max_workers: int | None = None,
) -> Path:
    """Read an image file, convert it and save the icon.

    Raises:
        DecodeError: If the source cannot be read or decoded.
        ConversionError: For any later pipeline failure.
        ContainerWriteError: If saving the icon fails.
    """
    source = load_image(source_path)
    pipeline = ConversionPipeline(sizes=sizes, resample=resample, max_workers=max_workers)
    result = pipeline.run_raster(source)
    if result.error is not None:
        raise result.error
    return write_container(result.container, destination_path)
