"""CLI entry point for image-to-ico.

Converts one image file into a multi-resolution ``.ico`` file, or lists the
directory of an existing icon with ``--inspect``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from loguru import logger

from .container import read_directory
from .errors import ConversionError
from .imaging import RESAMPLING_FILTERS
from .pipeline import convert_file
from .settings import (
    get_preset_sizes,
    list_presets,
    load_conversion_settings,
    save_conversion_settings,
)


def _parse_sizes(text: str) -> list[int]:
    try:
        sizes = [int(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size list: {text!r}") from None
    if not sizes:
        raise argparse.ArgumentTypeError("size list is empty")
    return sizes


def _parse_workers(text: str) -> int:
    try:
        workers = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid worker count: {text!r}") from None
    if workers < 1:
        raise argparse.ArgumentTypeError("worker count must be at least 1")
    return workers


def build_parser() -> argparse.ArgumentParser:
    presets = list_presets()
    parser = argparse.ArgumentParser(
        prog="image-to-ico",
        description="Convert an image (PNG, JPEG, GIF, BMP, ...) into a multi-size Windows icon.",
    )
    parser.add_argument("source", type=Path, help="input image, or icon file with --inspect")
    parser.add_argument(
        "-o", "--output", type=Path, help="destination .ico path (default: SOURCE with .ico suffix)"
    )
    size_group = parser.add_mutually_exclusive_group()
    size_group.add_argument(
        "--sizes", type=_parse_sizes, help="comma-separated icon sizes, e.g. 16,32,48,256"
    )
    size_group.add_argument(
        "--preset",
        choices=sorted(presets),
        help="named size set: "
        + "; ".join(f"{name} = {cfg['sizes']}" for name, cfg in sorted(presets.items())),
    )
    parser.add_argument("--resample", choices=list(RESAMPLING_FILTERS), help="resampling filter")
    parser.add_argument("--workers", type=_parse_workers, help="number of worker threads")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="remember the effective sizes, filter and worker count for later runs",
    )
    parser.add_argument(
        "--inspect", action="store_true", help="list the directory of an existing icon file"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def inspect_container(path: Path) -> int:
    """Print one line per directory entry of an icon file."""
    try:
        entries = read_directory(path.read_bytes())
    except OSError as e:
        print(f"[FAIL] Cannot read {path}: {e}", file=sys.stderr)
        return 1
    except ConversionError as e:
        print(f"[FAIL] {path}: {e}", file=sys.stderr)
        return 1

    print(f"{path}: {len(entries)} frames")
    for index, entry in enumerate(entries):
        print(
            f"  [{index}] {entry.pixel_width}x{entry.pixel_height} "
            f"{entry.bit_count}bpp {entry.size} bytes @ {entry.offset}"
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the image-to-ico command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.inspect:
        return inspect_container(args.source)

    settings = load_conversion_settings()
    if args.sizes is not None:
        settings["sizes"] = args.sizes
    elif args.preset is not None:
        settings["sizes"] = get_preset_sizes(args.preset)
    if args.resample is not None:
        settings["resample"] = args.resample
    if args.workers is not None:
        settings["max_workers"] = args.workers

    output = args.output or args.source.with_suffix(".ico")
    logger.info(f"Converting {args.source} -> {output} with sizes {settings['sizes']}")

    try:
        saved = convert_file(
            args.source,
            output,
            sizes=settings["sizes"],
            resample=settings["resample"],
            max_workers=settings["max_workers"],
        )
    except ConversionError as e:
        print(f"[FAIL] {e}", file=sys.stderr)
        return 1

    if args.save_defaults:
        try:
            save_conversion_settings(settings)
        except OSError as e:
            print(f"[FAIL] Could not save defaults: {e}", file=sys.stderr)
            return 1
        logger.info("Saved conversion defaults")

    print(f"[OK] Icon saved to {saved}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
