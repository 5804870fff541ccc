"""CLI entry point for converting a TrueType or OpenType font into a bitmap font atlas."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from dotenv import find_dotenv, load_dotenv

from .atlas import create_bitmap_atlas
from .codec import image_path, metadata_path, write_font_atlas
from .config import AtlasConfiguration, default_padding, default_slot_glyph_size
from .errors import AtlasError, ConfigurationError
from .rasterizer import FreeTypeRasterizer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fontgen",
        description="A shell utility for converting TrueType or OpenType fonts into bitmapped fonts.",
    )
    parser.add_argument(
        "-i",
        "--input",
        dest="input_path",
        type=Path,
        required=True,
        help="Path to the input font file.",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        type=Path,
        required=True,
        help="Base path of the output atlas; the .png image and .meta file are written next to it.",
    )
    parser.add_argument(
        "--slot-glyph-size",
        type=int,
        default=default_slot_glyph_size(),
        help="Size in pixels of a glyph slot in the font sheet, padding included.",
    )
    parser.add_argument(
        "-p",
        "--padding",
        type=int,
        default=default_padding(),
        help="Glyph slot padding in pixels, reserved for outlines around each glyph.",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def verify_options(args: argparse.Namespace) -> None:
    input_path: Path = args.input_path
    output_path: Path = args.output_path

    if not input_path.exists():
        raise ConfigurationError(f"Input file does not exist: {input_path}")
    if not input_path.is_file():
        raise ConfigurationError(f"Input path is not a file: {input_path}")
    for candidate in (output_path, metadata_path(output_path), image_path(output_path)):
        if candidate.exists():
            raise ConfigurationError(f"Output file already exists: {candidate}")
    if args.slot_glyph_size <= 0:
        raise ConfigurationError(
            f"The slot glyph size must be positive, got {args.slot_glyph_size}"
        )
    if args.padding < 0:
        raise ConfigurationError(f"The padding cannot be negative, got {args.padding}")
    if args.padding > args.slot_glyph_size:
        raise ConfigurationError(
            f"The padding of {args.padding} pixels is larger than the slot glyph "
            f"size of {args.slot_glyph_size} pixels"
        )


def run_app(args: argparse.Namespace) -> None:
    config = AtlasConfiguration.from_slot_size(args.slot_glyph_size, args.padding)
    rasterizer = FreeTypeRasterizer.from_path(args.input_path)

    atlas = create_bitmap_atlas(rasterizer, config)
    meta_file, image_file = write_font_atlas(atlas, args.output_path)

    print(
        f"Packed {len(atlas.metadata.glyph_metadata)} glyphs into a "
        f"{config.dimensions_px}x{config.dimensions_px}px atlas"
    )
    print(f"Wrote metadata to {meta_file}")
    print(f"Wrote atlas image to {image_file}")


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    try:
        args = parse_args(argv)
        verify_options(args)
        run_app(args)
    except AtlasError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
