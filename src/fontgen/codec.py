"""Reading and writing font atlases as a JSON metadata file plus a PNG image.

Both files share a base path: ``<base>.meta`` holds the metadata and
``<base>.png`` the RGBA image. Writing is not atomic; when the image cannot
be written the metadata file stays on disk.
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from .atlas import BitmapFontAtlas, BitmapFontAtlasMetadata
from .errors import (
    AtlasFormatError,
    AtlasReadError,
    AtlasWriteError,
    ImageNotFoundError,
    MetadataMalformedError,
    MetadataNotFoundError,
)

METADATA_SUFFIX = ".meta"
IMAGE_SUFFIX = ".png"
IMAGE_MODE = "RGBA"


def metadata_path(base: Path | str) -> Path:
    return Path(base).with_suffix(METADATA_SUFFIX)


def image_path(base: Path | str) -> Path:
    return Path(base).with_suffix(IMAGE_SUFFIX)


def encode_image(buffer: bytes, width: int, height: int) -> bytes:
    image = Image.frombytes(IMAGE_MODE, (width, height), buffer)
    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()


def decode_image(data: bytes) -> Tuple[bytes, int, int]:
    with Image.open(io.BytesIO(data)) as image:
        if image.mode != IMAGE_MODE:
            raise ValueError(f"expected an 8-bit {IMAGE_MODE} image, found mode {image.mode}")
        # Pillow reports 16-bit RGBA as mode RGBA too; only the decoder rawmode
        # tells the stored depth apart. Inspect it before tobytes() clears the tiles.
        for tile in image.tile:
            args = tile[3]
            rawmode = args[0] if isinstance(args, tuple) else args
            if rawmode != IMAGE_MODE:
                raise ValueError(
                    f"expected an 8-bit {IMAGE_MODE} image, found stored layout {rawmode}"
                )
        width, height = image.size
        return image.tobytes(), width, height


def write_metadata(atlas: BitmapFontAtlas, path: Path | str) -> Path:
    path = metadata_path(path)
    try:
        path.write_text(json.dumps(atlas.metadata.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        raise AtlasWriteError(path, exc.strerror or str(exc)) from exc
    return path


def write_atlas_buffer(atlas: BitmapFontAtlas, path: Path | str) -> Path:
    path = image_path(path)
    dimensions = atlas.metadata.dimensions
    try:
        png_bytes = encode_image(atlas.buffer, dimensions, dimensions)
    except ValueError as exc:
        raise AtlasWriteError(path, str(exc)) from exc
    try:
        path.write_bytes(png_bytes)
    except OSError as exc:
        raise AtlasWriteError(path, exc.strerror or str(exc)) from exc
    return path


def write_font_atlas(atlas: BitmapFontAtlas, path: Path | str) -> Tuple[Path, Path]:
    meta = write_metadata(atlas, path)
    image = write_atlas_buffer(atlas, path)
    return meta, image


def read_metadata(path: Path | str) -> BitmapFontAtlasMetadata:
    path = metadata_path(path)
    if not path.is_file():
        raise MetadataNotFoundError(path, "metadata file not found")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MetadataMalformedError(path, f"not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise AtlasReadError(path, exc.strerror or str(exc)) from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MetadataMalformedError(path, f"invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise MetadataMalformedError(path, "expected a JSON object at the top level")
    try:
        return BitmapFontAtlasMetadata.from_dict(payload)
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        raise MetadataMalformedError(path, str(exc)) from exc


def read_atlas_buffer(path: Path | str, dimensions: int) -> bytes:
    path = image_path(path)
    if not path.is_file():
        raise ImageNotFoundError(path, "image file not found")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise AtlasReadError(path, exc.strerror or str(exc)) from exc
    try:
        buffer, width, height = decode_image(data)
    except UnidentifiedImageError as exc:
        raise AtlasFormatError(path, "not a recognised image file") from exc
    except (OSError, ValueError) as exc:
        raise AtlasFormatError(path, str(exc)) from exc
    if (width, height) != (dimensions, dimensions):
        raise AtlasFormatError(
            path, f"image is {width}x{height}, metadata expects {dimensions}x{dimensions}"
        )
    return buffer


def read_font_atlas(path: Path | str) -> BitmapFontAtlas:
    metadata = read_metadata(path)
    buffer = read_atlas_buffer(path, metadata.dimensions)
    return BitmapFontAtlas(metadata=metadata, buffer=buffer)
