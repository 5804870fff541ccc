from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import freetype

from .errors import BBOX, LOAD, RENDER, SIZE_SET, FontLoadError, RasterizationError


@dataclass(frozen=True)
class RasterGlyph:
    rows: int
    width: int
    stride: int
    pixel_bytes: bytes
    baseline_min_y: int


class Rasterizer(Protocol):
    """Produces single-channel coverage bitmaps for one code point at a time.

    Implementations may reuse internal storage between calls, so callers
    sample strictly in sequence and keep only the returned ``RasterGlyph``.
    """

    def set_pixel_size(self, pixels: int) -> None:
        ...

    def load_and_render(self, code_point: int) -> RasterGlyph:
        ...


class FreeTypeRasterizer:
    def __init__(self, face: freetype.Face) -> None:
        self.face = face

    @classmethod
    def from_path(cls, font_path: Path | str) -> "FreeTypeRasterizer":
        font_path = Path(font_path)
        try:
            face = freetype.Face(str(font_path))
        except freetype.FT_Exception as exc:
            raise FontLoadError(font_path, str(exc)) from exc
        return cls(face)

    def set_pixel_size(self, pixels: int) -> None:
        try:
            self.face.set_pixel_sizes(0, pixels)
        except freetype.FT_Exception as exc:
            raise RasterizationError(SIZE_SET, 0, pixels=pixels) from exc

    def load_and_render(self, code_point: int) -> RasterGlyph:
        try:
            self.face.load_char(chr(code_point), freetype.FT_LOAD_RENDER)
        except freetype.FT_Exception as exc:
            raise RasterizationError(LOAD, code_point) from exc

        slot = self.face.glyph
        try:
            slot.render(freetype.FT_RENDER_MODE_NORMAL)
        except freetype.FT_Exception as exc:
            raise RasterizationError(RENDER, code_point) from exc

        # FreeType overwrites the slot bitmap on the next load, copy it out now.
        bitmap = slot.bitmap
        rows = bitmap.rows
        width = bitmap.width
        stride = abs(bitmap.pitch)
        pixel_bytes = bytes(bitmap.buffer[: rows * stride])

        try:
            glyph = slot.get_glyph()
            bbox = glyph.get_cbox(freetype.FT_GLYPH_BBOX_TRUNCATE)
        except freetype.FT_Exception as exc:
            raise RasterizationError(BBOX, code_point) from exc

        return RasterGlyph(
            rows=rows,
            width=width,
            stride=stride,
            pixel_bytes=pixel_bytes,
            baseline_min_y=int(bbox.yMin),
        )
