"""Packs sampled glyph bitmaps into a single RGBA atlas image."""

from __future__ import annotations

from .config import AtlasConfiguration
from .errors import AtlasInvariantError
from .layout import glyph_index_of, has_glyph_image
from .sampling import GlyphSample, GlyphSampleTable

CHANNELS = 4


def _coverage(sample: GlyphSample, x_loc: int, y_loc: int) -> int:
    index = y_loc * sample.width_px + x_loc
    if not 0 <= index < len(sample.pixels):
        raise AtlasInvariantError(
            f"Pixel ({x_loc}, {y_loc}) of glyph {sample.code_point} maps to byte "
            f"{index} outside its {len(sample.pixels)} byte bitmap"
        )
    return sample.pixels[index]


def create_bitmap_buffer(glyph_table: GlyphSampleTable, config: AtlasConfiguration) -> bytes:
    """Scan the atlas row by row and fill each pixel from the glyph whose slot covers it.

    Coverage values are copied into all four channels, so glyphs come out
    white on a transparent background. Pixels of slots without a sampled
    glyph, and padding around each glyph's ink, stay ``(0, 0, 0, 0)``.
    """
    dimensions = config.dimensions_px
    slot = config.slot_size_px
    half_padding = config.padding_px // 2

    buffer = bytearray(dimensions * dimensions * CHANNELS)
    offset = 0
    for y in range(dimensions):
        for x in range(dimensions):
            code_point = glyph_index_of(x, y, slot, config.columns)
            sample = glyph_table.get(code_point) if has_glyph_image(code_point) else None
            if sample is not None:
                x_loc = x % slot - half_padding
                y_loc = y % slot - half_padding
                inside = 0 <= x_loc < sample.width_px and 0 <= y_loc < sample.rows_px
                if inside:
                    value = _coverage(sample, x_loc, y_loc)
                    buffer[offset:offset + CHANNELS] = bytes((value, value, value, value))
            offset += CHANNELS

    return bytes(buffer)
