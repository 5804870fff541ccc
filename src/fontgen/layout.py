"""Grid arithmetic shared by the metadata and pixel composition passes."""

from __future__ import annotations

from typing import Tuple

FIRST_CODE_POINT = 32
LAST_CODE_POINT = 256
SAMPLED_RANGE = range(FIRST_CODE_POINT + 1, LAST_CODE_POINT)


def cell_of(code_point: int, columns: int) -> Tuple[int, int]:
    order = code_point - FIRST_CODE_POINT
    return order % columns, order // columns


def pixel_rect_of(col: int, row: int, slot_size_px: int) -> Tuple[int, int, int, int]:
    return col * slot_size_px, row * slot_size_px, slot_size_px, slot_size_px


def glyph_index_of(x: int, y: int, slot_size_px: int, columns: int) -> int:
    col = x // slot_size_px
    row = y // slot_size_px
    return row * columns + col + FIRST_CODE_POINT


def has_glyph_image(code_point: int) -> bool:
    # Space and anything past the sampled range have no pixels in the atlas.
    return FIRST_CODE_POINT < code_point < LAST_CODE_POINT
