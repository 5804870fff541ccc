from __future__ import annotations

import pytest

from fontgen.layout import (
    SAMPLED_RANGE,
    cell_of,
    glyph_index_of,
    has_glyph_image,
    pixel_rect_of,
)


@pytest.mark.parametrize("columns,slot", [(16, 64), (16, 4), (8, 10)])
def test_cell_and_glyph_index_are_inverse(columns: int, slot: int) -> None:
    for code_point in SAMPLED_RANGE:
        x0, y0, _, _ = pixel_rect_of(*cell_of(code_point, columns), slot)
        assert glyph_index_of(x0, y0, slot, columns) == code_point
        assert glyph_index_of(x0 + slot - 1, y0 + slot - 1, slot, columns) == code_point


def test_capital_a_lands_on_third_row() -> None:
    col, row = cell_of(ord("A"), 16)
    assert (col, row) == (1, 2)
    assert pixel_rect_of(col, row, 64) == (64, 128, 64, 64)


def test_rows_advance_past_first_grid_row() -> None:
    assert cell_of(47, 16) == (15, 0)
    assert cell_of(48, 16) == (0, 1)
    assert cell_of(255, 16) == (15, 13)


def test_origin_slot_is_space() -> None:
    assert glyph_index_of(0, 0, 64, 16) == 32
    assert not has_glyph_image(32)


@pytest.mark.parametrize("code_point,expected", [(31, False), (32, False), (33, True), (255, True), (256, False), (287, False)])
def test_has_glyph_image(code_point: int, expected: bool) -> None:
    assert has_glyph_image(code_point) is expected


def test_sampled_range_bounds() -> None:
    assert SAMPLED_RANGE[0] == 33
    assert SAMPLED_RANGE[-1] == 255
    assert len(SAMPLED_RANGE) == 223
