from __future__ import annotations

from typing import List, Set, Tuple

import pytest

from fontgen.config import AtlasConfiguration
from fontgen.errors import BBOX, LOAD, RENDER, SIZE_SET, RasterizationError
from fontgen.rasterizer import RasterGlyph
from fontgen.sampling import GlyphSampleTable, sample_typeface


class FakeRasterizer:
    """In-memory rasterizer that, like FreeType, reuses one buffer for every glyph."""

    def __init__(self, fail_at: Set[Tuple[str, int]] | None = None) -> None:
        self.fail_at = fail_at or set()
        self.calls: List[Tuple[str, int]] = []
        self.pixels: int | None = None
        self._scratch = bytearray(64)

    def set_pixel_size(self, pixels: int) -> None:
        self.calls.append((SIZE_SET, pixels))
        if (SIZE_SET, 0) in self.fail_at:
            raise RasterizationError(SIZE_SET, 0, pixels=pixels)
        self.pixels = pixels

    def load_and_render(self, code_point: int) -> RasterGlyph:
        self.calls.append((LOAD, code_point))
        for step in (LOAD, RENDER, BBOX):
            if (step, code_point) in self.fail_at:
                raise RasterizationError(step, code_point)

        width, rows = glyph_shape(code_point)
        for index in range(width * rows):
            self._scratch[index] = coverage(code_point, index)
        return RasterGlyph(
            rows=rows,
            width=width,
            stride=width,
            pixel_bytes=memoryview(self._scratch)[: width * rows],
            baseline_min_y=-(code_point % 4),
        )


def glyph_shape(code_point: int) -> Tuple[int, int]:
    return 1 + code_point % 3, 2 + code_point % 2


def coverage(code_point: int, index: int) -> int:
    # Never zero so ink pixels can be told apart from transparent padding.
    return 1 + (code_point * 7 + index * 13) % 255


@pytest.fixture
def rasterizer() -> FakeRasterizer:
    return FakeRasterizer()


@pytest.fixture
def small_config() -> AtlasConfiguration:
    return AtlasConfiguration.from_slot_size(4, padding_px=0)


@pytest.fixture
def padded_config() -> AtlasConfiguration:
    return AtlasConfiguration.from_slot_size(6, padding_px=2)


@pytest.fixture
def glyph_table(rasterizer: FakeRasterizer, small_config: AtlasConfiguration) -> GlyphSampleTable:
    return sample_typeface(rasterizer, small_config)
