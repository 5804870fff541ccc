from __future__ import annotations

import pytest

from conftest import FakeRasterizer
from fontgen.atlas import create_bitmap_atlas
from fontgen.config import AtlasConfiguration
from fontgen.errors import RENDER, ConfigurationError, RasterizationError


def test_atlas_bundles_configuration(rasterizer: FakeRasterizer, padded_config: AtlasConfiguration) -> None:
    atlas = create_bitmap_atlas(rasterizer, padded_config)
    metadata = atlas.metadata

    assert (metadata.dimensions, metadata.columns, metadata.rows) == (96, 16, 16)
    assert (metadata.padding, metadata.slot_glyph_size, metadata.glyph_size) == (2, 6, 4)
    assert len(metadata.glyph_metadata) == 224
    assert len(atlas.buffer) == 96 * 96 * 4


def test_metadata_and_pixels_agree_on_slot_positions(rasterizer: FakeRasterizer, padded_config: AtlasConfiguration) -> None:
    atlas = create_bitmap_atlas(rasterizer, padded_config)
    dimensions = atlas.metadata.dimensions
    half_padding = padded_config.padding_px // 2

    for code_point in (33, 65, 129, 255):
        glyph = atlas.metadata.glyph_metadata[code_point]
        x = round(glyph.x_min * dimensions) + half_padding
        y = round(glyph.y_min * dimensions) + half_padding
        offset = (y * dimensions + x) * 4
        assert atlas.buffer[offset + 3] != 0


def test_rasterization_failure_produces_no_atlas(padded_config: AtlasConfiguration) -> None:
    with pytest.raises(RasterizationError):
        create_bitmap_atlas(FakeRasterizer(fail_at={(RENDER, 200)}), padded_config)


def test_oversized_padding_rejected_before_rasterizer_is_called(rasterizer: FakeRasterizer) -> None:
    with pytest.raises(ConfigurationError):
        config = AtlasConfiguration.from_slot_size(8, padding_px=9)
        create_bitmap_atlas(rasterizer, config)

    assert rasterizer.calls == []
