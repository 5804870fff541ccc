from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .compositor import CHANNELS, create_bitmap_buffer
from .config import AtlasConfiguration
from .metadata import GlyphMetadata, create_bitmap_metadata
from .rasterizer import Rasterizer
from .sampling import sample_typeface

ATLAS_FIELDS = ("dimensions", "columns", "rows", "padding", "slot_glyph_size", "glyph_size")


@dataclass(frozen=True)
class BitmapFontAtlasMetadata:
    dimensions: int
    columns: int
    rows: int
    padding: int
    slot_glyph_size: int
    glyph_size: int
    glyph_metadata: Dict[int, GlyphMetadata] = field(default_factory=dict)

    @classmethod
    def from_config(
        cls,
        config: AtlasConfiguration,
        glyph_metadata: Dict[int, GlyphMetadata],
    ) -> "BitmapFontAtlasMetadata":
        return cls(
            dimensions=config.dimensions_px,
            columns=config.columns,
            rows=config.rows,
            padding=config.padding_px,
            slot_glyph_size=config.slot_size_px,
            glyph_size=config.glyph_size_px,
            glyph_metadata=dict(glyph_metadata),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {name: getattr(self, name) for name in ATLAS_FIELDS}
        payload["glyph_metadata"] = {
            str(code_point): glyph.to_dict()
            for code_point, glyph in self.glyph_metadata.items()
        }
        return payload

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BitmapFontAtlasMetadata":
        missing = [name for name in ATLAS_FIELDS + ("glyph_metadata",) if name not in payload]
        if missing:
            raise KeyError(f"atlas metadata is missing {', '.join(missing)}")
        glyphs = payload["glyph_metadata"]
        if not isinstance(glyphs, dict):
            raise ValueError("glyph_metadata must be an object keyed by code point")

        glyph_metadata: Dict[int, GlyphMetadata] = {}
        for key, value in glyphs.items():
            glyph = GlyphMetadata.from_dict(value)
            if int(key) != glyph.code_point:
                raise ValueError(f"glyph stored under {key} has code point {glyph.code_point}")
            glyph_metadata[glyph.code_point] = glyph

        return cls(
            glyph_metadata=glyph_metadata,
            **{name: int(payload[name]) for name in ATLAS_FIELDS},
        )


@dataclass(frozen=True)
class BitmapFontAtlas:
    """Glyph placement metadata together with the packed RGBA image it indexes."""

    metadata: BitmapFontAtlasMetadata
    buffer: bytes

    def __post_init__(self) -> None:
        expected = self.metadata.dimensions * self.metadata.dimensions * CHANNELS
        if len(self.buffer) != expected:
            raise ValueError(
                f"atlas buffer holds {len(self.buffer)} bytes, expected {expected} for a "
                f"{self.metadata.dimensions}x{self.metadata.dimensions} RGBA image",
            )


def create_bitmap_atlas(rasterizer: Rasterizer, config: AtlasConfiguration) -> BitmapFontAtlas:
    glyph_table = sample_typeface(rasterizer, config)
    glyph_metadata = create_bitmap_metadata(glyph_table, config)
    buffer = create_bitmap_buffer(glyph_table, config)

    metadata = BitmapFontAtlasMetadata.from_config(config, glyph_metadata)
    return BitmapFontAtlas(metadata=metadata, buffer=buffer)
