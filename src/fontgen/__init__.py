"""Convert vector typefaces into packed bitmap font atlases."""

from __future__ import annotations

from .atlas import BitmapFontAtlas, BitmapFontAtlasMetadata, create_bitmap_atlas
from .codec import read_font_atlas, write_font_atlas
from .config import AtlasConfiguration
from .errors import (
    AtlasError,
    AtlasFormatError,
    AtlasInvariantError,
    AtlasReadError,
    AtlasWriteError,
    ConfigurationError,
    FontLoadError,
    ImageNotFoundError,
    MetadataMalformedError,
    MetadataNotFoundError,
    RasterizationError,
)
from .metadata import GlyphMetadata, create_bitmap_metadata
from .compositor import create_bitmap_buffer
from .rasterizer import FreeTypeRasterizer, RasterGlyph, Rasterizer
from .sampling import GlyphSample, GlyphSampleTable, sample_typeface

__all__ = [
    "AtlasConfiguration",
    "AtlasError",
    "AtlasFormatError",
    "AtlasInvariantError",
    "AtlasReadError",
    "AtlasWriteError",
    "BitmapFontAtlas",
    "BitmapFontAtlasMetadata",
    "ConfigurationError",
    "FontLoadError",
    "FreeTypeRasterizer",
    "GlyphMetadata",
    "GlyphSample",
    "GlyphSampleTable",
    "ImageNotFoundError",
    "MetadataMalformedError",
    "MetadataNotFoundError",
    "RasterGlyph",
    "RasterizationError",
    "Rasterizer",
    "create_bitmap_atlas",
    "create_bitmap_buffer",
    "create_bitmap_metadata",
    "read_font_atlas",
    "sample_typeface",
    "write_font_atlas",
]
