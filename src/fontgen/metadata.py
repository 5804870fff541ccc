from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .config import AtlasConfiguration
from .layout import FIRST_CODE_POINT, cell_of, pixel_rect_of
from .sampling import GlyphSampleTable

GLYPH_FIELDS = ("code_point", "x_min", "y_min", "width", "height", "y_offset")


@dataclass(frozen=True)
class GlyphMetadata:
    """Placement of one glyph in the atlas.

    ``x_min`` and ``y_min`` locate the slot's top-left corner as a fraction of
    the atlas size. ``width``, ``height`` and ``y_offset`` are fractions of the
    slot size, ``y_offset`` being the shift that puts the glyph on the baseline.
    """

    code_point: int
    x_min: float
    y_min: float
    width: float
    height: float
    y_offset: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GlyphMetadata":
        missing = [name for name in GLYPH_FIELDS if name not in payload]
        if missing:
            raise KeyError(f"glyph metadata is missing {', '.join(missing)}")
        return cls(
            code_point=int(payload["code_point"]),
            x_min=float(payload["x_min"]),
            y_min=float(payload["y_min"]),
            width=float(payload["width"]),
            height=float(payload["height"]),
            y_offset=float(payload["y_offset"]),
        )


SPACE_METADATA = GlyphMetadata(
    code_point=FIRST_CODE_POINT,
    x_min=0.0,
    y_min=1.0,
    width=0.0,
    height=0.5,
    y_offset=0.0,
)


def create_bitmap_metadata(
    glyph_table: GlyphSampleTable,
    config: AtlasConfiguration,
) -> Dict[int, GlyphMetadata]:
    metadata: Dict[int, GlyphMetadata] = {SPACE_METADATA.code_point: SPACE_METADATA}

    slot = config.slot_size_px
    padding = config.padding_px
    for code_point in sorted(glyph_table.code_points()):
        sample = glyph_table[code_point]
        col, row = cell_of(code_point, config.columns)
        x0, y0, _, _ = pixel_rect_of(col, row, slot)

        metadata[code_point] = GlyphMetadata(
            code_point=code_point,
            x_min=x0 / config.dimensions_px,
            y_min=y0 / config.dimensions_px,
            width=(sample.width_px + padding) / slot,
            height=(sample.rows_px + padding) / slot,
            y_offset=-(padding - sample.baseline_min_y) / slot,
        )

    return metadata
