from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping

from .config import AtlasConfiguration
from .layout import SAMPLED_RANGE
from .rasterizer import Rasterizer


@dataclass(frozen=True)
class GlyphSample:
    code_point: int
    width_px: int
    rows_px: int
    stride_bytes: int
    baseline_min_y: int
    pixels: bytes

    def __post_init__(self) -> None:
        if len(self.pixels) != self.rows_px * self.stride_bytes:
            raise ValueError(
                f"Glyph {self.code_point} holds {len(self.pixels)} bytes, expected "
                f"{self.rows_px} rows of {self.stride_bytes} bytes"
            )


class GlyphSampleTable:
    """Read-only collection of sampled glyphs keyed by code point."""

    def __init__(self, samples: Mapping[int, GlyphSample]) -> None:
        table: Dict[int, GlyphSample] = {}
        for code_point in sorted(samples):
            sample = samples[code_point]
            if code_point not in SAMPLED_RANGE:
                raise ValueError(
                    f"Code point {code_point} lies outside the sampled range "
                    f"{SAMPLED_RANGE.start}..{SAMPLED_RANGE.stop - 1}"
                )
            if sample.code_point != code_point:
                raise ValueError(
                    f"Sample for code point {sample.code_point} stored under key {code_point}"
                )
            table[code_point] = sample
        self._samples = table

    def __getitem__(self, code_point: int) -> GlyphSample:
        return self._samples[code_point]

    def __contains__(self, code_point: object) -> bool:
        return code_point in self._samples

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[GlyphSample]:
        return iter(self._samples.values())

    def get(self, code_point: int) -> GlyphSample | None:
        return self._samples.get(code_point)

    def code_points(self) -> List[int]:
        return list(self._samples)


def sample_typeface(rasterizer: Rasterizer, config: AtlasConfiguration) -> GlyphSampleTable:
    """Rasterize every code point in the sampled range at the configured glyph size.

    Any rasterizer failure propagates as ``RasterizationError`` and no table
    is returned.
    """
    rasterizer.set_pixel_size(config.glyph_size_px)

    samples: Dict[int, GlyphSample] = {}
    for code_point in SAMPLED_RANGE:
        raster = rasterizer.load_and_render(code_point)
        samples[code_point] = GlyphSample(
            code_point=code_point,
            width_px=raster.width,
            rows_px=raster.rows,
            stride_bytes=raster.stride,
            baseline_min_y=raster.baseline_min_y,
            pixels=bytes(raster.pixel_bytes),
        )

    return GlyphSampleTable(samples)
