from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError

ATLAS_COLUMNS = 16


def _env_int(name: str, fallback: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return fallback
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def default_slot_glyph_size() -> int:
    return _env_int("FONTGEN_SLOT_GLYPH_SIZE", 64)


def default_padding() -> int:
    return _env_int("FONTGEN_PADDING", 0)


@dataclass(frozen=True)
class AtlasConfiguration:
    """Dimensions of the atlas grid and of each glyph slot inside it.

    The atlas is a square of ``columns`` by ``columns`` slots, each
    ``slot_size_px`` wide. ``padding_px`` is reserved inside every slot for
    outlines and anti-aliasing bleed, so glyphs are rasterized at
    ``glyph_size_px``.
    """

    dimensions_px: int
    columns: int
    slot_size_px: int
    padding_px: int

    def __post_init__(self) -> None:
        if self.columns <= 0:
            raise ConfigurationError(f"Column count must be positive, got {self.columns}")
        if self.slot_size_px <= 0:
            raise ConfigurationError(
                f"The slot glyph size must be positive, got {self.slot_size_px}"
            )
        if not 0 <= self.padding_px <= self.slot_size_px:
            raise ConfigurationError(
                f"Padding of {self.padding_px} pixels must lie between 0 and the "
                f"slot glyph size of {self.slot_size_px} pixels"
            )
        if self.dimensions_px != self.slot_size_px * self.columns:
            raise ConfigurationError(
                f"Atlas dimensions {self.dimensions_px} do not tile exactly into "
                f"{self.columns} slots of {self.slot_size_px} pixels"
            )

    @classmethod
    def from_slot_size(
        cls,
        slot_size_px: int,
        padding_px: int = 0,
        columns: int = ATLAS_COLUMNS,
    ) -> "AtlasConfiguration":
        return cls(
            dimensions_px=slot_size_px * columns,
            columns=columns,
            slot_size_px=slot_size_px,
            padding_px=padding_px,
        )

    @property
    def glyph_size_px(self) -> int:
        return self.slot_size_px - self.padding_px

    @property
    def rows(self) -> int:
        return self.dimensions_px // self.slot_size_px
