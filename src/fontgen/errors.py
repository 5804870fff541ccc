"""Error types raised while building, writing and reading font atlases."""

from __future__ import annotations

from pathlib import Path

SIZE_SET = "size-set"
LOAD = "load"
RENDER = "render"
BBOX = "bbox"


class AtlasError(Exception):
    """Base class for recoverable failures reported to the caller."""


class ConfigurationError(AtlasError):
    """Invalid user input, detected before any glyph is rasterized."""


class FontLoadError(AtlasError):
    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        message = f"Could not open font file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RasterizationError(AtlasError):
    """A single code point could not be sampled from the typeface."""

    _MESSAGES = {
        SIZE_SET: "failed to set the glyph size to {pixels} pixels",
        LOAD: "failed to load the character with code point {code_point}",
        RENDER: "could not render the code point {code_point}",
        BBOX: "could not extract the glyph bounding box for the code point {code_point}",
    }

    def __init__(self, step: str, code_point: int, pixels: int | None = None) -> None:
        if step not in self._MESSAGES:
            raise ValueError(f"Unknown rasterization step: {step!r}")
        self.step = step
        self.code_point = code_point
        self.pixels = pixels
        detail = self._MESSAGES[step].format(code_point=code_point, pixels=pixels)
        super().__init__(f"The rasterizer {detail}.")


class CodecError(AtlasError):
    direction = ""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not {self.direction} {self.path}: {reason}")


class AtlasWriteError(CodecError):
    direction = "write"


class AtlasReadError(CodecError):
    direction = "read"


class MetadataNotFoundError(AtlasReadError):
    pass


class MetadataMalformedError(AtlasReadError):
    pass


class ImageNotFoundError(AtlasReadError):
    pass


class AtlasFormatError(AtlasReadError):
    """Pixel data that is not a square 8-bit RGBA image of the expected size."""


class AtlasInvariantError(RuntimeError):
    """Internal defect in atlas composition. Never handled as a user error."""
