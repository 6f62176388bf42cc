"""Pydantic schemas and enums shared by the target-fit resizer."""

from enum import StrEnum
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

# ─────────────────────────────────────────────────────────────
# Fit mode
# ─────────────────────────────────────────────────────────────


class FitMode(StrEnum):
    """How the scaled image is placed on the target canvas.

    FIT scales the whole image inside the canvas and pads the rest,
    FILL scales until the canvas is covered and crops the overflow.
    """

    FIT = "fit"
    FILL = "fill"

    @classmethod
    def parse(cls, token: str) -> "FitMode | None":
        return _MODE_ALIASES.get(token.lower())


_MODE_ALIASES: dict[str, FitMode] = {
    "fit": FitMode.FIT,
    "pad": FitMode.FIT,
    "contain": FitMode.FIT,
    "fill": FitMode.FILL,
    "crop": FitMode.FILL,
    "cover": FitMode.FILL,
}

# ─────────────────────────────────────────────────────────────
# Target size
# ─────────────────────────────────────────────────────────────

U32_MAX = 2**32 - 1


class TargetSize(BaseModel):
    """Output canvas dimensions in pixels."""

    width: PositiveInt = Field(..., le=U32_MAX, description="Canvas width in pixels")
    height: PositiveInt = Field(..., le=U32_MAX, description="Canvas height in pixels")

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


DEFAULT_TARGET_SIZE = TargetSize(width=1280, height=720)
DEFAULT_FIT_MODE = FitMode.FIT

# ─────────────────────────────────────────────────────────────
# Geometry
# ─────────────────────────────────────────────────────────────


class FitGeometry(BaseModel):
    """Intermediate resize size and placement for one source/target pair.

    Attributes:
        mode: Fit policy the geometry was computed for
        scale: Uniform scale applied to the source
        resized_width: Width of the resampled image
        resized_height: Height of the resampled image
        offset_x: Paste position (FIT) or crop origin (FILL), horizontal
        offset_y: Paste position (FIT) or crop origin (FILL), vertical
    """

    mode: FitMode
    scale: float
    resized_width: PositiveInt
    resized_height: PositiveInt
    offset_x: int
    offset_y: int

    model_config = ConfigDict(frozen=True)

    @property
    def resized_size(self) -> tuple[int, int]:
        return (self.resized_width, self.resized_height)


# ─────────────────────────────────────────────────────────────
# Invocation params
# ─────────────────────────────────────────────────────────────


class TargetFitParams(BaseModel):
    """Parameters for one target-fit resize."""

    input_path: str = Field(..., min_length=1, description="Path to the source image")
    output_path: str = Field(..., min_length=1, description="Path for the resized image")
    size: TargetSize = Field(default=DEFAULT_TARGET_SIZE)
    mode: FitMode = Field(default=DEFAULT_FIT_MODE)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def validate_distinct_paths(self) -> Self:
        """Refuse to overwrite the source image in place."""
        if Path(self.input_path).resolve() == Path(self.output_path).resolve():
            raise ValueError("Output path must differ from input path")
        return self
