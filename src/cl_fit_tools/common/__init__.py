"""Common module - errors, enums and schemas."""

from .errors import (
    InputImageError,
    InvalidDimensionsError,
    OutputBufferError,
    OutputImageError,
    ResampleError,
    TargetFitError,
)
from .schemas import (
    DEFAULT_FIT_MODE,
    DEFAULT_TARGET_SIZE,
    FitGeometry,
    FitMode,
    TargetFitParams,
    TargetSize,
)

__all__ = [
    "DEFAULT_FIT_MODE",
    "DEFAULT_TARGET_SIZE",
    "FitGeometry",
    "FitMode",
    "TargetFitParams",
    "TargetSize",
    "TargetFitError",
    "InputImageError",
    "InvalidDimensionsError",
    "ResampleError",
    "OutputImageError",
    "OutputBufferError",
]
