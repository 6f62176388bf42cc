"""cl_fit_tools - Resize an image onto a fixed-size canvas by padding or cropping."""

from .common.errors import (
    InputImageError,
    InvalidDimensionsError,
    OutputBufferError,
    OutputImageError,
    ResampleError,
    TargetFitError,
)
from .common.schemas import (
    DEFAULT_FIT_MODE,
    DEFAULT_TARGET_SIZE,
    FitGeometry,
    FitMode,
    TargetFitParams,
    TargetSize,
)
from .plugins.target_fit import (
    compute_fit_geometry,
    parse_mode,
    parse_size,
    resize_raster,
    target_fit,
)

__version__ = "0.1.0"

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
    "compute_fit_geometry",
    "parse_mode",
    "parse_size",
    "resize_raster",
    "target_fit",
    "__version__",
]
