"""Target-fit resize plugin."""

from .algo import (
    compute_fit_geometry,
    parse_mode,
    parse_size,
    resize_raster,
    target_fit,
)

__all__ = [
    "compute_fit_geometry",
    "parse_mode",
    "parse_size",
    "resize_raster",
    "target_fit",
]
