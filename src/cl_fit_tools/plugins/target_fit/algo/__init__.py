"""Target-fit resize algorithms."""

from .geometry import compute_fit_geometry
from .parsers import parse_mode, parse_size
from .target_fit import load_raster, resize_raster, save_raster, target_fit

__all__ = [
    "compute_fit_geometry",
    "load_raster",
    "parse_mode",
    "parse_size",
    "resize_raster",
    "save_raster",
    "target_fit",
]
