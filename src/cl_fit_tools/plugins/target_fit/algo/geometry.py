"""Scale and placement computation for fitting a source onto a target canvas."""

import math

from loguru import logger

from ....common.errors import InvalidDimensionsError
from ....common.schemas import FitGeometry, FitMode, TargetSize


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _half_truncated(value: int) -> int:
    # Integer halving toward zero, unlike floor division for negatives.
    return -(-value // 2) if value < 0 else value // 2


def validate_dimensions(width: int, height: int) -> None:
    """Raise InvalidDimensionsError unless both dimensions are positive."""
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(width, height)


def compute_fit_geometry(
    src_width: int,
    src_height: int,
    target: TargetSize,
    mode: FitMode,
) -> FitGeometry:
    """
    Compute the intermediate resize size and its placement on the canvas.

    Args:
        src_width: Source width in pixels
        src_height: Source height in pixels
        target: Output canvas size
        mode: FIT pads around the scaled image, FILL crops it

    Returns:
        FitGeometry with the selected scale, resized size and offsets

    Raises:
        InvalidDimensionsError: If either source dimension is zero
    """
    validate_dimensions(src_width, src_height)

    ratio_w = target.width / src_width
    ratio_h = target.height / src_height
    scale = min(ratio_w, ratio_h) if mode is FitMode.FIT else max(ratio_w, ratio_h)

    resized_width = max(round_half_away(src_width * scale), 1)
    resized_height = max(round_half_away(src_height * scale), 1)

    if mode is FitMode.FILL:
        # Rounding may leave the cover one pixel short; only ever grow here.
        resized_width = max(resized_width, target.width)
        resized_height = max(resized_height, target.height)
        offset_x = (resized_width - target.width) // 2
        offset_y = (resized_height - target.height) // 2
    else:
        offset_x = _half_truncated(target.width - resized_width)
        offset_y = _half_truncated(target.height - resized_height)

    logger.debug(
        f"{mode}: {src_width}x{src_height} -> {resized_width}x{resized_height} "
        + f"(scale={scale:.6f}) on {target} at ({offset_x}, {offset_y})"
    )

    return FitGeometry(
        mode=mode,
        scale=scale,
        resized_width=resized_width,
        resized_height=resized_height,
        offset_x=offset_x,
        offset_y=offset_y,
    )
