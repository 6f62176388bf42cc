"""Pure target-fit resize logic: decode, scale, pad or crop, encode."""

from pathlib import Path

from loguru import logger
from PIL import Image

from ....common.errors import (
    InputImageError,
    OutputBufferError,
    OutputImageError,
    ResampleError,
)
from ....common.schemas import FitGeometry, FitMode, TargetSize
from ....utils.profiling import timed
from .geometry import compute_fit_geometry

PAD_COLOR: tuple[int, int, int, int] = (255, 255, 255, 255)

# Pillow formats that cannot store an alpha channel
NO_ALPHA_FORMATS = frozenset({"JPEG"})


def load_raster(input_path: str | Path) -> Image.Image:
    """
    Decode an image file into an RGBA raster.

    Raises:
        InputImageError: If the file is missing, unreadable or undecodable
    """
    input_path = Path(input_path)
    try:
        with Image.open(input_path) as img:
            img.load()
            return img.convert("RGBA")
    except FileNotFoundError as e:
        raise InputImageError(f"Input file not found: {input_path}") from e
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise InputImageError(f"Cannot decode {input_path}: {e}") from e


def resample(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """
    Resample an RGBA raster to ``size`` with a 3-lobe Lanczos filter.

    Raises:
        ResampleError: If Pillow rejects the buffer
        OutputBufferError: If the result does not have the requested size
    """
    try:
        resized = image.resize(size, Image.Resampling.LANCZOS)
    except (ValueError, OSError, MemoryError) as e:
        raise ResampleError(f"Resampling to {size[0]}x{size[1]} failed: {e}") from e

    if resized.size != size or resized.mode != "RGBA":
        raise OutputBufferError(
            f"Resampled buffer is {resized.width}x{resized.height} {resized.mode}, "
            + f"expected {size[0]}x{size[1]} RGBA"
        )
    return resized


def overlay(canvas: Image.Image, image: Image.Image, x: int, y: int) -> None:
    """Alpha-composite ``image`` onto ``canvas`` at (x, y), clipping at the edges."""
    dest_x, dest_y = max(x, 0), max(y, 0)
    src_x, src_y = max(-x, 0), max(-y, 0)
    width = min(image.width - src_x, canvas.width - dest_x)
    height = min(image.height - src_y, canvas.height - dest_y)
    if width <= 0 or height <= 0:
        return

    canvas.alpha_composite(
        image,
        dest=(dest_x, dest_y),
        source=(src_x, src_y, src_x + width, src_y + height),
    )


def compose(
    resized: Image.Image,
    geometry: FitGeometry,
    target: TargetSize,
    background: tuple[int, int, int, int] = PAD_COLOR,
) -> Image.Image:
    """Pad (FIT) or crop (FILL) the resampled image to exactly the target size."""
    if geometry.mode is FitMode.FILL:
        left, top = geometry.offset_x, geometry.offset_y
        return resized.crop((left, top, left + target.width, top + target.height))

    canvas = Image.new("RGBA", target.as_tuple(), background)
    overlay(canvas, resized, geometry.offset_x, geometry.offset_y)
    return canvas


def resize_raster(
    image: Image.Image,
    target: TargetSize,
    mode: FitMode,
    background: tuple[int, int, int, int] = PAD_COLOR,
) -> Image.Image:
    """
    Fit a raster onto a canvas of exactly ``target`` pixels.

    Args:
        image: Decoded source image (any mode; converted to RGBA)
        target: Output canvas size
        mode: FIT letterboxes with ``background``, FILL center-crops
        background: Padding color for FIT mode

    Returns:
        New RGBA image of size ``target``

    Raises:
        InvalidDimensionsError: If the source has a zero dimension
        ResampleError: If resampling fails
        OutputBufferError: If the resampled buffer has the wrong size
    """
    # Dimensions are validated here, before any conversion or resampling.
    geometry = compute_fit_geometry(image.width, image.height, target, mode)

    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    resized = resample(rgba, geometry.resized_size)
    out = compose(resized, geometry, target, background)

    if out.size != target.as_tuple():
        raise OutputBufferError(
            f"Composed canvas is {out.width}x{out.height}, expected {target}"
        )
    return out


def save_raster(image: Image.Image, output_path: str | Path) -> str:
    """
    Encode a raster, choosing the format from the output file extension.

    Raises:
        OutputImageError: If the extension is unknown or the encoder fails
    """
    output_path = Path(output_path)
    fmt = Image.registered_extensions().get(output_path.suffix.lower())
    if fmt is None:
        raise OutputImageError(
            f"Cannot infer output format from extension: {output_path.suffix or '(none)'}"
        )
    if fmt not in Image.SAVE:
        raise OutputImageError(f"Pillow cannot write {fmt} files: {output_path.suffix}")

    if fmt in NO_ALPHA_FORMATS and image.mode == "RGBA":
        image = image.convert("RGB")

    try:
        image.save(output_path, format=fmt)
    except (OSError, ValueError) as e:
        raise OutputImageError(f"Failed to write {output_path}: {e}") from e

    return str(output_path)


@timed
def target_fit(
    *,
    input_path: str | Path,
    output_path: str | Path,
    width: int,
    height: int,
    mode: FitMode = FitMode.FIT,
) -> str:
    """
    Resize a single image file onto a width x height canvas and write it.

    Framework-agnostic, single-image operation.

    Args:
        input_path: Path to input image
        output_path: Path to output image (format from extension)
        width: Target width
        height: Target height
        mode: FIT (pad) or FILL (crop)

    Returns:
        Output file path as string

    Raises:
        InputImageError: If the input cannot be read or has a zero dimension
        ResampleError: If resampling fails
        OutputImageError: If the output cannot be built or written
    """
    target = TargetSize(width=width, height=height)

    source = load_raster(input_path)
    logger.debug(f"Decoded {input_path}: {source.width}x{source.height}")

    result = resize_raster(source, target, mode)
    return save_raster(result, output_path)
