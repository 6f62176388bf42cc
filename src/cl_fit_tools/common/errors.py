"""Exception hierarchy for target-fit resizing."""

from typing_extensions import override


class TargetFitError(Exception):
    """Base class for every fatal error raised while fitting an image."""

    def __init__(self, message: str = "Target fit failed."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message


class InputImageError(TargetFitError):
    """Input file is missing, unreadable or cannot be decoded."""


class InvalidDimensionsError(InputImageError):
    """Raster has zero width or zero height."""

    def __init__(self, width: int, height: int):
        self.width: int = width
        self.height: int = height
        super().__init__(f"Image has invalid dimensions: {width}x{height}")


class ResampleError(TargetFitError):
    """The resampler rejected the source buffer."""


class OutputImageError(TargetFitError):
    """The output raster could not be built or written."""


class OutputBufferError(OutputImageError):
    """Resampled buffer does not match the requested dimensions."""
