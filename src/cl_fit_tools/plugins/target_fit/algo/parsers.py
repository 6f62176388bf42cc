"""Parsers for the size and mode tokens accepted on the command line."""

import re

from ....common.schemas import U32_MAX, FitMode, TargetSize

YOUTUBE_SIZE = TargetSize(width=1280, height=720)
SIZE_ALIASES: dict[str, TargetSize] = {
    "youtube": YOUTUBE_SIZE,
    "yt": YOUTUBE_SIZE,
}

_UNSIGNED = re.compile(r"[0-9]+", re.ASCII)


def _parse_dimension(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    if value == 0 or value > U32_MAX:
        return None
    return value


def parse_size(token: str) -> TargetSize | None:
    """Parse ``WxH`` or a named alias into a TargetSize.

    Only a lowercase ``x`` separates the halves; each half must be a plain
    decimal number greater than zero.

    Returns:
        The parsed size, or None when the token is not a valid size
    """
    alias = SIZE_ALIASES.get(token.lower())
    if alias is not None:
        return alias

    width_text, sep, height_text = token.partition("x")
    if not sep:
        return None

    width = _parse_dimension(width_text)
    height = _parse_dimension(height_text)
    if width is None or height is None:
        return None
    return TargetSize(width=width, height=height)


def parse_mode(token: str) -> FitMode | None:
    """Parse a fit/fill alias, case-insensitively."""
    return FitMode.parse(token)
