"""Unit tests for the size and mode token parsers."""

import pytest

from cl_fit_tools.common.schemas import FitMode, TargetSize
from cl_fit_tools.plugins.target_fit.algo.parsers import parse_mode, parse_size

# ============================================================================
# SIZE PARSER
# ============================================================================


@pytest.mark.parametrize("token", ["youtube", "YouTube", "yt", "YT", "1280x720"])
def test_parse_size_youtube_equivalents(token: str):
    """Aliases and the literal size all give 1280x720."""
    assert parse_size(token) == TargetSize(width=1280, height=720)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("1920x1080", (1920, 1080)),
        ("1x1", (1, 1)),
        ("200x200", (200, 200)),
        ("007x08", (7, 8)),
        ("4294967295x1", (4294967295, 1)),
    ],
)
def test_parse_size_valid(token: str, expected: tuple[int, int]):
    """Well-formed WxH tokens parse to their numbers."""
    size = parse_size(token)
    assert size is not None
    assert size.as_tuple() == expected


@pytest.mark.parametrize(
    "token",
    [
        "0x10",
        "10x0",
        "abc",
        "10xabc",
        "abcx10",
        "",
        "x",
        "10x",
        "x10",
        "1280X720",
        "-10x10",
        "+10x10",
        " 10x10",
        "10.5x10",
        "10x10x10",
        "4294967296x1",
        "youtube1",
    ],
)
def test_parse_size_invalid(token: str):
    """Malformed, zero, signed or oversized tokens yield None."""
    assert parse_size(token) is None


# ============================================================================
# MODE PARSER
# ============================================================================


@pytest.mark.parametrize("token", ["fit", "Pad", "CONTAIN", "pad", "Fit"])
def test_parse_mode_fit_aliases(token: str):
    assert parse_mode(token) is FitMode.FIT


@pytest.mark.parametrize("token", ["fill", "Crop", "COVER", "cover"])
def test_parse_mode_fill_aliases(token: str):
    assert parse_mode(token) is FitMode.FILL


@pytest.mark.parametrize("token", ["stretch", "", "fits", " fit"])
def test_parse_mode_unknown(token: str):
    """Unknown tokens are not errors, just no match."""
    assert parse_mode(token) is None


def test_fit_mode_parse_matches_parse_mode():
    """FitMode.parse is the same lookup as parse_mode."""
    for token in ["fit", "pad", "contain", "fill", "crop", "cover", "nope"]:
        assert FitMode.parse(token) == parse_mode(token)
