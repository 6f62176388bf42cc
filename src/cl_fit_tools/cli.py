"""Command line entry point: ``cl-fit-resize <input> <output> [size] [mode]``."""

import argparse
import sys
from collections.abc import Sequence

from loguru import logger
from pydantic import ValidationError

from . import __version__
from .common.errors import TargetFitError
from .common.schemas import DEFAULT_FIT_MODE, DEFAULT_TARGET_SIZE, TargetFitParams
from .plugins.target_fit.algo.parsers import parse_mode, parse_size
from .plugins.target_fit.algo.target_fit import target_fit

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

EXAMPLES = """\
Examples:
  cl-fit-resize in.png out.png
  cl-fit-resize in.png out.png 1920x1080 fit
  cl-fit-resize in.png out.png youtube fill
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cl-fit-resize",
        description="Resize an image onto a fixed-size canvas, padding (fit) or cropping (fill).",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="Input image path")
    parser.add_argument("output", nargs="?", help="Output image path (format from extension)")
    parser.add_argument(
        "size",
        nargs="?",
        help=f"WxH or youtube/yt (default: {DEFAULT_TARGET_SIZE})",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        help=f"fit|pad|contain or fill|crop|cover (default: {DEFAULT_FIT_MODE})",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity on stderr (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: str) -> None:
    """Route loguru records to stderr at ``level``."""
    logger.remove()
    _ = logger.add(sys.stderr, level=level, format="<level>{level}</level>: {message}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.input is None or args.output is None:
        parser.print_help(sys.stderr)
        return 0

    size = DEFAULT_TARGET_SIZE
    if args.size is not None:
        parsed_size = parse_size(args.size)
        if parsed_size is None:
            logger.warning(f"Unrecognized size '{args.size}', using {DEFAULT_TARGET_SIZE}")
        else:
            size = parsed_size

    mode = DEFAULT_FIT_MODE
    if args.mode is not None:
        parsed_mode = parse_mode(args.mode)
        if parsed_mode is None:
            logger.warning(f"Unrecognized mode '{args.mode}', using {DEFAULT_FIT_MODE}")
        else:
            mode = parsed_mode

    try:
        params = TargetFitParams(
            input_path=args.input,
            output_path=args.output,
            size=size,
            mode=mode,
        )
        output = target_fit(
            input_path=params.input_path,
            output_path=params.output_path,
            width=params.size.width,
            height=params.size.height,
            mode=params.mode,
        )
    except ValidationError as e:
        logger.error(f"Invalid arguments: {e}")
        return 1
    except TargetFitError as e:
        logger.error(str(e))
        return 1

    print(f"Saved: {output} ({params.size}, mode={params.mode})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
