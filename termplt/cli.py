"""Command-line demonstration: draw squares and an image, then query the terminal."""

from __future__ import annotations

import argparse
import sys

from termplt.commands import TerminalCommandError, read_command
from termplt.images import print_bounded_img, print_rgb_square, print_rgba_square

__all__ = ["main"]

GREEN = (0, 255, 0)
WHITE = (255, 255, 255)
ALPHAS = (25, 50, 100, 200, 255)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termplt",
        description="Draw test graphics with the kitty graphics protocol.",
    )
    parser.add_argument("image", nargs="?", help="PNG file to display")
    parser.add_argument("--cols", type=int, default=100, help="columns for the image")
    parser.add_argument("--rows", type=int, default=25, help="rows for the image")
    parser.add_argument(
        "--no-query", action="store_true", help="skip querying the terminal"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    out = sys.stdout.buffer
    try:
        for alpha in ALPHAS:
            print_rgba_square(50, (*GREEN, alpha), out)
        out.write(b"\n")
        print_rgb_square(200, WHITE, out)
        out.write(b"\n")
        if args.image:
            print_bounded_img(args.image, args.cols, args.rows, out)
            out.write(b"\n")
        out.flush()
        if not args.no_query:
            read_command(out)
    except (OSError, ValueError, TerminalCommandError) as exc:
        out.flush()
        print(f"termplt: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())