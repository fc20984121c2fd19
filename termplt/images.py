"""Display PNG files and solid-colour squares through the kitty graphics protocol."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Sequence

from termplt.commands import KittyCommand, execute
from termplt.ctrl_seq import Action, PixelFormat
from termplt.window_ctrl import get_window_size

__all__ = [
    "rgb_square_bytes",
    "rgba_square_bytes",
    "print_img",
    "print_bounded_img",
    "print_rgb_square",
    "print_rgba_square",
]


def _square_bytes(size: int, color: Sequence[int], channels: int) -> bytes:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    pixel = bytes(color)
    if len(pixel) != channels:
        raise ValueError(f"color must have {channels} components, got {len(pixel)}")
    return pixel * (size * size)


def rgb_square_bytes(size: int, color: Sequence[int]) -> bytes:
    """Raw RGB pixel data of a ``size`` by ``size`` square of one colour."""
    return _square_bytes(size, color, 3)


def rgba_square_bytes(size: int, color: Sequence[int]) -> bytes:
    """Raw RGBA pixel data of a ``size`` by ``size`` square of one colour."""
    return _square_bytes(size, color, 4)


def print_img(path: str | Path, out: BinaryIO | None = None) -> None:
    """Display a PNG file bounded by the current terminal window size."""
    data = Path(path).read_bytes()
    window = get_window_size()
    cmd = KittyCommand(
        data,
        [Action.TRANSMIT_DISPLAY, PixelFormat.png_bounded(window.cols, window.rows)],
    )
    execute(cmd, out)


def print_bounded_img(
    path: str | Path, cols: int, rows: int, out: BinaryIO | None = None
) -> None:
    """Display a PNG file within ``cols`` columns and ``rows`` rows."""
    data = Path(path).read_bytes()
    cmd = KittyCommand(data, [Action.TRANSMIT_DISPLAY, PixelFormat.png_bounded(cols, rows)])
    execute(cmd, out)


def print_rgb_square(size: int, color: Sequence[int], out: BinaryIO | None = None) -> None:
    """Display a square of one RGB colour, ``size`` pixels wide."""
    data = rgb_square_bytes(size, color)
    cmd = KittyCommand(data, [Action.TRANSMIT_DISPLAY, PixelFormat.rgb(size, size)])
    execute(cmd, out)


def print_rgba_square(size: int, color: Sequence[int], out: BinaryIO | None = None) -> None:
    """Display a square of one RGBA colour, ``size`` pixels wide."""
    data = rgba_square_bytes(size, color)
    cmd = KittyCommand(data, [Action.TRANSMIT_DISPLAY, PixelFormat.rgba(size, size)])
    execute(cmd, out)