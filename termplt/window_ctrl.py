"""Query the terminal window size through the TIOCGWINSZ ioctl."""

from __future__ import annotations

import fcntl
import termios
from array import array
from dataclasses import dataclass
from typing import Sequence

__all__ = ["WindowCtrlError", "WindowSize", "get_window_size"]


class WindowCtrlError(Exception):
    """The window-size ioctl returned a non-zero code."""

    def __init__(self, exit_code: int) -> None:
        super().__init__(f"Non-zero exit code {exit_code} from ioctl read")
        self.exit_code = exit_code


@dataclass(frozen=True)
class WindowSize:
    """Terminal size in character cells and pixels."""

    rows: int
    cols: int
    x_pixels: int
    y_pixels: int

    @classmethod
    def from_ioctl(cls, data: Sequence[int]) -> WindowSize:
        """Build from the four unsigned shorts of a ``struct winsize``."""
        values = list(data)
        if len(values) != 4:
            raise ValueError(f"expected 4 values from ioctl, got {len(values)}")
        rows, cols, x_pixels, y_pixels = values
        return cls(rows=rows, cols=cols, x_pixels=x_pixels, y_pixels=y_pixels)


def get_window_size(fd: int = 0) -> WindowSize:
    """Return the window size of the terminal on ``fd`` (standard input by default).

    Raises ``OSError`` if the ioctl fails, and ``WindowCtrlError`` if it
    returns a non-zero code.
    """
    buf = array("H", [0, 0, 0, 0])
    exit_code = fcntl.ioctl(fd, termios.TIOCGWINSZ, buf, True)
    if exit_code != 0:
        raise WindowCtrlError(exit_code)
    return WindowSize.from_ioctl(buf)