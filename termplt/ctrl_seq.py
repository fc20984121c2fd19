"""Control-data key/value pairs of the kitty graphics protocol."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Protocol

__all__ = [
    "Transmission",
    "Action",
    "PixelFormat",
    "ImageId",
    "MoreData",
    "join_ctrl_seqs",
]

_U32_MAX = 2**32 - 1


def _check_u32(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} must fit in an unsigned 32-bit integer, got {value}")
    return value


class _HasCtrlSeq(Protocol):
    def ctrl_seq(self) -> str: ...


class Transmission(enum.Enum):
    """How the image data reaches the terminal."""

    DIRECT = "d"
    FILE = "f"
    TEMP_FILE = "t"
    SHARED_MEMORY = "s"

    def ctrl_seq(self) -> str:
        return f"t={self.value}"


class Action(enum.Enum):
    """What the terminal should do with the transmitted image."""

    TRANSMIT_DISPLAY = "T"
    QUERY = "q"

    def ctrl_seq(self) -> str:
        return f"a={self.value}"


@dataclass(frozen=True)
class PixelFormat:
    """Format of the pixel data, with its size parameters."""

    code: int
    params: tuple[tuple[str, int], ...] = ()

    @classmethod
    def png(cls) -> PixelFormat:
        return cls(100)

    @classmethod
    def png_bounded(cls, cols: int, rows: int) -> PixelFormat:
        return cls(100, (("c", _check_u32("cols", cols)), ("r", _check_u32("rows", rows))))

    @classmethod
    def rgb(cls, width: int, height: int) -> PixelFormat:
        return cls(24, (("s", _check_u32("width", width)), ("v", _check_u32("height", height))))

    @classmethod
    def rgba(cls, width: int, height: int) -> PixelFormat:
        return cls(32, (("s", _check_u32("width", width)), ("v", _check_u32("height", height))))

    def ctrl_seq(self) -> str:
        parts = [f"f={self.code}"]
        parts.extend(f"{key}={value}" for key, value in self.params)
        return ",".join(parts)


@dataclass(frozen=True)
class ImageId:
    """Identifier the terminal attaches to an image."""

    value: int

    def __post_init__(self) -> None:
        _check_u32("id", self.value)

    def ctrl_seq(self) -> str:
        return f"i={self.value}"


@dataclass(frozen=True)
class MoreData:
    """Whether further chunks of the same image follow."""

    more: bool

    def ctrl_seq(self) -> str:
        return f"m={1 if self.more else 0}"


def join_ctrl_seqs(seqs: Iterable[_HasCtrlSeq]) -> str:
    """Join the control sequences of ``seqs`` with commas."""
    return ",".join(seq.ctrl_seq() for seq in seqs)