"""Write raw image data to the terminal as kitty graphics escape sequences."""

from __future__ import annotations

import sys
from typing import BinaryIO, Iterable, Protocol

from termplt.ctrl_seq import MoreData, join_ctrl_seqs

__all__ = ["write_img_data"]

_START = b"\x1b_G"
_SEP = b";"
_END = b"\x1b\\"
_CHUNK_SIZE = 4096


class _HasCtrlSeq(Protocol):
    def ctrl_seq(self) -> str: ...


def write_img_data(
    img_data: bytes,
    ctrl_data: Iterable[_HasCtrlSeq],
    out: BinaryIO | None = None,
) -> None:
    """Write ``img_data`` in chunks of 4096 bytes, each wrapped in an escape sequence.

    The control data goes with the first chunk only; every chunk carries a
    ``m`` flag telling whether more chunks follow. ``out`` defaults to the
    binary standard output and is flushed at the end.
    """
    if out is None:
        out = sys.stdout.buffer
    data = bytes(img_data)
    pending = list(ctrl_data)
    offsets = range(0, len(data), _CHUNK_SIZE)
    last_offset = offsets[-1] if offsets else None

    for offset in offsets:
        chunk = data[offset : offset + _CHUNK_SIZE]
        pending.append(MoreData(offset != last_offset))
        ctl_bytes = join_ctrl_seqs(pending).encode("ascii")
        pending = []
        out.write(_START + ctl_bytes + _SEP + chunk + _END)
    out.flush()