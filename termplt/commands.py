"""Terminal commands: CSI queries and kitty graphics commands, and reading replies."""

from __future__ import annotations

import os
import select
import sys
import termios
import time
import tty
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import BinaryIO, Iterable, Iterator, Protocol

from termplt.ctrl_seq import (
    Action,
    ImageId,
    MoreData,
    PixelFormat,
    Transmission,
    join_ctrl_seqs,
)
from termplt.encoding import read_bytes_to_b64

__all__ = [
    "TerminalCommandError",
    "TermCommand",
    "CsiCommand",
    "KittyCommand",
    "execute",
    "execute_and_read",
    "resp_to_str",
    "read_command",
]

CSI_START = b"\x1b["
KITTY_START = b"\x1b_G"
KITTY_SEP = b";"
KITTY_END = b"\x1b\\"
MAX_PAYLOAD_SIZE = 4096
DEFAULT_TIMEOUT = 1.0


class _HasCtrlSeq(Protocol):
    def ctrl_seq(self) -> str: ...


class TerminalCommandError(Exception):
    """A terminal command got no valid response."""

    def __init__(self, failed_cmd: str = "") -> None:
        super().__init__(f"Error executing terminal command: {failed_cmd}")
        self.failed_cmd = failed_cmd


class TermCommand(ABC):
    """A request written to the terminal, with the framing of its response."""

    req_start: bytes = b""
    req_end: bytes = b""
    res_start: bytes = b""
    res_end: bytes = b""

    @property
    @abstractmethod
    def request(self) -> bytes:
        """The full bytes to write to the terminal."""


class CsiCommand(TermCommand):
    """A control sequence introducer command whose reply ends with ``res_end``."""

    req_start = CSI_START
    res_start = CSI_START

    def __init__(self, command: str, res_end: str) -> None:
        end = res_end.encode()
        self.res_end = end
        self._request = CSI_START + command.encode() + end

    @property
    def request(self) -> bytes:
        return self._request


class KittyCommand(TermCommand):
    """A kitty graphics command, its payload base64-encoded and split in chunks."""

    req_start = KITTY_START
    req_end = KITTY_END
    res_start = KITTY_START
    res_end = KITTY_END

    def __init__(self, payload: bytes, ctrl_data: Iterable[_HasCtrlSeq]) -> None:
        encoded = read_bytes_to_b64(payload)
        chunks = [
            encoded[offset : offset + MAX_PAYLOAD_SIZE]
            for offset in range(0, len(encoded), MAX_PAYLOAD_SIZE)
        ]
        pending = list(ctrl_data)
        parts = []
        for index, chunk in enumerate(chunks):
            pending.append(MoreData(index != len(chunks) - 1))
            ctrl_bytes = join_ctrl_seqs(pending).encode("ascii")
            pending = []
            parts.append(KITTY_START + ctrl_bytes + KITTY_SEP + chunk + KITTY_END)
        self._request = b"".join(parts)

    @property
    def request(self) -> bytes:
        return self._request


def _fileno(stream: object) -> int | None:
    try:
        return stream.fileno()  # type: ignore[attr-defined]
    except (AttributeError, OSError, ValueError):
        return None


@contextmanager
def _raw_mode(fd: int | None) -> Iterator[None]:
    if fd is None or not os.isatty(fd):
        yield
    else:
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def execute(cmd: TermCommand, out: BinaryIO | None = None) -> None:
    """Write the command's request to ``out`` (binary standard output by default)."""
    if out is None:
        out = sys.stdout.buffer
    out.write(cmd.request)
    out.flush()


def _read_response(cmd: TermCommand, inp: BinaryIO, deadline: float) -> bytes | None:
    fd = _fileno(inp)
    buf = bytearray()
    while time.monotonic() < deadline:
        if fd is not None:
            remaining = max(0.0, deadline - time.monotonic())
            ready, _, _ = select.select([fd], [], [], remaining)
            if not ready:
                continue
            byte = os.read(fd, 1)
        else:
            byte = inp.read(1)
        if not byte:
            break
        buf += byte
        if len(buf) > len(cmd.res_start) and buf.endswith(cmd.res_end):
            if buf.startswith(cmd.res_start):
                return bytes(buf)
            # right ending but wrong beginning: not our reply, start over
            buf.clear()
    return None


def execute_and_read(
    cmd: TermCommand,
    out: BinaryIO | None = None,
    inp: BinaryIO | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> bytes:
    """Send ``cmd`` and return the terminal's framed reply read from ``inp``.

    A terminal input is put in raw mode while reading. Raises
    ``TerminalCommandError`` if no reply arrives within ``timeout`` seconds.
    """
    if inp is None:
        inp = sys.stdin.buffer
    deadline = time.monotonic() + timeout
    with _raw_mode(_fileno(inp)):
        execute(cmd, out)
        response = _read_response(cmd, inp, deadline)
    if response is None:
        raise TerminalCommandError(cmd.request.decode("ascii", "backslashreplace"))
    return response


def resp_to_str(resp: bytes, cmd: TermCommand) -> str:
    """Strip the response framing of ``cmd`` from ``resp`` and decode it as UTF-8."""
    if resp.startswith(cmd.res_start) and resp.endswith(cmd.res_end):
        body = resp[len(cmd.res_start) : len(resp) - len(cmd.res_end)]
        return body.decode("utf-8")
    raise TerminalCommandError(cmd.request.decode("ascii", "backslashreplace"))


def read_command(out: BinaryIO | None = None, inp: BinaryIO | None = None) -> list[str]:
    """Query cursor position, device attributes and kitty graphics support.

    Each reply is reported on ``out``; the decoded replies are returned.
    """
    if out is None:
        out = sys.stdout.buffer
    queries: list[tuple[str, TermCommand]] = [
        ("CSI", CsiCommand("6n", "R")),
        ("CSI", CsiCommand("c", "c")),
        (
            "Kitty",
            KittyCommand(
                bytes([255, 255, 255]),
                [
                    ImageId(32),
                    Transmission.DIRECT,
                    PixelFormat.rgb(1, 1),
                    Action.QUERY,
                ],
            ),
        ),
    ]
    results = []
    for label, cmd in queries:
        resp = execute_and_read(cmd, out, inp)
        text = resp_to_str(resp, cmd)
        out.write(f"{label} Resp: {text} ({list(resp)})\n".encode())
        out.flush()
        results.append(text)
    return results