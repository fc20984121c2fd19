import base64
import io
from unittest import mock

import pytest

from termplt.images import (
    print_bounded_img,
    print_img,
    print_rgb_square,
    print_rgba_square,
    rgb_square_bytes,
    rgba_square_bytes,
)


def _payload(frame: bytes) -> bytes:
    body = frame.split(b";", 1)[1][: -len(b"\x1b\\")]
    return base64.b64decode(body + b"=" * (-len(body) % 4))


def test_rgb_square_bytes():
    assert rgb_square_bytes(2, (1, 2, 3)) == bytes([1, 2, 3]) * 4


def test_rgba_square_bytes_length_and_pixels():
    data = rgba_square_bytes(5, (0, 255, 0, 25))
    assert len(data) == 5 * 5 * 4
    assert {data[i : i + 4] for i in range(0, len(data), 4)} == {bytes([0, 255, 0, 25])}


def test_square_bytes_zero_size():
    assert rgb_square_bytes(0, (1, 2, 3)) == b""


@pytest.mark.parametrize("color", [(1, 2), (1, 2, 3, 4)])
def test_rgb_square_bad_color_length(color):
    with pytest.raises(ValueError):
        rgb_square_bytes(2, color)


def test_square_bad_color_value():
    with pytest.raises(ValueError):
        rgba_square_bytes(2, (1, 2, 3, 256))


def test_square_negative_size():
    with pytest.raises(ValueError):
        rgb_square_bytes(-1, (1, 2, 3))


def test_print_rgb_square_wire_bytes():
    out = io.BytesIO()
    print_rgb_square(1, (255, 255, 255), out)
    assert out.getvalue() == b"\x1b_Ga=T,f=24,s=1,v=1,m=0;////\x1b\\"


def test_print_rgba_square_round_trip():
    out = io.BytesIO()
    print_rgba_square(3, (0, 255, 0, 100), out)
    written = out.getvalue()
    assert written.startswith(b"\x1b_Ga=T,f=32,s=3,v=3,m=0;")
    assert _payload(written) == bytes([0, 255, 0, 100]) * 9


def test_print_bounded_img(tmp_path):
    img = tmp_path / "img.png"
    img.write_bytes(b"\x89PNG fake image data")
    out = io.BytesIO()
    print_bounded_img(img, 100, 25, out)
    written = out.getvalue()
    assert written.startswith(b"\x1b_Ga=T,f=100,c=100,r=25,m=0;")
    assert _payload(written) == b"\x89PNG fake image data"


def test_print_bounded_img_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        print_bounded_img(tmp_path / "missing.png", 10, 10, io.BytesIO())


def test_print_img_uses_window_size(tmp_path):
    img = tmp_path / "img.png"
    img.write_bytes(b"png-bytes")

    def fake_ioctl(fd, request, buf, mutate):
        buf[0], buf[1], buf[2], buf[3] = 24, 80, 640, 480
        return 0

    out = io.BytesIO()
    with mock.patch("fcntl.ioctl", side_effect=fake_ioctl):
        print_img(img, out)
    written = out.getvalue()
    assert written.startswith(b"\x1b_Ga=T,f=100,c=80,r=24,m=0;")
    assert _payload(written) == b"png-bytes"


def test_print_img_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        print_img(tmp_path / "missing.png", io.BytesIO())