import pytest

from termplt.ctrl_seq import (
    Action,
    ImageId,
    MoreData,
    PixelFormat,
    Transmission,
    join_ctrl_seqs,
)


@pytest.mark.parametrize(
    "transmission, expected",
    [
        (Transmission.DIRECT, "t=d"),
        (Transmission.FILE, "t=f"),
        (Transmission.TEMP_FILE, "t=t"),
        (Transmission.SHARED_MEMORY, "t=s"),
    ],
)
def test_transmission_ctrl_seq(transmission, expected):
    assert transmission.ctrl_seq() == expected


@pytest.mark.parametrize(
    "action, expected",
    [(Action.TRANSMIT_DISPLAY, "a=T"), (Action.QUERY, "a=q")],
)
def test_action_ctrl_seq(action, expected):
    assert action.ctrl_seq() == expected


def test_png_ctrl_seq():
    assert PixelFormat.png().ctrl_seq() == "f=100"


@pytest.mark.parametrize("cols, rows", [(100, 25), (1, 1), (0, 7)])
def test_png_bounded_ctrl_seq(cols, rows):
    assert PixelFormat.png_bounded(cols, rows).ctrl_seq() == f"f=100,c={cols},r={rows}"


@pytest.mark.parametrize("width, height", [(200, 200), (1, 1), (3, 9)])
def test_rgb_ctrl_seq(width, height):
    assert PixelFormat.rgb(width, height).ctrl_seq() == f"f=24,s={width},v={height}"


@pytest.mark.parametrize("width, height", [(50, 50), (2, 8)])
def test_rgba_ctrl_seq(width, height):
    assert PixelFormat.rgba(width, height).ctrl_seq() == f"f=32,s={width},v={height}"


@pytest.mark.parametrize("factory", [PixelFormat.rgb, PixelFormat.rgba, PixelFormat.png_bounded])
def test_negative_dimensions_rejected(factory):
    with pytest.raises(ValueError):
        factory(-1, 5)


def test_oversized_dimension_rejected():
    with pytest.raises(ValueError):
        PixelFormat.rgb(2**32, 1)


def test_non_integer_dimension_rejected():
    with pytest.raises(TypeError):
        PixelFormat.rgba(1.5, 1)


@pytest.mark.parametrize("image_id", [0, 32, 4294967295])
def test_image_id_ctrl_seq(image_id):
    assert ImageId(image_id).ctrl_seq() == f"i={image_id}"


def test_image_id_out_of_range():
    with pytest.raises(ValueError):
        ImageId(-3)


def test_more_data_flags():
    assert MoreData(True).ctrl_seq() == "m=1"
    assert MoreData(False).ctrl_seq() == "m=0"


def test_join_keeps_order():
    seqs = [ImageId(32), Transmission.DIRECT, PixelFormat.rgb(1, 1), Action.QUERY]
    joined = join_ctrl_seqs(seqs)
    assert joined.split(",") == ["i=32", "t=d", "f=24", "s=1", "v=1", "a=q"]


def test_join_empty():
    assert join_ctrl_seqs([]) == ""


def test_pixel_format_equality():
    assert PixelFormat.rgb(4, 5) == PixelFormat.rgb(4, 5)
    assert PixelFormat.rgb(4, 5) != PixelFormat.rgba(4, 5)