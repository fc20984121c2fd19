# termplt

Draw images and solid-colour squares in your terminal with the kitty
graphics protocol.

`termplt` builds kitty graphics escape sequences (an unpadded base64
payload split into 4096-byte chunks, each chunk carrying an `m` flag that
tells whether more follow), writes them to the terminal, and can send CSI
and kitty queries and read back the terminal's reply.

It needs a POSIX system: the window size comes from the `TIOCGWINSZ` ioctl,
and reading replies puts a terminal input into raw mode.

## Installation

```
pip install .
```

The package has no runtime dependencies. Run the tests with:

```
pip install ".[test]"
pytest
```

## Command line

```
termplt [IMAGE] [--cols N] [--rows N] [--no-query]
```

The command draws five 50-pixel green squares of increasing opacity and a
200-pixel white square. If `IMAGE` (a PNG file) is given, it is displayed
within `--cols` columns (default 100) and `--rows` rows (default 25). Then,
unless `--no-query` is given, it queries the terminal for the cursor
position, its device attributes and kitty graphics support, and prints each
reply. On a file error, a bad value or a query that gets no reply within one
second, it prints `termplt: <message>` to standard error and exits with
status 1.

Use it in a terminal that supports the kitty graphics protocol.

## Library use

```python
import sys

from termplt.images import print_bounded_img, print_rgb_square, print_rgba_square

print_rgb_square(100, (255, 0, 0), sys.stdout.buffer)
print_rgba_square(50, (0, 255, 0, 128), sys.stdout.buffer)
print_bounded_img("picture.png", 80, 20, sys.stdout.buffer)
```

The `out` argument of every printing function defaults to the binary
standard output.

### Modules

- `termplt.images` – `print_rgb_square`, `print_rgba_square`,
  `print_bounded_img`, and `print_img`, which bounds a PNG by the current
  window size; `rgb_square_bytes` and `rgba_square_bytes` return the raw
  pixel data of a square.
- `termplt.encoding.read_bytes_to_b64` – base64 without `=` padding, as used
  in the payloads.
- `termplt.ctrl_seq` – control keys: `Transmission`, `Action`, `PixelFormat`
  (`png`, `png_bounded`, `rgb`, `rgba`), `ImageId`, `MoreData`, and
  `join_ctrl_seqs` to join them with commas. Sizes and ids must fit in an
  unsigned 32-bit integer.
- `termplt.commands` – `CsiCommand`, `KittyCommand`, `execute`,
  `execute_and_read` (with a `timeout`, one second by default),
  `resp_to_str`, and `read_command`, which runs the three queries of the
  command line and returns the decoded replies. `TerminalCommandError` is
  raised when no valid reply arrives.
- `termplt.term_ctrl.write_img_data` – writes already-encoded data in
  4096-byte chunks with the given control keys on the first chunk.
- `termplt.window_ctrl.get_window_size` – the terminal's size as a
  `WindowSize` (`rows`, `cols`, `x_pixels`, `y_pixels`); raises
  `WindowCtrlError` on a non-zero ioctl code.

## What it does not do

It sends PNG files to the terminal as they are; it does not decode, resize
or convert images, and it does not draw plots or charts. Only direct
transmission is used by the printing functions, and nothing deletes or moves
images once they are displayed.