"""Base64 encoding of image payloads for the kitty graphics protocol."""

import base64

__all__ = ["read_bytes_to_b64"]


def read_bytes_to_b64(data: bytes) -> bytes:
    """Encode ``data`` as standard-alphabet base64 without ``=`` padding.

    Every three input bytes become four output characters; a trailing group
    of one or two bytes becomes two or three characters respectively.
    """
    return base64.b64encode(bytes(data)).rstrip(b"=")