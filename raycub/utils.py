"""Small helpers: hashing, colour conversion and a clock."""

from __future__ import annotations

import struct
import time

_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = 0xFFFFFFFFFFFFFFFF

_START = time.perf_counter()


def fnv_hash(data: bytes | str) -> int:
    """Return the 64-bit FNV-1a hash of data.

    Bytes are treated as signed characters, so values of 0x80 and above
    are sign-extended before being mixed in.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    result = _FNV_OFFSET
    for byte in data:
        value = byte - 256 if byte >= 0x80 else byte
        result ^= value & _MASK64
        result = (result * _FNV_PRIME) & _MASK64
    return result


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


_WEIGHT_R = _f32(0.299)
_WEIGHT_G = _f32(0.587)
_WEIGHT_B = _f32(0.114)


def rgba_to_mono(color: int) -> int:
    """Convert an RGBA colour to greyscale, keeping its alpha."""
    r = int(_f32(_WEIGHT_R * ((color >> 24) & 0xFF))) & 0xFF
    g = int(_f32(_WEIGHT_G * ((color >> 16) & 0xFF))) & 0xFF
    b = int(_f32(_WEIGHT_B * ((color >> 8) & 0xFF))) & 0xFF
    y = (r + g + b) & 0xFF
    return (y << 24) | (y << 16) | (y << 8) | (color & 0xFF)


def get_time() -> float:
    """Seconds elapsed since the package was loaded."""
    return time.perf_counter() - _START