"""Reader for the XPM42 image format."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import ErrorCode, MlxError
from .image import BPP, Texture
from .utils import fnv_hash, rgba_to_mono

_MAGIC = "!XPM42\n"
_TABLE_SIZE = 0xFFFF
_MAX_DIM = 0x7FFF
_MAX_CPP = 10
_SPACE = " \t\n\v\f\r"
_INT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
)


@dataclass
class Xpm:
    """A decoded XPM42 picture."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str


def _invalid(detail: str) -> MlxError:
    return MlxError(ErrorCode.INVXPM, detail)


def _lines(text: str) -> Iterator[str]:
    parts = text.split("\n")
    for part in parts[:-1]:
        yield part + "\n"
    if parts[-1]:
        yield parts[-1]


def _c_int(sign: str, body: str) -> int:
    if body[:2] in ("0x", "0X"):
        value = int(body[2:], 16)
    elif body.startswith("0") and len(body) > 1:
        value = int(body[1:], 8)
    else:
        value = int(body)
    return -value if sign == "-" else value


def _parse_header(line: str) -> tuple[int, int, int, int, str]:
    values = []
    pos = 0
    for _ in range(4):
        match = _INT_RE.match(line, pos)
        if not match:
            raise _invalid("malformed header")
        values.append(_c_int(match.group(1), match.group(2)))
        pos = match.end()
    while pos < len(line) and line[pos] in _SPACE:
        pos += 1
    if pos >= len(line):
        raise _invalid("missing colour mode")
    width, height, color_count, cpp = values
    mode = line[pos]
    if not (0 <= width <= _MAX_DIM and 0 <= height <= _MAX_DIM):
        raise _invalid("dimensions out of range")
    if mode not in ("c", "m"):
        raise _invalid(f"unknown colour mode {mode!r}")
    if not 1 <= cpp <= _MAX_CPP:
        raise _invalid("characters per pixel out of range")
    return width, height, color_count, cpp, mode


def _hex_channel(chars: str) -> int:
    text = chars.lstrip(_SPACE)
    negative = False
    if text and text[0] in "+-":
        negative = text[0] == "-"
        text = text[1:]
    digits = ""
    for char in text:
        if char not in "0123456789abcdefABCDEF":
            break
        digits += char
    value = int(digits, 16) if digits else 0
    return (-value if negative else value) & 0xFF


def _slot(key: str) -> int:
    return fnv_hash(key.encode("latin-1")) % _TABLE_SIZE


def _parse_entry(line: str, cpp: int, mode: str, table: dict[int, int]) -> None:
    if line.rfind(" ") != cpp:
        raise _invalid("colour key has the wrong length")
    marker = line[cpp + 1 : cpp + 2]
    first = line[cpp + 2 : cpp + 3]
    if marker != "#" or not (first.isascii() and first.isalnum()):
        raise _invalid("malformed colour entry")
    start = cpp + 2
    color = 0
    for shift, offset in zip((24, 16, 8, 0), (0, 2, 4, 6)):
        color |= _hex_channel(line[start + offset : start + offset + 2]) << shift
    color &= 0xFFFFFFFF
    table[_slot(line[:cpp])] = rgba_to_mono(color) if mode == "m" else color


def parse_xpm42(text: str | bytes) -> Xpm:
    """Decode XPM42 content; raise MlxError(INVXPM) if it is malformed."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    content = bytes(text).decode("latin-1")
    lines = _lines(content)

    if next(lines, None) != _MAGIC:
        raise _invalid("missing !XPM42 signature")
    header = next(lines, None)
    if header is None:
        raise _invalid("missing header")
    width, height, color_count, cpp, mode = _parse_header(header)

    table: dict[int, int] = {}
    for _ in range(color_count):
        line = next(lines, None)
        if line is None:
            raise _invalid("colour table is truncated")
        _parse_entry(line, cpp, mode, table)

    pixels = bytearray()
    for _ in range(height):
        line = next(lines, None)
        if line is None:
            raise _invalid("pixel data is truncated")
        if line.endswith("\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _invalid("pixel row has the wrong length")
        for start in range(0, len(line), cpp):
            color = table.get(_slot(line[start : start + cpp]), 0)
            pixels += color.to_bytes(BPP, "big")

    texture = Texture(width, height, pixels)
    return Xpm(texture=texture, color_count=color_count, cpp=cpp, mode=mode)


def load_xpm42(path: str | os.PathLike[str]) -> Xpm:
    """Read and decode an XPM42 file."""
    name = os.fspath(path)
    if ".xpm42" not in name:
        raise MlxError(ErrorCode.INVEXT, name)
    try:
        with open(name, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MlxError(ErrorCode.INVFILE, name) from exc
    return parse_xpm42(data)