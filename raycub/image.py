"""Pixel buffers: textures, images and image instances."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .errors import ErrorCode, MlxError

BPP = 4
_MAX_DIM = 0x7FFF


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _check_dims(width: int, height: int) -> None:
    if not (0 < width <= _MAX_DIM and 0 < height <= _MAX_DIM):
        raise MlxError(ErrorCode.INVDIM, f"{width}x{height}")


@dataclass
class Texture:
    """A decoded picture held in memory, rows of RGBA bytes."""

    width: int
    height: int
    pixels: bytearray
    bytes_per_pixel: int = BPP

    def __post_init__(self) -> None:
        self.pixels = bytearray(self.pixels)
        expected = self.width * self.height * self.bytes_per_pixel
        if len(self.pixels) != expected:
            raise ValueError(
                f"pixel buffer has {len(self.pixels)} bytes, expected {expected}"
            )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y) as a big-endian integer (RGBA)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MlxError(ErrorCode.INVPOS, f"({x}, {y})")
        start = (y * self.width + x) * self.bytes_per_pixel
        return int.from_bytes(self.pixels[start : start + self.bytes_per_pixel], "big")


@dataclass
class Instance:
    """One placement of an image in the window."""

    x: int
    y: int
    z: int
    enabled: bool = True


@dataclass(eq=False)
class Image:
    """A drawable RGBA buffer that can be placed in a window many times."""

    width: int
    height: int
    enabled: bool = True
    pixels: bytearray = field(init=False, repr=False)
    instances: list[Instance] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        _check_dims(self.width, self.height)
        self.pixels = bytearray(self.width * self.height * BPP)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MlxError(ErrorCode.INVPOS, f"({x}, {y})")
        return (y * self.width + x) * BPP

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Write an RGBA colour at (x, y)."""
        start = self._offset(x, y)
        self.pixels[start : start + BPP] = (color & 0xFFFFFFFF).to_bytes(BPP, "big")

    def get_pixel(self, x: int, y: int) -> int:
        """Return the RGBA colour at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(self.pixels[start : start + BPP], "big")

    def fill(self, color: int) -> None:
        """Set every pixel to color."""
        self.pixels[:] = (color & 0xFFFFFFFF).to_bytes(BPP, "big") * (
            self.width * self.height
        )

    def resize(self, width: int, height: int) -> None:
        """Rescale the buffer with nearest-neighbour sampling."""
        _check_dims(width, height)
        if width == self.width and height == self.height:
            return
        wstep = _f32(self.width / width)
        hstep = _f32(self.height / height)
        columns = [int(_f32(i * wstep)) for i in range(width)]
        resized = bytearray()
        for j in range(height):
            row_base = int(_f32(j * hstep)) * self.width
            for column in columns:
                start = (row_base + column) * BPP
                resized += self.pixels[start : start + BPP]
        self.pixels = resized
        self.width = width
        self.height = height

    def add_instance(self, x: int, y: int, z: int) -> int:
        """Place a new instance and return its index."""
        self.instances.append(Instance(x, y, z))
        return len(self.instances) - 1

    def set_instance_depth(self, index: int, z: int) -> bool:
        """Change an instance's depth; return True if it changed."""
        instance = self.instances[index]
        if instance.z == z:
            return False
        instance.z = z
        return True


def texture_to_image(texture: Texture) -> Image:
    """Copy a texture into a new image of the same size."""
    image = Image(texture.width, texture.height)
    row_bytes = texture.width * texture.bytes_per_pixel
    for row in range(texture.height):
        src = row * row_bytes
        dst = row * image.width * texture.bytes_per_pixel
        image.pixels[dst : dst + row_bytes] = texture.pixels[src : src + row_bytes]
    return image