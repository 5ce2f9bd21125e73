# palette_cut/core_types.py
from __future__ import annotations

"""
Core type aliases, the Color value object and pixel-array coercion.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidInput

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
HexStr = str

PixelArray = NDArray[np.uint8]  # (N, 4) RGBA rows
IndexArray = NDArray[np.intp]  # (N,) row indices into a PixelArray


class Channel(IntEnum):
    """Colour channel, valued as its column in a PixelArray."""

    R = 0
    G = 1
    B = 2
    A = 3


# Alpha never drives a split. Order doubles as the tie-break priority.
PARTITION_CHANNELS: Tuple[Channel, ...] = (Channel.R, Channel.G, Channel.B)

# Value objects


@dataclass(frozen=True)
class Color:
    """RGBA colour with 8-bit channels. Alpha defaults to fully opaque."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidInput(f"channel {name}={value!r} is not an integer")
            if not 0 <= value <= 255:
                raise InvalidInput(f"channel {name}={value} outside 0..255")
            object.__setattr__(self, name, int(value))

    def __getitem__(self, channel: Channel) -> int:
        return self.rgba[Channel(channel)]

    def __iter__(self) -> Iterator[int]:
        return iter(self.rgba)

    def __str__(self) -> str:
        return f"{{ R: {self.r}, G: {self.g}, B: {self.b}, A: {self.a} }}"

    @property
    def rgb(self) -> RGBTuple:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> RGBATuple:
        return (self.r, self.g, self.b, self.a)

    @property
    def hex(self) -> HexStr:
        return rgb_to_hex(self.rgb)


# Small helpers


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def as_pixel_array(
    pixels: Union[Sequence[Color], Sequence[Sequence[int]], np.ndarray],
) -> PixelArray:
    """
    Coerce input pixels to a contiguous (N, 4) uint8 array.

    Accepts Color objects, 3/4-length integer rows, or an (N, 3) / (N, 4)
    integer array. Rows without alpha are taken as fully opaque.
    """
    if isinstance(pixels, np.ndarray):
        arr = pixels
    else:
        rows: List[Sequence[int]] = []
        for p in pixels:
            rows.append(p.rgba if isinstance(p, Color) else tuple(p))
        if not rows:
            raise InvalidInput("pixel set is empty")
        widths = {len(r) for r in rows}
        if len(widths) != 1:
            raise InvalidInput("pixel rows have mixed lengths")
        arr = np.asarray(rows)

    if arr.ndim != 2 or arr.shape[1] not in (3, 4):
        raise InvalidInput(f"expected (N,3) or (N,4) pixels, got {arr.shape}")
    if arr.shape[0] == 0:
        raise InvalidInput("pixel set is empty")
    if arr.dtype != np.uint8:
        if not np.issubdtype(arr.dtype, np.integer):
            raise InvalidInput(f"pixel values must be integers, got {arr.dtype}")
        if arr.min() < 0 or arr.max() > 255:
            raise InvalidInput("pixel values outside 0..255")

    out = np.empty((arr.shape[0], 4), dtype=np.uint8)
    out[:, :3] = arr[:, :3]
    out[:, 3] = arr[:, 3] if arr.shape[1] == 4 else 255
    return out


__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBATuple",
    "HexStr",
    "PixelArray",
    "IndexArray",
    "Channel",
    "PARTITION_CHANNELS",
    # value objects
    "Color",
    # helpers
    "rgb_to_hex",
    "as_pixel_array",
]
