# palette_cut/bucket.py
from __future__ import annotations

"""
Median cut buckets and the splitter.

A Bucket is a contiguous [start, stop) window over an index arena shared by
all buckets of one run. The pixel array itself is never reordered; splitting
only permutes the bucket's own window of the arena, so sibling buckets never
alias each other.

Exports:
  Bucket
  split_bucket(bucket) -> (below, above)
"""

from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from .core_types import PARTITION_CHANNELS, Channel, Color, IndexArray, PixelArray
from .errors import Unsplittable


def _round_half_up_mean(total: int, count: int) -> int:
    return (total + count // 2) // count


class Bucket:
    """Working subset of a pixel array with cached R/G/B min and max."""

    __slots__ = (
        "pixels",
        "order",
        "start",
        "stop",
        "lo",
        "hi",
        "_widest",
        "_widest_range",
    )

    def __init__(
        self, pixels: PixelArray, order: IndexArray, start: int, stop: int
    ) -> None:
        self.pixels = pixels
        self.order = order
        self.start = int(start)
        self.stop = int(stop)
        self.lo: NDArray[np.int64] = np.zeros(3, dtype=np.int64)
        self.hi: NDArray[np.int64] = np.zeros(3, dtype=np.int64)
        self.refresh_ranges()

    @classmethod
    def seed(cls, pixels: PixelArray) -> "Bucket":
        """Single bucket holding every row of pixels."""
        order = np.arange(pixels.shape[0], dtype=np.intp)
        return cls(pixels, order, 0, pixels.shape[0])

    def __len__(self) -> int:
        return self.stop - self.start

    def __repr__(self) -> str:
        return (
            f"Bucket(size={len(self)}, ranges={self.ranges}, "
            f"widest={self.widest_channel.name})"
        )

    @property
    def indices(self) -> IndexArray:
        """Pixel row indices of the members, in current bucket order."""
        return self.order[self.start : self.stop]

    def members(self) -> PixelArray:
        """(n, 4) copy of the member rows."""
        return self.pixels[self.indices]

    def refresh_ranges(self) -> None:
        """Recompute cached min/max; must follow any membership change."""
        if len(self) == 0:
            self.lo[:] = 0
            self.hi[:] = 0
            self._widest, self._widest_range = Channel.R, 0
            return
        rgb = self.pixels[self.indices, :3]
        self.lo[:] = rgb.min(axis=0)
        self.hi[:] = rgb.max(axis=0)
        span = self.hi - self.lo
        # argmax keeps the first maximum, giving R > G > B on ties.
        widest = int(np.argmax(span))
        self._widest = PARTITION_CHANNELS[widest]
        self._widest_range = int(span[widest])

    @property
    def ranges(self) -> Tuple[int, int, int]:
        """(R, G, B) max-min spans."""
        span = self.hi - self.lo
        return (int(span[0]), int(span[1]), int(span[2]))

    @property
    def widest_channel(self) -> Channel:
        return self._widest

    @property
    def widest_range(self) -> int:
        return self._widest_range

    def is_splittable(self) -> bool:
        return len(self) > 1 and self.widest_range > 0

    def mean_color(self) -> Color:
        """Rounded-half-up mean of R, G and B; alpha is always 255."""
        n = len(self)
        if n == 0:
            raise Unsplittable("empty bucket has no mean colour")
        sums = self.pixels[self.indices, :3].sum(axis=0, dtype=np.int64)
        r, g, b = (_round_half_up_mean(int(s), n) for s in sums)
        return Color(r, g, b, 255)


def split_bucket(bucket: Bucket) -> Tuple[Bucket, Bucket]:
    """
    Split a bucket at the median of its widest channel.

    Members are stably sorted on that channel inside the bucket's arena
    window. The first ceil(n/2) go to `below`, the remaining floor(n/2) to
    `above`.
    """
    n = len(bucket)
    if n < 2:
        raise Unsplittable(f"bucket of size {n} cannot be split")

    channel = int(bucket.widest_channel)
    window = bucket.order[bucket.start : bucket.stop]
    values = bucket.pixels[window, channel]
    window[:] = window[np.argsort(values, kind="stable")]

    mid = bucket.start + (n + 1) // 2
    below = Bucket(bucket.pixels, bucket.order, bucket.start, mid)
    above = Bucket(bucket.pixels, bucket.order, mid, bucket.stop)
    return below, above


__all__ = ["Bucket", "split_bucket"]
