# palette_cut/partition.py
from __future__ import annotations

"""
Median cut partitioner.

Exports:
  median_cut(pixels, iterations) -> list[Bucket]
  generate_palette(pixels, iterations) -> list[Color]

Notes:
  - The bucket list grows by one per split, the split bucket being replaced
    in place by (below, above). Splitting stops at 2**iterations buckets or
    when no bucket has a non-zero range.
  - The widest range is split first; ties go to the earliest bucket in list
    order. Children take their parent's place, so list order is arena order
    (Bucket.start) and a heap keyed on (-range, start) gives the same picks.
"""

import heapq
from typing import List, Sequence, Tuple, Union

import numpy as np

from .bucket import Bucket, split_bucket
from .core_types import Color, as_pixel_array
from .errors import InvalidInput


PixelsLike = Union[Sequence[Color], Sequence[Sequence[int]], np.ndarray]

# Beyond this many iterations the pixel count bounds the palette anyway.
_MAX_SHIFT = 62


def _check_iterations(iterations: int) -> int:
    if isinstance(iterations, bool) or not isinstance(iterations, (int, np.integer)):
        raise InvalidInput(f"iterations must be an integer, got {iterations!r}")
    if iterations < 0:
        raise InvalidInput(f"iterations must be >= 0, got {iterations}")
    return int(iterations)


def median_cut(pixels: PixelsLike, iterations: int) -> List[Bucket]:
    """Partition pixels into at most 2**iterations buckets, in list order."""
    iterations = _check_iterations(iterations)
    pixel_arr = as_pixel_array(pixels)

    target = min(1 << min(iterations, _MAX_SHIFT), pixel_arr.shape[0])
    settled: List[Bucket] = []
    queue: List[Tuple[int, int, Bucket]] = []

    def add(bucket: Bucket) -> None:
        if bucket.is_splittable():
            heapq.heappush(queue, (-bucket.widest_range, bucket.start, bucket))
        else:
            settled.append(bucket)

    add(Bucket.seed(pixel_arr))
    count = 1
    while count < target and queue:
        _, _, widest = heapq.heappop(queue)
        below, above = split_bucket(widest)
        add(below)
        add(above)
        count += 1

    buckets = settled + [entry[2] for entry in queue]
    buckets.sort(key=lambda b: b.start)
    return buckets


def generate_palette(pixels: PixelsLike, iterations: int) -> List[Color]:
    """
    Median cut palette of pixels.

    Returns one opaque mean colour per final bucket, in bucket order. Raises
    InvalidInput for an empty pixel set or a negative iteration count.
    """
    return [bucket.mean_color() for bucket in median_cut(pixels, iterations)]


__all__ = ["PixelsLike", "median_cut", "generate_palette"]
