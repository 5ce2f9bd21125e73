# palette_cut/image_io.py
from __future__ import annotations

from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .core_types import PixelArray
from .errors import ImageLoadError

"""
Image decoding to flat RGBA pixel rows.
"""


def _to_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    return im.convert("RGBA")


def load_pixels(path: Path) -> Tuple[PixelArray, Tuple[int, int]]:
    """
    Decode an image into row-major (N, 4) uint8 RGBA rows.

    Sources without alpha come back fully opaque. Returns (pixels, (W, H)).
    """
    path = Path(path)
    if not path.is_file():
        raise ImageLoadError(f"not found: {path}")
    try:
        with Image.open(path) as im0:
            im = _to_rgba(im0)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageLoadError(f"cannot decode {path}: {e}") from e
    arr = np.array(im, dtype=np.uint8)
    height, width = arr.shape[0], arr.shape[1]
    return arr.reshape(-1, 4), (width, height)


__all__ = ["load_pixels"]
