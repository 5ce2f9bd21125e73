# palette_cut/errors.py
"""
Exception types raised by palette_cut.

All of them derive from ValueError so callers that only care about bad input
can catch that.
"""


class PaletteError(ValueError):
    """Base class for palette_cut errors."""


class InvalidInput(PaletteError):
    """Empty pixel set, bad iteration count or malformed colour data."""


class Unsplittable(PaletteError):
    """Split requested on a bucket with fewer than two members."""


class ImageLoadError(PaletteError):
    """Image file missing or not decodable by Pillow."""


__all__ = ["PaletteError", "InvalidInput", "Unsplittable", "ImageLoadError"]
