# palette_cut/__init__.py
"""
palette_cut package.

Purpose:
  Median cut colour palettes from images. See palette_cut.cli for the CLI.

Public API:
  generate_palette : pixels + iterations -> list of opaque mean colours.
  median_cut       : same partitioning, returning the final buckets.
  Color, Channel   : value types (core_types).
  bucket           : Bucket and split_bucket.
  errors           : InvalidInput, Unsplittable, ImageLoadError.
  image_io         : load_pixels for Pillow-readable images.
  export           : html / json / csv writers.
  utils            : duration formatting and tidy logging.

Quick start:
  from palette_cut import generate_palette, Color
  generate_palette([Color(10, 20, 30), Color(20, 30, 40)], 0)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import core_types
from . import errors
from . import bucket
from . import partition
from . import image_io
from . import export
from . import utils

from .core_types import Channel, Color  # noqa: E402,F401
from .errors import ImageLoadError, InvalidInput, PaletteError, Unsplittable  # noqa: E402,F401
from .partition import generate_palette, median_cut  # noqa: E402,F401

__all__ = [
    "__version__",
    "core_types",
    "errors",
    "bucket",
    "partition",
    "image_io",
    "export",
    "utils",
    "Channel",
    "Color",
    "PaletteError",
    "InvalidInput",
    "Unsplittable",
    "ImageLoadError",
    "generate_palette",
    "median_cut",
]
