# palette_cut/constants.py
"""
Tunable defaults for the CLI. The core only takes `iterations`.
"""

from typing import Tuple

# Iterations: palette holds at most 2**iterations colours.
DEFAULT_ITERATIONS = 1
MIN_ITERATIONS = 1
MAX_ITERATIONS = 8

# Output
OUTPUT_FORMATS: Tuple[str, ...] = ("none", "html", "json", "csv")
DEFAULT_OUTPUT_FORMAT = "none"
DEFAULT_OUT_NAME = "palette"

# Swatch size in the HTML report, px
SWATCH_PX = 100

__all__ = [
    "DEFAULT_ITERATIONS",
    "MIN_ITERATIONS",
    "MAX_ITERATIONS",
    "OUTPUT_FORMATS",
    "DEFAULT_OUTPUT_FORMAT",
    "DEFAULT_OUT_NAME",
    "SWATCH_PX",
]
