# palette_cut/cli.py
"""
Extract a median cut colour palette from an image.

Usage:
  palette-cut INPUT [--iterations N] [--format none|html|json|csv] [--out STEM] [--debug]

Iterations:
  The palette holds at most 2**N colours. N is clamped to [1, 8].

Output:
  Palette colours are always printed. With --format, a <STEM>.<ext> file is
  written as well (default stem: "palette").
"""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import List, Optional, Sequence

from palette_cut.constants import (
    DEFAULT_ITERATIONS,
    DEFAULT_OUT_NAME,
    DEFAULT_OUTPUT_FORMAT,
    MAX_ITERATIONS,
    MIN_ITERATIONS,
    OUTPUT_FORMATS,
)
from palette_cut.core_types import Color
from palette_cut.errors import ImageLoadError, PaletteError
from palette_cut.export import OutputFormat, format_color, write_palette
from palette_cut.image_io import load_pixels
from palette_cut.partition import generate_palette
from palette_cut.utils import (
    # formatting
    format_seconds_compact,
    # pretty logging
    print_banner,
    print_config_line,
    key_value_pairs_to_string,
    log,
    debug_log,
    warn,
    error,
)

# CLI args & small helpers


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        src: Path to image
        iterations: requested iteration count (unclamped)
        format: one of OUTPUT_FORMATS
        out: output file stem
        debug: bool for verbose bucket details
    """
    parser = argparse.ArgumentParser(
        prog="palette-cut",
        description="Create a colour palette from an image with the median cut algorithm.",
    )
    parser.add_argument("src", type=Path, help="Input image")
    parser.add_argument(
        "-i",
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Palette holds at most 2**N colours ({MIN_ITERATIONS}..{MAX_ITERATIONS}).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=list(OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Palette file format to write.",
    )
    parser.add_argument(
        "-o",
        "--out",
        type=Path,
        default=Path(DEFAULT_OUT_NAME),
        help="Output file stem; the format suffix is appended.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    return parser.parse_args(argv)


def clamp_iterations(requested: int) -> int:
    """Clamp to [MIN_ITERATIONS, MAX_ITERATIONS], warning when changed."""
    if requested > MAX_ITERATIONS:
        warn(f"switching to maximum number of iterations ({MAX_ITERATIONS})")
        return MAX_ITERATIONS
    if requested < MIN_ITERATIONS:
        warn(f"switching to minimum number of iterations ({MIN_ITERATIONS})")
        return MIN_ITERATIONS
    return requested


def run(
    src: Path,
    iterations: int,
    fmt: str,
    out_stem: Path,
    debug: bool = False,
) -> List[Color]:
    """
    Process a single image end-to-end:
      load -> palette -> print -> optional export.
    """
    print_banner(src.name)

    t0 = time.perf_counter()
    pixels, (width, height) = load_pixels(src)
    t1 = time.perf_counter()
    log(
        f"Finished reading {pixels.shape[0]:,} pixel values "
        f"in {format_seconds_compact(t1 - t0)}."
    )
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [("Loaded", f"{width}x{height}"), ("Iterations", iterations)]
            )
        )

    log("Generating palette...")
    palette = generate_palette(pixels, iterations)
    t2 = time.perf_counter()
    log(f"Finished generating palette in {format_seconds_compact(t2 - t1)}.")
    if debug and len(palette) < (1 << iterations):
        debug_log(f"stopped early: {len(palette)} of {1 << iterations} buckets")

    for color in palette:
        log(format_color(color))

    written = write_palette(OutputFormat(fmt), palette, out_stem, image_path=src)
    if written is not None:
        log(f"Wrote {written}")
    return palette


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = parse_cli_args(argv)
    iterations = clamp_iterations(args.iterations)

    print_config_line(
        "run",
        [("Iterations", iterations), ("Format", args.format), ("Out", str(args.out))],
        debug=args.debug,
    )

    src: Path = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2

    try:
        run(src, iterations, args.format, args.out, debug=args.debug)
    except ImageLoadError as e:
        error(str(e))
        return 2
    except PaletteError as e:
        error(f"failed generating palette: {e}")
        return 2
    except OSError as e:
        error(f"failed writing {args.format} output file: {e}")
        return 1
    return 0


__all__ = ["parse_cli_args", "clamp_iterations", "run", "main"]
