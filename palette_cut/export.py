# palette_cut/export.py
from __future__ import annotations

"""
Palette writers.

Exports:
  OutputFormat
  format_color(color) -> str
  write_html(image_path, palette, out_stem) -> Path
  write_json(palette, out_stem) -> Path
  write_csv(palette, out_stem) -> Path
  write_palette(fmt, palette, out_stem, image_path=None) -> Optional[Path]

Each writer appends its own suffix to out_stem ("palette" -> "palette.json").
"""

import html
import json
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from .constants import SWATCH_PX
from .core_types import Color


class OutputFormat(Enum):
    NONE = "none"
    HTML = "html"
    JSON = "json"
    CSV = "csv"


def format_color(color: Color) -> str:
    """Console form: '{ R: 1, G: 2, B: 3, A: 255 }'."""
    return str(color)


def _with_suffix(out_stem: Path, suffix: str) -> Path:
    out_stem = Path(out_stem)
    return out_stem.with_name(f"{out_stem.name}.{suffix}")


def write_html(image_path: Path, palette: Sequence[Color], out_stem: Path) -> Path:
    """Page with the source image centred above one swatch per colour."""
    out_path = _with_suffix(out_stem, "html")
    img_src = html.escape(Path(image_path).resolve().as_uri(), quote=True)
    swatches = "".join(
        f'<div title="{c.hex}" style="background-color:rgb({c.r},{c.g},{c.b});'
        f'height:{SWATCH_PX}px;width:{SWATCH_PX}px;"></div>'
        for c in palette
    )
    doc = (
        "<!DOCTYPE html>\n"
        "<html><head>"
        '<meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        "<title>Palette</title>"
        "<style>img{display:block;margin-left:auto;margin-right:auto;max-width:100%;}"
        ".palette{display:grid;grid-auto-flow:column;justify-content:center;"
        "align-items:center;gap:5px;width:100%;padding-top:10px;}</style>"
        "</head><body>"
        f'<img src="{img_src}" alt="Input image">'
        f'<div class="palette">{swatches}</div>'
        "</body></html>\n"
    )
    out_path.write_text(doc, encoding="utf-8")
    return out_path


def write_json(palette: Sequence[Color], out_stem: Path) -> Path:
    """{"palette": [{"r":..,"g":..,"b":..,"a":..}, ...]}"""
    out_path = _with_suffix(out_stem, "json")
    payload = {"palette": [{"r": c.r, "g": c.g, "b": c.b, "a": c.a} for c in palette]}
    with out_path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)
        fh.write("\n")
    return out_path


def write_csv(palette: Sequence[Color], out_stem: Path) -> Path:
    """Header 'R, G, B, A' then one row per colour."""
    out_path = _with_suffix(out_stem, "csv")
    lines = ["R, G, B, A"] + [f"{c.r}, {c.g}, {c.b}, {c.a}" for c in palette]
    out_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return out_path


def write_palette(
    fmt: OutputFormat | str,
    palette: Sequence[Color],
    out_stem: Path,
    image_path: Optional[Path] = None,
) -> Optional[Path]:
    """Dispatch on format. NONE writes nothing and returns None."""
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.NONE:
        return None
    if fmt is OutputFormat.HTML:
        if image_path is None:
            raise ValueError("html output needs the source image path")
        return write_html(image_path, palette, out_stem)
    if fmt is OutputFormat.JSON:
        return write_json(palette, out_stem)
    return write_csv(palette, out_stem)


__all__ = [
    "OutputFormat",
    "format_color",
    "write_html",
    "write_json",
    "write_csv",
    "write_palette",
]
