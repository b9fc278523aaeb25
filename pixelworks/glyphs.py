"""Turning glyph images into the flat input vectors of the network."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Union

from .display import load_image
from .surface import Surface

PathLike = Union[str, "os.PathLike[str]"]

CANVAS = 40
DATA_LENGTH = 67

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _read_count(path: Path) -> int:
    """Read the integer at the start of the first line of a file (0 if none)."""
    with path.open("r") as stream:
        first = stream.readline()
    if not first:
        raise ValueError(f"Can't read {path}")
    match = _LEADING_INT.match(first)
    return int(match.group(1)) if match else 0


def img_to_mat(surface: Surface) -> list[float]:
    """Centre the glyph on a 40x40 canvas; dark pixels give 1.0, others 0.0."""
    if surface.width > CANVAS or surface.height > CANVAS:
        raise ValueError(
            f"glyph {surface.width}x{surface.height} larger than {CANVAS}x{CANVAS}"
        )
    cells = [0.0] * (CANVAS * CANVAS)
    offset = (CANVAS - surface.width) // 2 + ((CANVAS - surface.height) // 2) * CANVAS
    for y in range(surface.height):
        for x in range(surface.width):
            r, _, _ = surface.get_rgb(surface.get_pixel(x, y))
            cells[offset + CANVAS * y + x] = 1.0 if r == 0 else 0.0
    return cells


def generate_matrices(path: PathLike) -> list[list[float]]:
    """Load the 67 glyphs 0.bmp .. 66.bmp of a directory listed by its Len.txt."""
    root = Path(path)
    count = _read_count(root / "Len.txt")
    if count != DATA_LENGTH:
        raise ValueError(f"expected {DATA_LENGTH} samples in {root}, found {count}")
    return [img_to_mat(load_image(root / f"{index}.bmp")) for index in range(count)]