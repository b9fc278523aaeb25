"""Greyscale conversion and threshold binarisation of surfaces."""

from __future__ import annotations

from itertools import product
from typing import Sequence

from .surface import Surface

LEVELS = 256


def _pixels(surface: Surface):
    """Yield (x, y) for every pixel of the surface, row by row."""
    for y, x in product(range(surface.height), range(surface.width)):
        yield x, y


def to_grey(surface: Surface) -> None:
    """Replace every pixel by its weighted luminance, in place."""
    for x, y in _pixels(surface):
        r, g, b = surface.get_rgb(surface.get_pixel(x, y))
        average = int(0.3 * r + 0.59 * g + 0.11 * b)
        surface.put_pixel(x, y, surface.map_rgb(average, average, average))


def histogram(surface: Surface) -> list[int]:
    """Count the pixels of each grey level, the level being the channel mean."""
    counts = [0] * LEVELS
    for x, y in _pixels(surface):
        r, g, b = surface.get_rgb(surface.get_pixel(x, y))
        counts[(r + g + b) // 3] += 1
    return counts


def _spread(histo: Sequence[int], centre: float, stop: int) -> float:
    """Accumulate (k - |centre|)^2 * histo[k] for k below stop, in order."""
    total = 0.0
    for k in range(stop):
        total += (k - abs(centre)) ** 2 * histo[k]
    return total


def otsu(histo: Sequence[int], pixel_count: int) -> int:
    """Return the grey level whose split score is lowest (the first on ties)."""
    if len(histo) != LEVELS:
        raise ValueError(f"histogram must have {LEVELS} bins, got {len(histo)}")
    if pixel_count <= 0:
        raise ValueError(f"pixel count must be positive, got {pixel_count}")
    count = float(pixel_count)
    scores = []
    for level in range(LEVELS):
        first = 0.0
        if level > 0:
            weight = sum(histo[:level]) / count
            mean = sum(k * histo[k] for k in range(level)) / count
            first = weight * (_spread(histo, mean, level - 1) / count)
        weight = sum(histo[level:]) / count
        mean = sum(k * histo[k] for k in range(level, LEVELS)) / count
        second = weight * (_spread(histo, mean, LEVELS) / count)
        scores.append(first + second)
    return min(range(LEVELS), key=scores.__getitem__)


def binarise(surface: Surface, threshold: int) -> None:
    """Turn pixels whose red channel is at most threshold black, others white."""
    black = surface.map_rgb(0, 0, 0)
    white = surface.map_rgb(255, 255, 255)
    for x, y in _pixels(surface):
        r, _, _ = surface.get_rgb(surface.get_pixel(x, y))
        surface.put_pixel(x, y, black if r <= threshold else white)


def binary(surface: Surface) -> int:
    """Convert the surface to black and white in place; return the threshold.

    An empty surface is left as it is and gives threshold 0.
    """
    to_grey(surface)
    pixel_count = surface.width * surface.height
    if pixel_count == 0:
        return 0
    threshold = otsu(histogram(surface), pixel_count)
    binarise(surface, threshold)
    return threshold