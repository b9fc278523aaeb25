"""Marking in red the blank rows and gaps that separate lines and glyphs."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from .binarize import binary
from .surface import Surface

RGB = Tuple[int, int, int]


def _colour(surface: Surface, x: int, y: int) -> Optional[RGB]:
    """The (r, g, b) of a pixel, or None below or above the surface."""
    if 0 <= y < surface.height:
        return surface.get_rgb(surface.get_pixel(x, y))
    return None


def _is_red(colour: Optional[RGB]) -> bool:
    return colour is not None and colour[0] == 255 and colour[1] == 0


def _is_white(colour: Optional[RGB]) -> bool:
    return colour is not None and colour[0] == 255 and colour[1] == 255


def _not_red(colour: Optional[RGB]) -> bool:
    return not _is_red(colour)


def _run(
    surface: Surface, x: int, start: int, keep_going: Callable[[Optional[RGB]], bool]
) -> tuple[Optional[RGB], int]:
    """Read down a column from start while keep_going holds.

    Returns the last colour read and the row after it.
    """
    y = start
    while True:
        colour = _colour(surface, x, y)
        y += 1
        if not (keep_going(colour) and y < surface.height):
            return colour, y


def print_horizontal(surface: Surface, index: int) -> None:
    """Paint row index red across the whole surface."""
    red = surface.map_rgb(255, 0, 0)
    for x in range(surface.width):
        surface.put_pixel(x, index, red)


def horizontal_cutting(surface: Surface) -> None:
    """Paint red every row that holds no pixel with a zero red channel."""
    for y in range(surface.height):
        if all(
            surface.get_rgb(surface.get_pixel(x, y))[0] != 0
            for x in range(surface.width)
        ):
            print_horizontal(surface, y)


def print_vertical(surface: Surface, column: int, top: int, bottom: int) -> None:
    """Paint column red from row top to row bottom inclusive, clipped to the surface."""
    red = surface.map_rgb(255, 0, 0)
    for y in range(max(top, 0), min(bottom, surface.height - 1) + 1):
        surface.put_pixel(column, y, red)


def vertical_cutting(surface: Surface) -> None:
    """Paint red the column stretches that run blank between red rows."""
    for x in range(surface.width):
        y = 0
        while y < surface.height:
            _, y = _run(surface, x, y, _is_red)
            colour, end = _run(surface, x, y, _is_white)
            if _is_red(colour):
                print_vertical(surface, x, y - 1, end)
            else:
                _, y = _run(surface, x, y, _not_red)
            y += 1


def mark_regions(surface: Surface) -> int:
    """Binarise the surface and mark line and glyph gaps; return the threshold."""
    threshold = binary(surface)
    horizontal_cutting(surface)
    vertical_cutting(surface)
    return threshold