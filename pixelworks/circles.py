"""Circles drawn recursively inside circles."""

from __future__ import annotations

import math
import re
import sys
from itertools import count
from typing import Callable, Optional, Sequence

from .display import Screen, display_image
from .surface import Surface

DrawCallback = Callable[[], None]

_SHRINK_NUM = 425
_SHRINK_DEN = 1024
_REFRESH_EVERY = 2048
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _plot(surface: Surface, x: int, y: int, pixel: int) -> None:
    if 0 <= x < surface.width and 0 <= y < surface.height:
        surface.put_pixel(x, y, pixel)


def _shrink(radius: int) -> int:
    return (radius * _SHRINK_NUM) // _SHRINK_DEN


def circle(
    surface: Surface,
    x: int,
    y: int,
    radius: int,
    on_draw: Optional[DrawCallback] = None,
) -> None:
    """Draw a white circle, then nine smaller ones inside it.

    x is the row of the centre and y its column; pixels outside the surface
    are skipped. on_draw is called once each circle is complete.
    """
    if radius < 1:
        return
    white = surface.map_rgb(255, 255, 255)
    for j in range(y - radius, y + radius):
        offset = abs(radius - (j - (y - radius)))
        distance = int(math.sqrt(radius**2 - offset**2))
        _plot(surface, j, x + distance, white)
        _plot(surface, j, x - distance, white)

    size = _shrink(radius)
    inner = _shrink(size)
    circle(surface, x, y + radius - size, size, on_draw)
    circle(surface, x, y - radius + size, size, on_draw)
    circle(surface, x + radius - size, y, size, on_draw)
    circle(surface, x - radius + size, y, size, on_draw)

    circle(surface, x, y, inner, on_draw)
    circle(surface, x - radius + size, y - radius + size, inner, on_draw)
    circle(surface, x + radius - size, y + radius - size, inner, on_draw)
    circle(surface, x - radius + size, y + radius - size, inner, on_draw)
    circle(surface, x + radius - size, y - radius + size, inner, on_draw)

    if on_draw is not None:
        on_draw()


def _throttled(screen: Screen, surface: Surface, every: int) -> DrawCallback:
    calls = count(1)

    def refresh() -> None:
        if next(calls) % every == 0:
            screen.update(surface)

    return refresh


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Draw the recursive circles of the given radius and wait for a key."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("circles: Usage: circles [size]", file=sys.stderr)
        return 1
    radius = _atoi(args[0])
    if radius <= 0:
        print("circles: Invalid size", file=sys.stderr)
        return 1

    surface = Surface(radius * 2 + 20, radius * 2 + 10)
    with display_image(surface) as screen:
        circle(
            surface,
            surface.height // 2,
            surface.width // 2,
            radius,
            _throttled(screen, surface, _REFRESH_EVERY),
        )
        screen.update(surface)
        screen.wait_for_keypressed()
    return 0