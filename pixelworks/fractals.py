"""Recursive square fractals: a cross-shaped snowflake and a carpet."""

from __future__ import annotations

from itertools import count, product
from typing import Callable, Optional, Sequence

from .display import Screen, display_image
from .surface import Surface

StepCallback = Callable[[], None]

_SIDE = 1000
_DEPTH = 5
_REFRESH_EVERY = 512


def print_square(surface: Surface, x: int, y: int, size: int) -> None:
    """Paint a white size x size square; x counts rows and y counts columns."""
    white = surface.map_rgb(255, 255, 255)
    for i, j in product(range(size), range(size)):
        surface.put_pixel(y + j, x + i, white)


def flocon(
    surface: Surface,
    step: int,
    x: int,
    y: int,
    length: int,
    on_step: Optional[StepCallback] = None,
) -> None:
    """Draw the cross of four arms, then recurse into the corners and centre."""
    if on_step is not None:
        on_step()
    if step <= 0:
        return
    size = length // 3
    print_square(surface, x + size, y, size + 1)
    print_square(surface, x, y + size, size + 1)
    print_square(surface, x + size, y + size * 2, size + 1)
    print_square(surface, x + size * 2, y + size, size + 1)

    for sx, sy in (
        (x, y),
        (x + 2 * size, y),
        (x + size, y + size),
        (x, y + size * 2),
        (x + size * 2, y + size * 2),
    ):
        flocon(surface, step - 1, sx, sy, size, on_step)


def sponge(
    surface: Surface,
    step: int,
    x: int,
    y: int,
    length: int,
    on_step: Optional[StepCallback] = None,
) -> None:
    """Whiten the centre third, then recurse into the eight surrounding squares."""
    if on_step is not None:
        on_step()
    if step <= 0:
        return
    size = length // 3
    print_square(surface, x + size, y + size, size)
    for dx, dy in ((0, 0), (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)):
        sponge(surface, step - 1, x + dx * size, y + dy * size, size, on_step)


def _throttled(screen: Screen, surface: Surface, every: int) -> StepCallback:
    calls = count(1)

    def refresh() -> None:
        if next(calls) % every == 0:
            screen.update(surface)

    return refresh


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Draw a five-level carpet and wait for a key."""
    del argv
    surface = Surface(_SIDE, _SIDE)
    with display_image(surface) as screen:
        sponge(surface, _DEPTH, 0, 0, _SIDE, _throttled(screen, surface, _REFRESH_EVERY))
        screen.update(surface)
        screen.wait_for_keypressed()
    return 0