"""Bouncing-line and parabolic trajectories drawn pixel by pixel."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

import pygame

from .display import display_image
from .surface import Surface

Point = Tuple[int, int]

_BOUNCE_UNIT = 75
_PARABOLA_SIDE = 500
_BATCH = 25


@dataclass
class Bounce:
    """A vertical position moving by alpha each step, reflecting off the edges."""

    y: int
    alpha: float

    def advance(self, height: int) -> int:
        """Move one step inside a surface of the given height; return the new y."""
        self.y = int(self.y + self.alpha)
        if self.y >= height or self.y < 0:
            self.alpha = -self.alpha
            self.y = int(self.y + self.alpha)
        return self.y


def bounce_path(bounce: Bounce, width: int, height: int) -> Iterator[Point]:
    """Yield points sweeping right then left across the width, forever."""
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    while True:
        for x in range(width):
            yield x, bounce.advance(height)
        for x in range(width - 1, 0, -1):
            yield x, bounce.advance(height)


@dataclass
class Parabola:
    """The curve -0.005 * alpha * x^2 + beta * x + gamma."""

    alpha: float
    beta: float
    gamma: float

    def height_at(self, x: float) -> float:
        return -0.005 * self.alpha * x * x + self.beta * x + self.gamma

def parabola_path(parabola: Parabola, width: int, height: int) -> Iterator[Point]:
    """Yield (column, row) points of the curve until it falls below zero.

    Heights are measured from the bottom row of a surface of the given height.
    """
    for x in range(width):
        y = int(parabola.height_at(x))
        if y < 0:
            break
        yield x, height - 1 - y


def draw_path(surface: Surface, points: Iterable[Point]) -> int:
    """Paint the points white, skipping those outside; return how many were drawn."""
    white = surface.map_rgb(255, 255, 255)
    drawn = 0
    for x, y in points:
        if 0 <= x < surface.width and 0 <= y < surface.height:
            surface.put_pixel(x, y, white)
            drawn += 1
    return drawn


def _quit_requested() -> bool:
    return any(event.type == pygame.QUIT for event in pygame.event.get())


def _animate(
    surface: Surface, points: Iterable[Point], pause: float, final_pause: float
) -> None:
    with display_image(surface) as screen:
        for count, point in enumerate(points, 1):
            draw_path(surface, [point])
            if count % _BATCH == 0:
                screen.update(surface)
                if _quit_requested():
                    return
                time.sleep(pause)
        screen.update(surface)
        time.sleep(final_pause)


def _parse(values: Sequence[str], kinds: Sequence[type], name: str) -> Optional[list]:
    try:
        return [kind(value) for kind, value in zip(kinds, values)]
    except ValueError as exc:
        print(f"{name}: invalid number: {exc}", file=sys.stderr)
        return None


def main_bounce(argv: Optional[Sequence[str]] = None) -> int:
    """Draw a line bouncing between the top and bottom edges until the window closes."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("bounce: Usage: bounce [y] [alpha]", file=sys.stderr)
        return 1
    parsed = _parse(args, (int, float), "bounce")
    if parsed is None:
        return 1
    y, alpha = parsed
    surface = Surface(_BOUNCE_UNIT * 16, _BOUNCE_UNIT * 9)
    path = bounce_path(Bounce(y, alpha), surface.width, surface.height)
    _animate(surface, path, pause=0.0005 * _BATCH, final_pause=0.0)
    return 0


def main_parabola(argv: Optional[Sequence[str]] = None) -> int:
    """Draw the parabola given by alpha, beta and gamma."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("parabola: Usage: parabola [alpha] [beta] [gamma]", file=sys.stderr)
        return 1
    parsed = _parse(args, (float, float, float), "parabola")
    if parsed is None:
        return 1
    surface = Surface(_PARABOLA_SIDE * 3, _PARABOLA_SIDE)
    path = parabola_path(Parabola(*parsed), surface.width, surface.height)
    _animate(surface, path, pause=0.001 * _BATCH, final_pause=1.0)
    return 0