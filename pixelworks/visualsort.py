"""Sorting a shuffled array while drawing it as bars."""

from __future__ import annotations

import random
import sys
from typing import Callable, List, MutableSequence, Optional, Sequence

from .display import display_image
from .surface import Surface

SwapCallback = Callable[[int, int], None]


def generate_tab(length: int, rng: Optional[random.Random] = None) -> list[int]:
    """Return a random permutation of 0 .. length - 1."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    source = rng if rng is not None else random.Random()
    values = list(range(length))
    source.shuffle(values)
    return values


def _swap(
    values: MutableSequence[int], i: int, j: int, on_swap: Optional[SwapCallback]
) -> None:
    values[i], values[j] = values[j], values[i]
    if on_swap is not None:
        on_swap(i, j)


def bubble_sort(
    values: MutableSequence[int], on_swap: Optional[SwapCallback] = None
) -> int:
    """Sort in place by adjacent swaps; return how many swaps were made."""
    swaps = 0
    length = len(values)
    for i in range(length):
        for j in range(length - i - 1):
            if values[j] > values[j + 1]:
                _swap(values, j, j + 1, on_swap)
                swaps += 1
    return swaps


def partition(
    values: MutableSequence[int],
    low: int,
    high: int,
    on_swap: Optional[SwapCallback] = None,
) -> int:
    """Lomuto partition of values[low..high] around values[high]; return its place."""
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            boundary += 1
            _swap(values, boundary, j, on_swap)
    _swap(values, boundary + 1, high, on_swap)
    return boundary + 1


def quick_sort(
    values: MutableSequence[int],
    low: int = 0,
    high: Optional[int] = None,
    on_swap: Optional[SwapCallback] = None,
) -> None:
    """Sort values[low..high] in place, lower part first, as a recursive quicksort."""
    if high is None:
        high = len(values) - 1
    pending: List[tuple[int, int]] = [(low, high)]
    while pending:
        start, stop = pending.pop()
        if start < stop:
            pivot = partition(values, start, stop, on_swap)
            pending.append((pivot + 1, stop))
            pending.append((start, pivot - 1))


def draw_column(surface: Surface, index: int, value: int) -> None:
    """Paint column index as a white bar of height value on black."""
    white = surface.map_rgb(255, 255, 255)
    black = surface.map_rgb(0, 0, 0)
    height = surface.height
    for row in range(height):
        surface.put_pixel(index, row, black if height - row > value else white)


def draw_bars(surface: Surface, values: Sequence[int]) -> None:
    """Paint one bar per column of the surface."""
    for index, value in zip(range(surface.width), values):
        draw_column(surface, index, value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Shuffle an array of the given size and quicksort it on screen."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("visualsort: Usage : visualsort [size of array]", file=sys.stderr)
        return 1
    try:
        length = int(args[0])
    except ValueError:
        length = 0
    if length <= 0:
        print("visualsort: Size is invalid", file=sys.stderr)
        return 1

    values = generate_tab(length)
    surface = Surface(length, length)
    draw_bars(surface, values)
    with display_image(surface) as screen:

        def show(i: int, j: int) -> None:
            draw_column(surface, i, values[i])
            draw_column(surface, j, values[j])
            screen.update(surface)

        quick_sort(values, 0, length - 1, show)
    return 0