"""Bubble-sorting the pixels of an image by their raw value, shown live."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence

from .display import ImageLoadError, display_image, load_image
from .surface import Surface

PassCallback = Callable[[int, int], None]


def _position(surface: Surface, index: int) -> tuple[int, int]:
    return index % surface.width, index // surface.width


def sort_pass(surface: Surface) -> bool:
    """Run one bubble pass over the pixels in row-major order.

    Each pixel is swapped with the next one (wrapping to the start of the
    following row) when the next is smaller. Returns whether anything moved.
    """
    changed = False
    total = surface.width * surface.height
    for index in range(total - 1):
        here = _position(surface, index)
        after = _position(surface, index + 1)
        current = surface.get_pixel(*here)
        following = surface.get_pixel(*after)
        if following < current:
            surface.put_pixel(*here, following)
            surface.put_pixel(*after, current)
            changed = True
    return changed


def sort_image(surface: Surface, on_pass: Optional[PassCallback] = None) -> int:
    """Repeat passes until nothing moves; return how many passes moved pixels.

    on_pass is called after each such pass with its index and the pixel count.
    """
    total = surface.width * surface.height
    passes = 0
    for index in range(total):
        if not sort_pass(surface):
            break
        passes += 1
        if on_pass is not None:
            on_pass(index, total)
    return passes


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load an image, then sort its pixels on screen until a key is pressed."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("sortimage: Usage: sortimage [image_name]", file=sys.stderr)
        return 1
    try:
        surface = load_image(args[0])
    except ImageLoadError as exc:
        print(f"sortimage: {exc}", file=sys.stderr)
        return 3

    with display_image(surface) as screen:

        def report(index: int, total: int) -> None:
            print(f"{total} of {index}")
            screen.update(surface)

        sort_image(surface, report)
        screen.update(surface)
        screen.wait_for_keypressed()
    return 0