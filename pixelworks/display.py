"""Loading, saving and showing surfaces on screen."""

from __future__ import annotations

import os
from typing import Union

import pygame
from PIL import Image

from .surface import Surface

PathLike = Union[str, "os.PathLike[str]"]


class ImageLoadError(OSError):
    """Raised when an image file cannot be read."""


def init_display() -> None:
    """Initialise the video subsystem."""
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise RuntimeError(f"Could not initialize display: {exc}.") from exc


def load_image(path: PathLike) -> Surface:
    """Read an image file of any format Pillow knows into a surface."""
    try:
        with Image.open(path) as image:
            return Surface.from_image(image)
    except OSError as exc:
        raise ImageLoadError(f"can't load {os.fspath(path)}: {exc}") from exc


def save_image(surface: Surface, path: PathLike) -> None:
    """Write a surface to a file, the format following the file extension."""
    surface.to_image().save(path)


class Screen:
    """A window showing the content of a surface."""

    def __init__(self, window: pygame.Surface) -> None:
        self._window = window
        self._closed = False

    @property
    def width(self) -> int:
        return self._window.get_width()

    @property
    def height(self) -> int:
        return self._window.get_height()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> Screen:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def update(self, surface: Surface) -> None:
        """Copy the surface onto the window and refresh it."""
        if self._closed:
            raise RuntimeError("screen is closed")
        image = surface.to_image()
        frame = pygame.image.frombuffer(image.tobytes(), image.size, "RGB")
        self._window.blit(frame, (0, 0))
        pygame.display.update(pygame.Rect(0, 0, surface.width, surface.height))

    def wait_for_keypressed(self) -> int:
        """Block until a key is pressed and released; return its key code."""
        if self._closed:
            raise RuntimeError("screen is closed")
        while pygame.event.wait().type != pygame.KEYDOWN:
            pass
        while True:
            event = pygame.event.wait()
            if event.type == pygame.KEYUP:
                return event.key

    def close(self) -> None:
        """Close the window."""
        if not self._closed:
            self._closed = True
            pygame.display.quit()


def display_image(surface: Surface) -> Screen:
    """Open a window the size of the surface and show the surface in it."""
    init_display()
    try:
        window = pygame.display.set_mode((surface.width, surface.height))
    except pygame.error as exc:
        raise RuntimeError(
            f"Couldn't set {surface.width}x{surface.height} video mode: {exc}"
        ) from exc
    screen = Screen(window)
    screen.update(surface)
    return screen