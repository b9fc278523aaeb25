import pygame
import pytest

from pixelworks.display import (
    ImageLoadError,
    Screen,
    display_image,
    load_image,
    save_image,
)
from pixelworks.surface import Surface


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    pygame.display.quit()


def _sample_surface():
    surface = Surface(4, 3)
    surface.put_pixel(0, 0, surface.map_rgb(255, 0, 0))
    surface.put_pixel(3, 2, surface.map_rgb(0, 255, 0))
    surface.put_pixel(1, 1, surface.map_rgb(12, 34, 56))
    return surface


@pytest.mark.parametrize("name", ["picture.png", "picture.bmp"])
def test_save_then_load_round_trip(tmp_path, name):
    surface = _sample_surface()
    path = tmp_path / name
    save_image(surface, path)
    assert load_image(path) == surface


def test_load_image_accepts_str_path(tmp_path):
    surface = _sample_surface()
    path = tmp_path / "picture.png"
    save_image(surface, path)
    loaded = load_image(str(path))
    assert (loaded.width, loaded.height) == (surface.width, surface.height)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ImageLoadError, match="can't load"):
        load_image(tmp_path / "missing.png")


def test_load_non_image_raises(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("not an image")
    with pytest.raises(ImageLoadError):
        load_image(path)


def test_display_image_matches_surface_size(headless):
    surface = _sample_surface()
    screen = display_image(surface)
    assert isinstance(screen, Screen)
    assert (screen.width, screen.height) == (surface.width, surface.height)
    screen.close()


def test_update_after_close_raises(headless):
    surface = _sample_surface()
    screen = display_image(surface)
    screen.close()
    assert screen.closed
    with pytest.raises(RuntimeError):
        screen.update(surface)


def test_wait_for_keypressed_returns_released_key(headless):
    screen = display_image(_sample_surface())
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    assert screen.wait_for_keypressed() == pygame.K_a
    screen.close()