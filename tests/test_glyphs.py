import pytest

from pixelworks.display import save_image
from pixelworks.glyphs import CANVAS, DATA_LENGTH, generate_matrices, img_to_mat
from pixelworks.surface import Surface


def white(width, height):
    surface = Surface(width, height)
    pixel = surface.map_rgb(255, 255, 255)
    for y in range(height):
        for x in range(width):
            surface.put_pixel(x, y, pixel)
    return surface


def test_full_canvas_black_gives_all_ones():
    cells = img_to_mat(Surface(CANVAS, CANVAS))
    assert len(cells) == CANVAS * CANVAS
    assert all(value == 1.0 for value in cells)


def test_full_canvas_single_dark_pixel_keeps_its_place():
    surface = white(CANVAS, CANVAS)
    surface.put_pixel(3, 7, surface.map_rgb(0, 0, 0))
    cells = img_to_mat(surface)
    assert sum(cells) == 1.0
    assert cells[7 * CANVAS + 3] == 1.0


@pytest.mark.parametrize("width,height", [(2, 2), (4, 6), (10, 20)])
def test_small_glyph_is_centred(width, height):
    cells = img_to_mat(Surface(width, height))
    assert sum(cells) == width * height
    ones = [i for i, value in enumerate(cells) if value == 1.0]
    rows = {i // CANVAS for i in ones}
    cols = {i % CANVAS for i in ones}
    assert min(cols) == CANVAS - 1 - max(cols)
    assert min(rows) == CANVAS - 1 - max(rows)


def test_red_channel_decides():
    surface = Surface(1, 1)
    surface.put_pixel(0, 0, surface.map_rgb(0, 255, 255))
    assert sum(img_to_mat(surface)) == 1.0
    surface.put_pixel(0, 0, surface.map_rgb(1, 0, 0))
    assert sum(img_to_mat(surface)) == 0.0


def test_too_large_glyph_rejected():
    with pytest.raises(ValueError):
        img_to_mat(Surface(CANVAS + 1, 1))


def test_generate_matrices_reads_all_samples(tmp_path):
    samples = []
    for index in range(DATA_LENGTH):
        surface = white(3, 2)
        surface.put_pixel(index % 3, (index // 3) % 2, surface.map_rgb(0, 0, 0))
        save_image(surface, tmp_path / f"{index}.bmp")
        samples.append(img_to_mat(surface))
    (tmp_path / "Len.txt").write_text(f"{DATA_LENGTH}\n")
    data = generate_matrices(tmp_path)
    assert len(data) == DATA_LENGTH
    assert data == samples


def test_generate_matrices_wrong_count(tmp_path):
    (tmp_path / "Len.txt").write_text("3\n")
    with pytest.raises(ValueError):
        generate_matrices(tmp_path)


def test_generate_matrices_empty_length_file(tmp_path):
    (tmp_path / "Len.txt").write_text("")
    with pytest.raises(ValueError):
        generate_matrices(tmp_path)


def test_generate_matrices_missing_directory(tmp_path):
    with pytest.raises(OSError):
        generate_matrices(tmp_path / "absent")