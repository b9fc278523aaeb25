from itertools import product

from pixelworks.display import load_image
from pixelworks.letters import (
    LetterWriter,
    cut,
    get_height,
    get_width,
    reset_color,
    trim,
)
from pixelworks.surface import Surface


def fill(surface, x, y, width, height, rgb):
    pixel = surface.map_rgb(*rgb)
    for row, col in product(range(y, y + height), range(x, x + width)):
        surface.put_pixel(col, row, pixel)


def red_surface(width, height):
    surface = Surface(width, height)
    fill(surface, 0, 0, width, height, (255, 0, 0))
    return surface


def pixels(surface):
    return [
        surface.get_rgb(surface.get_pixel(x, y))
        for y in range(surface.height)
        for x in range(surface.width)
    ]


def test_reset_color_whitens_pure_primaries_only():
    surface = Surface(4, 1)
    for x, rgb in enumerate([(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 0, 1)]):
        surface.put_pixel(x, 0, surface.map_rgb(*rgb))
    reset_color(surface)
    assert pixels(surface) == [
        (255, 255, 255),
        (255, 255, 255),
        (255, 255, 255),
        (255, 0, 1),
    ]


def test_cut_copies_region_and_leaves_source_alone():
    surface = Surface(6, 6)
    fill(surface, 2, 2, 2, 2, (255, 0, 0))
    before = pixels(surface)
    region = cut(surface, 1, 1, 3, 3)
    assert (region.width, region.height) == (3, 3)
    assert region.get_rgb(region.get_pixel(1, 1)) == (255, 255, 255)
    assert region.get_rgb(region.get_pixel(0, 0)) == (0, 0, 0)
    assert pixels(surface) == before


def test_get_height_and_width_stop_at_red():
    surface = red_surface(10, 10)
    fill(surface, 3, 2, 1, 4, (0, 0, 0))
    assert get_height(surface, 3, 2) == 4
    assert get_width(surface, 3, 2) == 1


def test_get_width_counts_glyph_columns():
    surface = red_surface(10, 10)
    fill(surface, 2, 5, 5, 1, (0, 0, 0))
    assert get_width(surface, 2, 5) == 5


def test_trim_drops_blank_rows_above():
    surface = Surface(4, 6)
    fill(surface, 0, 0, 4, 6, (255, 255, 255))
    fill(surface, 0, 1, 4, 3, (0, 0, 0))
    trimmed = trim(surface)
    assert trimmed.width == surface.width
    assert 0 < trimmed.height < surface.height
    assert all(rgb == (0, 0, 0) for rgb in pixels(trimmed))


def test_save_letter_single_glyph(tmp_path):
    surface = red_surface(40, 15)
    fill(surface, 12, 5, 3, 4, (0, 0, 0))
    root = tmp_path / "Text"
    writer = LetterWriter(root)
    assert writer.save_letter(surface) == 1
    assert (root / "Len.txt").read_text() == "1"
    assert (root / "Line0" / "Len.txt").read_text() == "1"
    assert (root / "Line0" / "Word0" / "Len.txt").read_text() == "1"
    glyph = load_image(root / "Line0" / "Word0" / "0.bmp")
    assert glyph.width == 3
    assert all(rgb == (0, 0, 0) for rgb in pixels(glyph))
    assert writer.max_width == glyph.width
    assert writer.max_height == glyph.height
    assert all(rgb == (255, 0, 0) for rgb in pixels(surface))


def test_save_letter_splits_words_on_wide_gap(tmp_path):
    surface = red_surface(40, 15)
    fill(surface, 2, 5, 3, 4, (0, 0, 0))
    fill(surface, 20, 5, 3, 4, (0, 0, 0))
    root = tmp_path / "Text"
    LetterWriter(root).save_letter(surface)
    assert (root / "Line0" / "Len.txt").read_text() == "2"
    for word in range(2):
        word_dir = root / "Line0" / f"Word{word}"
        assert (word_dir / "Len.txt").read_text() == "1"
        assert (word_dir / "0.bmp").is_file()


def test_save_letter_keeps_narrow_gap_in_one_word(tmp_path):
    surface = red_surface(40, 15)
    fill(surface, 2, 5, 3, 4, (0, 0, 0))
    fill(surface, 10, 5, 3, 4, (0, 0, 0))
    root = tmp_path / "Text"
    LetterWriter(root).save_letter(surface)
    assert (root / "Line0" / "Len.txt").read_text() == "1"
    word_dir = root / "Line0" / "Word0"
    assert (word_dir / "Len.txt").read_text() == "2"
    assert sorted(p.name for p in word_dir.glob("*.bmp")) == ["0.bmp", "1.bmp"]


def test_save_letter_counts_lines(tmp_path):
    surface = red_surface(40, 15)
    fill(surface, 12, 2, 3, 4, (0, 0, 0))
    fill(surface, 12, 9, 3, 4, (0, 0, 0))
    root = tmp_path / "Text"
    assert LetterWriter(root).save_letter(surface) == 2
    assert (root / "Len.txt").read_text() == "2"
    for line in range(2):
        assert (root / f"Line{line}" / "Len.txt").read_text() == "1"
        assert (root / f"Line{line}" / "Word0" / "0.bmp").is_file()


def test_save_letter_on_blank_page_writes_zero(tmp_path):
    surface = red_surface(20, 5)
    root = tmp_path / "Text"
    assert LetterWriter(root).save_letter(surface) == 0
    assert (root / "Len.txt").read_text() == "0"