"""Cutting marked glyphs out of a segmented page and saving them to disk."""

from __future__ import annotations

import os
from itertools import product
from pathlib import Path
from typing import Union

from .display import save_image
from .surface import Surface

PathLike = Union[str, "os.PathLike[str]"]

# A run of red longer than this after a glyph ends a word.
_WORD_GAP = 8

_RESET_COLOURS = {(255, 0, 0), (0, 255, 0), (0, 0, 255)}


def _is_red(surface: Surface, x: int, y: int) -> bool:
    """True for a pixel with full red and no green; False outside the surface."""
    if not (0 <= x < surface.width and 0 <= y < surface.height):
        return False
    r, g, _ = surface.get_rgb(surface.get_pixel(x, y))
    return r == 255 and g == 0


def reset_color(surface: Surface) -> None:
    """Turn pure red, green and blue pixels white, in place."""
    white = surface.map_rgb(255, 255, 255)
    for y, x in product(range(surface.height), range(surface.width)):
        if surface.get_rgb(surface.get_pixel(x, y)) in _RESET_COLOURS:
            surface.put_pixel(x, y, white)


def cut(surface: Surface, x: int, y: int, width: int, height: int) -> Surface:
    """Copy a region into a new surface with the marking colours washed out."""
    region = surface.copy_region(x, y, max(width, 0), max(height, 0))
    reset_color(region)
    return region


def get_height(surface: Surface, x: int, y: int) -> int:
    """Count the rows below (x, y), itself included, before a red pixel.

    When no red pixel is met the bottom row is left out of the count.
    """
    row = y
    count = 0
    while True:
        red = _is_red(surface, x, row)
        row += 1
        count += 1
        if red or row >= surface.height:
            return count - 1


def get_width(surface: Surface, x: int, y: int) -> int:
    """Count the columns right of (x, y), itself included, before a red pixel.

    When no red pixel is met the last column is left out of the count.
    """
    col = x
    count = 0
    while True:
        red = _is_red(surface, col, y)
        col += 1
        count += 1
        if red or col >= surface.width:
            return count - 1


def trim(surface: Surface) -> Surface:
    """Cut a glyph down from its first dark row to just before its last one.

    Without any dark row after the first, the glyph keeps all but its last row.
    """
    dark_rows = [
        y
        for y in range(surface.height)
        if any(
            surface.get_rgb(surface.get_pixel(x, y))[0] == 0
            for x in range(surface.width)
        )
    ]
    begin = dark_rows[0] if dark_rows else 0
    end = dark_rows[-1] if dark_rows else 0
    if end == 0:
        end = surface.height - 1
    return cut(surface, 0, begin, surface.width, end - begin)


class LetterWriter:
    """Writes the glyphs of a segmented page as Line<n>/Word<m>/<k>.bmp files.

    Every directory level holds a Len.txt with the number of entries in it.
    """

    def __init__(self, root: PathLike = "Text") -> None:
        self.root = Path(root)
        self.max_height = 0
        self.max_width = 0

    def _line_dir(self, line: int) -> Path:
        return self.root / f"Line{line}"

    def _word_dir(self, line: int, word: int) -> Path:
        return self._line_dir(line) / f"Word{word}"

    def save_letter(self, surface: Surface) -> int:
        """Save every line of the page; return the number of lines."""
        self.root.mkdir(parents=True, exist_ok=True)
        lines = 0
        for y, x in product(range(surface.height), range(surface.width)):
            if not _is_red(surface, x, y):
                self._line_dir(lines).mkdir(parents=True, exist_ok=True)
                self.save_line(surface, x, y, lines)
                lines += 1
        (self.root / "Len.txt").write_text(str(lines))
        return lines

    def save_line(self, surface: Surface, x: int, y: int, line: int) -> int:
        """Save the words of the line starting at (x, y); return how many."""
        width = surface.width
        first = x
        words = 0
        col = x
        while col < width:
            while True:
                red = _is_red(surface, col, y)
                col += 1
                if red or col >= width:
                    break
            gap = 0
            while True:
                red = _is_red(surface, col, y)
                col += 1
                gap += 1
                if not red or col >= width:
                    break
            if gap > _WORD_GAP:
                self._word_dir(line, words).mkdir(parents=True, exist_ok=True)
                self.save_word(surface, first, col - gap + 1, y, line, words)
                first = col
                words += 1
            col += 1
        line_dir = self._line_dir(line)
        line_dir.mkdir(parents=True, exist_ok=True)
        (line_dir / "Len.txt").write_text(str(words))
        return words

    def save_word(
        self, surface: Surface, begin: int, end: int, y: int, line: int, word: int
    ) -> int:
        """Save every glyph met on row y from begin - 1 up to end; return how many."""
        chars = 0
        for x in range(begin - 1, end):
            if 0 <= x < surface.width and not _is_red(surface, x, y):
                self.save_char(surface, x, y, line, word, chars)
                chars += 1
        word_dir = self._word_dir(line, word)
        word_dir.mkdir(parents=True, exist_ok=True)
        (word_dir / "Len.txt").write_text(str(chars))
        return chars

    def save_char(
        self, surface: Surface, x: int, y: int, line: int, word: int, char: int
    ) -> Path:
        """Cut the glyph at (x, y), save it and paint its box red; return the file."""
        height = get_height(surface, x, y)
        width = get_width(surface, x, y)
        glyph = trim(cut(surface, x, y, width, height))

        self.max_height = max(self.max_height, glyph.height)
        self.max_width = max(self.max_width, glyph.width)
        print(f"h = {self.max_height} and w = {self.max_width}")

        red = surface.map_rgb(255, 0, 0)
        for row, col in product(range(y, y + height), range(x, x + width)):
            surface.put_pixel(col, row, red)

        word_dir = self._word_dir(line, word)
        word_dir.mkdir(parents=True, exist_ok=True)
        path = word_dir / f"{char}.bmp"
        save_image(glyph, path)
        return path