"""A cellular automaton in the style of Conway's Game of Life."""

from __future__ import annotations

import sys
import time
from itertools import product
from typing import List, Optional, Sequence

from .display import display_image
from .surface import Surface

_OFFSETS = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)]


class Board:
    """A height x width grid of cells, all dead at first.

    A live cell survives only with exactly two live neighbours; a dead cell
    comes alive with exactly three. Cells beyond the edges count as dead.
    """

    def __init__(self, height: int, width: int) -> None:
        if height < 0 or width < 0:
            raise ValueError(f"invalid board size {height}x{width}")
        self.height = height
        self.width = width
        self.cells: List[List[bool]] = [[False] * width for _ in range(height)]

    def __repr__(self) -> str:
        return f"Board(height={self.height}, width={self.width})"

    def is_alive(self, i: int, j: int) -> bool:
        """Whether cell (i, j) lives; False outside the board."""
        return 0 <= i < self.height and 0 <= j < self.width and bool(self.cells[i][j])

    def alive(self, i: int, j: int) -> bool:
        """Whether cell (i, j) lives in the next generation."""
        neighbours = sum(self.is_alive(i + di, j + dj) for di, dj in _OFFSETS)
        if self.cells[i][j]:
            return neighbours == 2
        return neighbours == 3

    def step(self) -> None:
        """Advance every cell by one generation."""
        self.cells = [
            [self.alive(i, j) for j in range(self.width)] for i in range(self.height)
        ]

    def draw(self, surface: Surface, size: int) -> None:
        """Paint each cell as a size x size square, black when alive.

        Row i of the board maps to column i * size of the surface.
        """
        black = surface.map_rgb(0, 0, 0)
        white = surface.map_rgb(255, 255, 255)
        for i, row in enumerate(self.cells):
            for j, cell in enumerate(row):
                colour = black if cell else white
                for k, w in product(range(size), range(size)):
                    surface.put_pixel(i * size + k, j * size + w, colour)


def _draw_grid(surface: Surface, spacing: int) -> None:
    black = surface.map_rgb(0, 0, 0)
    for x in range(0, surface.width, spacing):
        for y in range(surface.height):
            surface.put_pixel(x, y, black)
    for y in range(0, surface.height, spacing):
        for x in range(surface.width):
            surface.put_pixel(x, y, black)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run ten generations of a small pattern on screen."""
    del argv
    size = 100
    board = Board(10, 10)
    for j in range(5, 8):
        board.cells[3][j] = True
    for j in range(4, 8):
        board.cells[4][j] = True

    surface = Surface(board.height * size, board.width * size)
    with display_image(surface) as screen:
        for _ in range(10):
            board.step()
            board.draw(surface, size)
            _draw_grid(surface, size)
            screen.update(surface)
            time.sleep(0.5)
            print("update")
            sys.stdout.flush()
    return 0