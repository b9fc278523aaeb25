"""A small dense matrix of floats stored row by row."""

from __future__ import annotations

import random
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

Key = Union[int, Tuple[int, int]]


class Matrix:
    """A height x width matrix of floats, zero on creation.

    Entries are reached either by (row, column) or by a flat index into
    the row-major storage.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, height: int, width: int) -> None:
        if height < 0 or width < 0:
            raise ValueError(f"invalid matrix size {height}x{width}")
        self.height = height
        self.width = width
        self.values = [0.0] * (height * width)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("rows differ in length")
        matrix = cls(height, width)
        matrix.values = [float(v) for row in rows for v in row]
        return matrix

    @classmethod
    def column(cls, values: Iterable[float]) -> Matrix:
        """Build a one-column matrix from the given values."""
        data = [float(v) for v in values]
        matrix = cls(len(data), 1)
        matrix.values = data
        return matrix

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    def rows(self) -> list[list[float]]:
        """Return the entries as a list of rows."""
        return [
            self.values[row * self.width:(row + 1) * self.width]
            for row in range(self.height)
        ]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.rows()!r})"

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.values == other.values

    def _index(self, key: Key) -> int:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < self.height and 0 <= col < self.width):
                raise IndexError(f"({row}, {col}) outside {self.height}x{self.width}")
            return row * self.width + col
        if not 0 <= key < len(self.values):
            raise IndexError(f"index {key} outside matrix of {len(self.values)}")
        return key

    def __getitem__(self, key: Key) -> float:
        return self.values[self._index(key)]

    def __setitem__(self, key: Key, value: float) -> None:
        self.values[self._index(key)] = float(value)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError(f"cannot add {self.shape} and {other.shape}")
        result = Matrix(self.height, self.width)
        result.values = [a + b for a, b in zip(self.values, other.values)]
        return result

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.width != other.height:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        result = Matrix(self.height, other.width)
        columns = [
            other.values[col::other.width] if other.width else []
            for col in range(other.width)
        ]
        result.values = [
            sum(a * b for a, b in zip(row, column))
            for row in self.rows()
            for column in columns
        ]
        return result

    def randomise(self, rng: Optional[random.Random] = None) -> None:
        """Fill every entry with a uniform value in [-1, 1)."""
        source = rng if rng is not None else random
        self.values = [source.random() * 2 - 1 for _ in self.values]

    def transpose(self) -> Matrix:
        """Return a new width x height matrix with rows and columns swapped."""
        result = Matrix(self.width, self.height)
        result.values = [
            self.values[row * self.width + col]
            for col in range(self.width)
            for row in range(self.height)
        ]
        return result

    def format(self) -> str:
        """Render the matrix with six decimals per entry, one row per line."""
        return "".join(
            "".join(f"{value:f} " for value in row) + "\n" for row in self.rows()
        )