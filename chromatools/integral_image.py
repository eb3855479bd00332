"""Summed-area table over a sliding window of the most recent rows."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable


class RollingIntegralImage:
    """Integral image that keeps only the last rows it was given.

    Rows are appended with :meth:`add_row`; :meth:`area` returns the sum of
    the rectangle of rows ``r1 <= r < r2`` and columns ``c1 <= c < c2``, as
    long as those rows are still held.
    """

    def __init__(self, max_rows: int) -> None:
        if max_rows < 0:
            raise ValueError("max_rows must not be negative")
        self._max_rows = max_rows + 1
        self._num_columns = 0
        self._num_rows = 0
        self._data: list[list[float]] = []

    @classmethod
    def from_data(cls, num_columns: int, data: Iterable[float]) -> "RollingIntegralImage":
        """Build an image from flat row-major ``data`` holding all its rows."""
        if num_columns <= 0:
            raise ValueError("num_columns must be positive")
        values = list(data)
        if len(values) % num_columns:
            raise ValueError("data length must be a multiple of num_columns")
        image = cls(0)
        image._max_rows = len(values) // num_columns
        for start in range(0, len(values), num_columns):
            image.add_row(values[start:start + num_columns])
        return image

    @property
    def num_columns(self) -> int:
        return self._num_columns

    @property
    def num_rows(self) -> int:
        return self._num_rows

    def reset(self) -> None:
        """Forget all rows and the column count."""
        self._data = []
        self._num_rows = 0
        self._num_columns = 0

    def _row(self, index: int) -> list[float]:
        return self._data[index % self._max_rows]

    def area(self, r1: int, c1: int, r2: int, c2: int) -> float:
        """Return the sum over rows ``[r1, r2)`` and columns ``[c1, c2)``."""
        if min(r1, c1, r2, c2) < 0:
            raise ValueError("coordinates must not be negative")
        if r1 > self._num_rows or r2 > self._num_rows:
            raise ValueError("row index out of range")
        if self._num_rows > self._max_rows:
            oldest = self._num_rows - self._max_rows
            if r1 <= oldest or r2 <= oldest:
                raise ValueError("row is no longer held")
        if c1 > self._num_columns or c2 > self._num_columns:
            raise ValueError("column index out of range")

        if r1 == r2 or c1 == c2:
            return 0.0
        if r2 < r1 or c2 < c1:
            raise ValueError("rectangle corners are in the wrong order")

        bottom = self._row(r2 - 1)
        if r1 == 0:
            if c1 == 0:
                return bottom[c2 - 1]
            return bottom[c2 - 1] - bottom[c1 - 1]
        top = self._row(r1 - 1)
        if c1 == 0:
            return bottom[c2 - 1] - top[c2 - 1]
        return bottom[c2 - 1] - top[c2 - 1] - bottom[c1 - 1] + top[c1 - 1]

    def add_row(self, row: Iterable[float]) -> None:
        """Append a row; all rows must have the same length."""
        values = [float(v) for v in row]
        if self._num_columns == 0:
            self._num_columns = len(values)
            self._data = [[0.0] * self._num_columns for _ in range(self._max_rows)]
        if len(values) != self._num_columns:
            raise ValueError(
                f"row has {len(values)} columns, expected {self._num_columns}"
            )
        if self._max_rows == 0:
            raise ValueError("image has no room for rows")

        current = list(accumulate(values))
        if self._num_rows > 0:
            previous = self._row(self._num_rows - 1)
            current = [a + b for a, b in zip(previous, current)]
        self._data[self._num_rows % self._max_rows] = current
        self._num_rows += 1