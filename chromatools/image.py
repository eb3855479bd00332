"""Row-oriented two-dimensional image of floating point values."""

from __future__ import annotations

from typing import Iterable, Iterator


class Image:
    """A growable image with a fixed number of columns.

    Rows are plain lists; changes made to a row returned by :meth:`row`
    change the image.
    """

    def __init__(self, columns: int, rows: int = 0) -> None:
        if columns <= 0:
            raise ValueError("columns must be positive")
        if rows < 0:
            raise ValueError("rows must not be negative")
        self._columns = columns
        self._rows: list[list[float]] = [[0.0] * columns for _ in range(rows)]

    @classmethod
    def from_values(cls, columns: int, values: Iterable[float]) -> "Image":
        """Build an image from flat row-major ``values``."""
        image = cls(columns)
        data = [float(v) for v in values]
        if len(data) % columns:
            raise ValueError("number of values must be a multiple of columns")
        image._rows = [data[start:start + columns] for start in range(0, len(data), columns)]
        return image

    @property
    def num_columns(self) -> int:
        return self._columns

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    def add_row(self, row: Iterable[float]) -> None:
        """Append a row; a short row is padded with zeros."""
        values = [float(v) for v in row]
        if len(values) > self._columns:
            raise ValueError(
                f"row has {len(values)} values, image has {self._columns} columns"
            )
        values.extend([0.0] * (self._columns - len(values)))
        self._rows.append(values)

    def row(self, i: int) -> list[float]:
        """Return row ``i``."""
        if not 0 <= i < len(self._rows):
            raise IndexError(f"row {i} out of range")
        return self._rows[i]

    def __getitem__(self, i: int) -> list[float]:
        return self.row(i)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[float]]:
        return iter(self._rows)