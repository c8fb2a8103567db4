"""Dense 2-D matrix stored as a single flat row-major numpy buffer.

Cell (r, c) lives at flat index r * cols + c. The buffer is allocated once,
zero-filled with the dtype's default value, and never resized.
"""

from typing import Any

import numpy as np


class IndexOutOfRange(IndexError):
    """Raised when a row or column index falls outside the matrix bounds."""


class DenseMatrix:
    """Fixed-size matrix over a numpy dtype with bounds-checked cell access.

    Uses a 1-D storage array of length rows * cols rather than a 2-D array
    so the row-major index arithmetic is explicit and every access goes
    through the same bounds check.
    """

    def __init__(self, rows: int, cols: int, dtype: Any = bool) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(
                f"Matrix dimensions must be non-negative, got ({rows}, {cols})"
            )
        self.rows = rows
        self.cols = cols
        self.storage = np.zeros(rows * cols, dtype=dtype)

    @property
    def dtype(self) -> np.dtype:
        return self.storage.dtype

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def _flat_index(self, row: int, col: int) -> int:
        """Map (row, col) to the flat storage index, checking both bounds.

        Negative indices are rejected rather than wrapped around the way
        numpy would treat them.

        Raises:
            IndexOutOfRange: If row is not in [0, rows) or col not in [0, cols).
        """
        if not 0 <= row < self.rows:
            raise IndexOutOfRange(
                f"Row index {row} out of range for matrix with {self.rows} rows"
            )
        if not 0 <= col < self.cols:
            raise IndexOutOfRange(
                f"Column index {col} out of range for matrix with "
                f"{self.cols} columns"
            )
        return row * self.cols + col

    def set(self, row: int, col: int, value: Any) -> None:
        """Write value at (row, col)."""
        self.storage[self._flat_index(row, col)] = value

    def get(self, row: int, col: int) -> Any:
        """Return a copy of the cell at (row, col) as a Python scalar."""
        return self.storage[self._flat_index(row, col)].item()

    def to_array(self) -> np.ndarray:
        """Return a (rows, cols) copy of the matrix contents."""
        return self.storage.reshape(self.rows, self.cols).copy()

    def render(self) -> str:
        """Render the matrix as text, one `|a b c|` line per row.

        Boolean cells render as true/false; everything else uses str().
        Each row, including the last, ends with a newline.
        """
        lines = []
        for row in range(self.rows):
            cells = " ".join(
                _format_cell(self.get(row, col)) for col in range(self.cols)
            )
            lines.append(f"|{cells}|\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"DenseMatrix(rows={self.rows}, cols={self.cols}, dtype={self.dtype})"


def _format_cell(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
