import numpy as np


class Matrix:
    """
    Dense float matrix that only grows.

    Rows and columns are appended, never removed or reordered; pivoting
    rewrites values in place through the row operations below.
    """

    def __init__(self) -> None:
        self._values = np.zeros((0, 0), dtype=float)

    @property
    def num_rows(self) -> int:
        return self._values.shape[0]

    @property
    def num_cols(self) -> int:
        return self._values.shape[1]

    def add_row(self) -> int:
        """Append a zero row and return its index."""
        self._values = np.vstack([self._values, np.zeros((1, self.num_cols))])
        return self.num_rows - 1

    def add_column(self) -> int:
        """Append a zero column and return its index."""
        self._values = np.hstack([self._values, np.zeros((self.num_rows, 1))])
        return self.num_cols - 1

    def get(self, row: int, col: int) -> float:
        self._check(row, col)
        return float(self._values[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check(row, col)
        self._values[row, col] = value

    def row(self, row: int) -> np.ndarray:
        self._check_row(row)
        return self._values[row, :].copy()

    def divide_row(self, row: int, divisor: float) -> None:
        self._check_row(row)
        self._values[row, :] /= divisor

    def subtract_row(self, target: int, source: int, factor: float) -> None:
        """target -= factor * source"""
        self._check_row(target)
        self._check_row(source)
        self._values[target, :] -= factor * self._values[source, :]

    def subtract_values(self, target: int, values: np.ndarray, factor: float) -> None:
        """target -= factor * values, for a row taken from another matrix of equal width."""
        self._check_row(target)
        if len(values) != self.num_cols:
            raise IndexError(f"Expected {self.num_cols} values, got {len(values)}.")
        self._values[target, :] -= factor * np.asarray(values, dtype=float)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.num_rows:
            raise IndexError(f"Row {row} out of range for matrix with {self.num_rows} rows.")

    def _check(self, row: int, col: int) -> None:
        self._check_row(row)
        if not 0 <= col < self.num_cols:
            raise IndexError(f"Column {col} out of range for matrix with {self.num_cols} columns.")

    def __str__(self) -> str:
        return "\n".join("\t".join(f"{value:.2f}" for value in row) for row in self._values)
