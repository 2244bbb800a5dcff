"""
In-memory representation of a labelled matrix
"""
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from masplit.constants import DEFAULT_NAME

__all__ = ["Matrix", "as_matrix", "is_error_sentinel"]


class Matrix:
    """A two dimensional matrix with optional row and column labels

    Rows conventionally index variants and columns index samples.
    """

    def __init__(
        self,
        values: np.ndarray,
        *,
        name: str = DEFAULT_NAME,
        row_names: Optional[np.ndarray] = None,
        col_names: Optional[np.ndarray] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """Create a new matrix

        Args:
            values: 2d array with cell values
            name: matrix name
            row_names: optional label for each row
            col_names: optional label for each column
            metadata: matrix metadata

        Raises:
            ValueError: if values are not 2 dimensional or labels
                        do not match the matrix shape
        """
        values = np.asarray(values)
        if values.ndim != 2:
            raise ValueError(
                f"Matrix values should be 2 dimensional (got {values.ndim} dimensions)"
            )

        self.name = name
        self.values = values
        self.metadata = {}
        self.row_names = None
        self.col_names = None

        if row_names is not None:
            self.set_row_names(row_names)
        if col_names is not None:
            self.set_col_names(col_names)

        for key, value in (metadata or {}).items():
            self.add_metadata(key, value)

    @property
    def shape(self):
        return self.values.shape

    def set_row_names(self, row_names: np.ndarray):
        """Set row labels

        Args:
            row_names: array with a label for each row

        Raises:
            ValueError: if the number of labels differs from the number of rows
        """
        row_names = np.asarray(row_names)
        if row_names.shape != (self.shape[0],):
            raise ValueError(
                f"Row names should have {self.shape[0]} elements "
                f"(got array with {row_names.shape})"
            )
        self.row_names = row_names

    def set_col_names(self, col_names: np.ndarray):
        """Set column labels

        Args:
            col_names: array with a label for each column

        Raises:
            ValueError: if the number of labels differs from the number of columns
        """
        col_names = np.asarray(col_names)
        if col_names.shape != (self.shape[1],):
            raise ValueError(
                f"Column names should have {self.shape[1]} elements "
                f"(got array with {col_names.shape})"
            )
        self.col_names = col_names

    def add_metadata(self, name: str, value: Any):
        """Add metadata to the matrix

        Args:
            name: metadata name
            value: metadata value
        """
        self.metadata[name] = value

    def like(self, values: np.ndarray, name: Optional[str] = None) -> "Matrix":
        """Create a matrix with given values and labels of this matrix

        Args:
            values: values of the new matrix, same shape as this one
            name: name of the new matrix, defaults to the name of this matrix

        Returns:
            new matrix
        """
        return Matrix(
            values,
            name=self.name if name is None else name,
            row_names=self.row_names,
            col_names=self.col_names,
        )

    def to_frame(self) -> pd.DataFrame:
        """Return the matrix as a DataFrame

        Returns:
            DataFrame indexed by row names, with column names as columns
        """
        return pd.DataFrame(self.values, index=self.row_names, columns=self.col_names)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, name: str = DEFAULT_NAME) -> "Matrix":
        """Create a matrix from a DataFrame

        Args:
            frame: data, index and columns are used as labels
            name: matrix name

        Returns:
            new matrix
        """
        return cls(
            frame.to_numpy(dtype=object),
            name=name,
            row_names=frame.index.to_numpy(),
            col_names=frame.columns.to_numpy(),
        )

    @classmethod
    def sentinel(cls) -> "Matrix":
        """Create a 1x1 matrix holding a single missing value

        Returned instead of a result when the split configuration is invalid.

        Returns:
            new 1x1 matrix
        """
        return cls(np.full((1, 1), np.nan))

    def __str__(self):
        n_rows, n_columns = self.shape
        return (
            f"{self.name} matrix with {n_rows} row{'s' if n_rows != 1 else ''} "
            f"and {n_columns} column{'s' if n_columns != 1 else ''}"
        )


def as_matrix(data: Any) -> Matrix:
    """Convert supported matrix-like objects to Matrix

    Args:
        data: Matrix, DataFrame, 2d numpy array or a list of equally long lists

    Returns:
        matrix (data itself if it already is a Matrix)

    Raises:
        ValueError: if data is not 2 dimensional, a row is a string
                    or rows differ in length
    """
    if isinstance(data, Matrix):
        return data
    if isinstance(data, pd.DataFrame):
        return Matrix.from_frame(data)
    if isinstance(data, np.ndarray):
        return Matrix(data)

    if isinstance(data, (str, bytes)):
        raise ValueError("Matrix should be a list of rows, not a string")
    rows = list(data)
    if any(isinstance(row, (str, bytes)) for row in rows):
        raise ValueError("Matrix rows should be lists of cells, not strings")

    rows = [list(row) for row in rows]
    n_columns = len(rows[0]) if rows else 0
    if any(len(row) != n_columns for row in rows):
        raise ValueError("All rows of the matrix should have the same number of elements")

    # filled cell by cell so strings and None are kept as python objects
    values = np.empty((len(rows), n_columns), dtype=object)
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            values[i, j] = cell
    return Matrix(values)


def is_error_sentinel(result: Matrix, data: Any) -> bool:
    """Check if result of masplit signals an invalid configuration

    A 1x1 input cannot be told apart from the sentinel, so False is
    returned for such inputs.

    Args:
        result: value returned by masplit
        data: matrix passed to masplit

    Returns:
        True if the result is the 1x1 missing sentinel returned for a larger input
    """
    source = as_matrix(data)
    return (
        result.shape == (1, 1)
        and source.shape != (1, 1)
        and bool(np.isnan(result.values[0, 0]))
    )
