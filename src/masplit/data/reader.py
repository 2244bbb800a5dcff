"""
Readers for delimited text matrices and hdf5 files
"""
import logging
from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional, Union

import h5py
import pandas as pd

from masplit.constants import (
    COL_ATTRS,
    ID,
    LAYERS,
    MATRICES,
    METADATA,
    MISSING_VALUES,
    ROW_ATTRS,
    VALUES,
)
from masplit.data.matrix import Matrix
from masplit.data.normalize import decode_value
from masplit.data.validation import check_file
from masplit.exceptions import UserError

log = logging.getLogger(__name__)


def read_tsv(
    filename: str,
    sep: str = "\t",
    row_names: bool = True,
    na_values: Optional[List[str]] = None,
    name: Optional[str] = None,
) -> Matrix:
    """Read a matrix of delimited strings from a text file

    The first row should contain column names, the first column
    should contain row names (unless row_names is False).
    All cells are read as text. Missing markers only apply to
    cells, row names are kept as written.

    Args:
        filename: path to the file
        sep: column separator
        row_names: when True, the first column holds row names
        na_values: cell values which are read as missing
        name: matrix name, defaults to the file stem

    Returns:
        text matrix

    Raises:
        UserError: if the file cannot be parsed
    """
    if na_values is None:
        na_values = MISSING_VALUES

    log.info(f"Reading {filename}")
    try:
        frame = pd.read_csv(
            filename,
            sep=sep,
            header=0,
            dtype=str,
            keep_default_na=False,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as err:
        raise UserError(f"Could not read matrix from {filename} ({err})") from err

    if row_names:
        frame = frame.set_index(frame.columns[0])
    frame = frame.mask(frame.isin(na_values))

    return Matrix.from_frame(frame, name=name or Path(filename).stem)


class H5Reader:
    """Reader for hdf5 files with split matrices

    Can be used as a context manager:
    ```
    with H5Reader("output.h5") as r:
        print(r.matrices())
        matrix = r.read("max_depth")
    ```
    """

    def __init__(self, filename: Union[str, h5py.File]):
        """Construct a reader for a hdf5 file

        Args:
            filename: path to the hdf5 file to read from, or an open h5py.File handle
        """
        with ExitStack() as stack:
            if isinstance(filename, h5py.File):
                self.__file = filename
            else:
                self.__file = stack.enter_context(h5py.File(filename, "r"))
            self.filename = self.__file.filename

            check_file(self.__file)
            self.metadata = self.__read_group(self.__file[METADATA])

            # File is valid, will be closed when self.close is called.
            stack.pop_all()

    def matrices(self) -> List[str]:
        """Return a list of all matrix names from the file

        Returns:
            list of matrix names
        """
        if MATRICES not in self.__file:
            return []
        return list(self.__file[MATRICES].keys())

    def read(self, name: str) -> Matrix:
        """Read matrix from the file

        Args:
            name: name of the matrix

        Returns:
            matrix with labels and metadata

        Raises:
            ValueError: if file is closed
            UserError: if matrix does not exist in the file
        """
        if self.__file is None:
            raise ValueError("Cannot read from a closed file")

        if name not in self.matrices():
            raise UserError(f'Matrix "{name}" does not exist in {self.filename}')

        group = self.__file[MATRICES][name]
        row_attrs = self.__read_group(group[ROW_ATTRS])
        col_attrs = self.__read_group(group[COL_ATTRS])

        return Matrix(
            decode_value(group[LAYERS][VALUES]),
            name=name,
            row_names=row_attrs.get(ID),
            col_names=col_attrs.get(ID),
            metadata=self.__read_group(group[METADATA]),
        )

    def close(self):
        """Close underlying file"""
        self.__file.close()
        self.__file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    @staticmethod
    def __read_group(group: h5py.Group) -> dict:
        return {key: decode_value(group[key]) for key in group.keys()}
