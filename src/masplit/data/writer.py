"""
Writers for split matrices
"""
import logging
from datetime import date
from typing import Union

import h5py
import numpy as np

from masplit import __version__
from masplit.constants import (
    COL_ATTRS,
    DATE_CREATED,
    ID,
    LAYERS,
    MATRICES,
    METADATA,
    MISSING_OUTPUT,
    ROW_ATTRS,
    SDK_VERSION,
    VALUES,
)
from masplit.data.matrix import Matrix
from masplit.data.normalize import normalize_attr_values
from masplit.data.validation import check_matrix

log = logging.getLogger(__name__)

SUPPORTED_MODES = ("r+", "w-", "w", "a")


def write_tsv(matrix: Matrix, filename: str, sep: str = "\t"):
    """Write matrix to a delimited text file

    Missing values are written as NA. Labels are written
    only when the matrix has them.

    Args:
        matrix: matrix to export
        filename: path to the output file
        sep: column separator
    """
    log.info(f"Writing {matrix} to {filename}")
    matrix.to_frame().to_csv(
        filename,
        sep=sep,
        na_rep=MISSING_OUTPUT,
        index=matrix.row_names is not None,
        header=matrix.col_names is not None,
    )


class H5Writer:
    """Writer for hdf5 files with split matrices

    Can be used as a context manager:
    ```
    with H5Writer("output.h5") as f:
        f.write(max_depth)
        f.write(n_alleles)
    ```
    """

    def __init__(self, filename: Union[str, h5py.File], *, mode="w-"):
        """Construct a writer for a new hdf5 file

        Args:
            filename: path to the hdf5 file to write to, or an open h5py.File handle
            mode: mode to open the h5 file with
                r+  Read/write, file must exist
                w-  Create file, raise error if file exists (default)
                w   Create file, truncate if exists
                a   Read/write if exists, create otherwise

        Raises:
            ValueError: on invalid mode
        """
        if isinstance(filename, h5py.File):
            self.__file = filename
        else:
            if mode not in SUPPORTED_MODES:
                raise ValueError(f"Invalid mode; must be one of {SUPPORTED_MODES}")
            self.__file = h5py.File(filename, mode=mode)

        if METADATA not in self.__file:
            self.add_file_metadata()

    def write(self, matrix: Matrix):
        """Write matrix to the hdf5 file.

        Args:
            matrix: matrix to export

        Raises:
            ValueError: if file is closed
        """
        if self.__file is None:
            raise ValueError("Cannot write to a closed file")

        check_matrix(matrix)

        group = self.__file.require_group(MATRICES).create_group(matrix.name)
        self.__write_matrix(group, matrix)

    def add_file_metadata(self):
        """Write file metadata to file"""
        metadata = self.__file.require_group(METADATA)
        self.__write_value(metadata, DATE_CREATED, date.today().strftime("%Y-%m-%d"))
        self.__write_value(metadata, SDK_VERSION, __version__)

    def __write_matrix(self, parent_group: h5py.Group, matrix: Matrix):
        groups = [
            (LAYERS, {VALUES: matrix.values}),
            (ROW_ATTRS, {} if matrix.row_names is None else {ID: matrix.row_names}),
            (COL_ATTRS, {} if matrix.col_names is None else {ID: matrix.col_names}),
            (METADATA, matrix.metadata),
        ]
        for group_name, data in groups:
            group = parent_group.create_group(group_name)
            for key, value in data.items():
                self.__write_value(group, key, value)

    def close(self):
        """Close underlying file"""
        self.__file.close()
        self.__file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __write_value(self, group: h5py.Group, name: str, value):
        """Write value to given group

        Value is normalized, then stored as a scalar or
        as a compressed array

        Args:
            group: group to write the value to
            name: name of the dataset
            value: value to write

        Raises:
            ValueError: if value cannot be normalized
        """
        try:
            normalized = normalize_attr_values(value)
        except Exception as ex:
            raise ValueError(f'Could not normalize {type(value)} (key "{name}")') from ex

        if np.isscalar(normalized) or normalized.ndim == 0 or normalized.size == 0:
            group[name] = normalized
        else:
            self.__write_array(group, name, normalized)

    def __write_array(self, group: h5py.Group, name: str, data: np.ndarray):
        """Write array to given group

        Array is stored using at most 64x64 chunks and compressed

        Args:
            group: group to write the array to
            name: name of array
            data: data to write
        """
        # chunk size must not be bigger than the matrix
        if len(data.shape) > 1:
            chunks = (min(64, data.shape[0]), min(64, data.shape[1]))
        else:
            chunks = True
        group.create_dataset(
            name, data=data, chunks=chunks, compression="gzip", shuffle=False, compression_opts=2
        )
