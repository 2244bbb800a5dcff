import logging
from typing import Any, Mapping, Union

import h5py

from masplit.constants import (
    COL_ATTRS,
    DATE_CREATED,
    ID,
    LAYERS,
    MATRICES,
    METADATA,
    ROW_ATTRS,
    SDK_VERSION,
    VALUES,
)
from masplit.data.matrix import Matrix
from masplit.exceptions import ValidationError

log = logging.getLogger(__name__)


def check_file(file: Union[h5py.File, Mapping[str, Any]]):
    """Check if file contains all required groups

    Args:
        file: h5 file or a nested dictionary with same structure to check

    Raises:
        ValidationError: if file structure is invalid
    """
    if METADATA not in file:
        raise ValidationError(f'Invalid file (file does not contain group "{METADATA}")')

    metadata = file[METADATA]
    for key in (DATE_CREATED, SDK_VERSION):
        if key not in metadata:
            raise ValidationError(
                f'Invalid file (file does not contain dataset "{METADATA}/{key}")'
            )

    if MATRICES in file:
        for name in file[MATRICES].keys():
            try:
                check_matrix(file[MATRICES][name])
            except ValidationError as err:
                raise ValidationError(f"Invalid file ({err})") from err
    else:
        log.warning("File does not contain any matrices")


def check_matrix(matrix: Union[h5py.Group, Matrix]):
    """Validate matrix structure

    Args:
        matrix: h5py.Group or a Matrix to check

    Raises:
        ValidationError: if matrix structure is not correct
    """
    if isinstance(matrix, Matrix):
        matrix = MatrixWrapper(matrix)

    for key in (LAYERS, ROW_ATTRS, COL_ATTRS, METADATA):
        if key not in matrix:
            raise ValidationError(f'{matrix.name} does not contain group "{key}"')

    if VALUES not in matrix[LAYERS]:
        raise ValidationError(f'{matrix.name} does not contain "{LAYERS}/{VALUES}"')

    shape = matrix[LAYERS][VALUES].shape
    if len(shape) != 2:
        raise ValidationError(f"{matrix.name} values are not 2 dimensional ({shape})")

    for group, axis in ((ROW_ATTRS, 0), (COL_ATTRS, 1)):
        if ID in matrix[group] and len(matrix[group][ID]) != shape[axis]:
            raise ValidationError(
                f'{matrix.name} "{group}/{ID}" should have {shape[axis]} elements'
            )


class MatrixWrapper:
    """Wrapper for accessing Matrix object as a h5 Group"""

    def __init__(self, matrix: Matrix):
        self.matrix = matrix

    @property
    def name(self):
        return self.matrix.name

    def __iter__(self):
        return iter([COL_ATTRS, LAYERS, METADATA, ROW_ATTRS])

    def __contains__(self, item):
        return item in (COL_ATTRS, LAYERS, METADATA, ROW_ATTRS)

    def __getitem__(self, item):
        if item == COL_ATTRS:
            return {} if self.matrix.col_names is None else {ID: self.matrix.col_names}
        elif item == LAYERS:
            return {VALUES: self.matrix.values}
        elif item == METADATA:
            return self.matrix.metadata
        elif item == ROW_ATTRS:
            return {} if self.matrix.row_names is None else {ID: self.matrix.row_names}
        else:
            raise KeyError(item)
