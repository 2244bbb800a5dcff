"""
Split matrices of delimited strings into numeric matrices
"""
import logging
import math
import re
from typing import Any, List, NamedTuple, Sequence, Tuple

import numpy as np

from masplit.constants import DEFAULT_DELIMITER, DELIMITER, N_PARSE_FAILURES
from masplit.data.matrix import Matrix, as_matrix
from masplit.data.normalize import to_text
from masplit.exceptions import ValidationError
from masplit.split.config import DefaultSplit, SplitConfig, validate_config
from masplit.utils import is_missing, split_char

__all__ = ["ParseFailure", "SplitResult", "masplit", "split_matrix"]

log = logging.getLogger(__name__)

FLOAT = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*")


class ParseFailure(NamedTuple):
    """
    Token which could not be converted to a number
    """

    row: int
    column: int
    position: int
    token: str

    def __str__(self):
        return f"{self.token!r} (row {self.row}, column {self.column}, token {self.position})"


class SplitResult(NamedTuple):
    """
    Numeric matrix together with the tokens which could not be parsed
    """

    matrix: Matrix
    failures: List[ParseFailure]

    def __str__(self):
        return f"{self.matrix}, {len(self.failures)} tokens could not be parsed"


def tokenize(text: str, delimiter: str) -> List[str]:
    """Split text on every occurrence of the delimiter

    Tokens are not stripped and empty tokens are kept.

    Args:
        text: cell text
        delimiter: only the first character is used

    Returns:
        tokens in order of appearance
    """
    char = split_char(delimiter)
    if not char:
        return [text]
    return text.split(char)


def parse_token(token: str) -> Tuple[float, bool]:
    """Convert token to a float

    Args:
        token: text to convert

    Returns:
        tuple of the value and a success flag.
        Value is 0.0 when token is not a finite number.
    """
    if not FLOAT.fullmatch(token):
        return 0.0, False

    value = float(token)
    if not math.isfinite(value):
        return 0.0, False
    return value, True


def select_value(values: Sequence[float], config: SplitConfig) -> float:
    """Reduce parsed values of a single cell to one number

    Args:
        values: parsed values in order of appearance
        config: split settings

    Returns:
        number of values when counting, otherwise the value at the
        requested (1-based) record, NaN if there are not enough values
    """
    if config.count:
        return float(len(values))

    if config.sort:
        values = sorted(values, reverse=bool(config.decreasing))

    index = config.record - 1
    if index >= len(values):
        return np.nan
    return values[index]


def split_matrix(
    data: Any, delimiter: str = DEFAULT_DELIMITER, config: SplitConfig = DefaultSplit
) -> SplitResult:
    """Split each cell of a matrix of delimited strings into a single number

    Missing cells stay missing. Tokens which are not numbers are
    replaced with 0 and reported in the result.

    Args:
        data: Matrix, DataFrame, 2d array or list of lists with text cells
        delimiter: character separating values in a cell
        config: split settings

    Returns:
        numeric matrix with the labels of data and the parse failures

    Raises:
        InvalidRecordError: if config.record is less than one
        InvalidSortDirectionError: if config.decreasing is not a boolean
    """
    # settings are validated before any cell is touched
    validate_config(config)

    matrix = as_matrix(data)
    if delimiter and len(delimiter) > 1:
        log.debug(f'Only the first character of delimiter "{delimiter}" is used')
    char = split_char(delimiter)

    values = np.full(matrix.shape, np.nan)
    failures = []

    n_rows, n_columns = matrix.shape
    for i in range(n_rows):
        for j in range(n_columns):
            cell = matrix.values[i, j]
            if is_missing(cell):
                continue

            parsed = []
            for position, token in enumerate(tokenize(to_text(cell), char)):
                value, ok = parse_token(token)
                if not ok:
                    failure = ParseFailure(i, j, position, token)
                    log.warning(f"Failed to convert {failure} to a float, using 0")
                    failures.append(failure)
                parsed.append(value)

            values[i, j] = select_value(parsed, config)

    result = matrix.like(values)
    result.add_metadata(DELIMITER, char)
    result.add_metadata("count", bool(config.count))
    result.add_metadata("record", int(config.record))
    result.add_metadata("sort", bool(config.sort))
    if config.sort:
        result.add_metadata("decreasing", bool(config.decreasing))
    result.add_metadata(N_PARSE_FAILURES, len(failures))

    return SplitResult(result, failures)


def masplit(
    data: Any,
    delimiter: str = DEFAULT_DELIMITER,
    count: bool = False,
    record: int = 1,
    sort: bool = True,
    decreasing: bool = True,
) -> Matrix:
    """Split a matrix of delimited strings (e.g. "7,2")

    Errors in the settings are not raised. Instead, a 1x1 matrix
    with a single missing value is returned (see is_error_sentinel).

    Args:
        data: Matrix, DataFrame, 2d array or list of lists with text cells
        delimiter: character that delimits values
        count: return the count of delimited records
        record: which (1-based) record to return
        sort: should the records be sorted prior to selecting the element
        decreasing: should the values be sorted decreasing (True) or increasing (False)

    Returns:
        numeric matrix with the same shape and labels as data,
        or the 1x1 missing matrix on invalid settings
    """
    config = SplitConfig(count=count, record=record, sort=sort, decreasing=decreasing)
    try:
        return split_matrix(data, delimiter, config).matrix
    except ValidationError as err:
        log.error(str(err))
        return Matrix.sentinel()
