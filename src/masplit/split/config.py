from numbers import Integral
from typing import NamedTuple

import numpy as np

from masplit.exceptions import InvalidRecordError, InvalidSortDirectionError


class SplitConfig(NamedTuple):
    """
    Class representation for split settings
    """

    count: bool
    record: int
    sort: bool
    decreasing: bool


# Return the largest value of each cell by default
DefaultSplit = SplitConfig(count=False, record=1, sort=True, decreasing=True)


def is_boolean(value) -> bool:
    """Check if value is a recognized boolean

    Args:
        value: value to check

    Returns:
        True for bools, numpy bools and integers 0 and 1
    """
    if isinstance(value, (bool, np.bool_)):
        return True
    return isinstance(value, Integral) and value in (0, 1)


def validate_config(config: SplitConfig):
    """Check split settings before any cell is processed

    The direction is checked whenever sort is set, also when count
    is set and the direction would not be used.

    Args:
        config: split settings

    Raises:
        InvalidRecordError: if record is not an integer greater or equal to one
        InvalidSortDirectionError: if sort is set and decreasing is not a boolean
    """
    if not isinstance(config.record, Integral):
        raise InvalidRecordError(f"Specified record ({config.record!r}) is not an integer")
    if config.record < 1:
        raise InvalidRecordError(f"Specified record number ({config.record}) is less than one")

    if config.sort and not is_boolean(config.decreasing):
        raise InvalidSortDirectionError(
            f"Specification of 'decreasing' should be either 0 or 1 (got {config.decreasing!r})"
        )
