import math

import numpy as np
import pandas as pd


def is_missing(cell) -> bool:
    """Check if the matrix cell is missing

    Args:
        cell: cell value

    Returns:
        bool: True for None, NaN and pd.NA
    """
    if cell is None or cell is pd.NA:
        return True
    if isinstance(cell, (float, np.floating)):
        return math.isnan(cell)
    return False


def split_char(delimiter: str) -> str:
    """Return the character used for splitting

    Only the first character of the delimiter is used.

    Args:
        delimiter: delimiter as given by the user

    Returns:
        first character of delimiter (empty string if delimiter is empty)
    """
    if not delimiter:
        return ""
    return delimiter[0]
