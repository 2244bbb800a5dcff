import functools
from typing import Callable

import click

from masplit.constants import DEFAULT_DELIMITER
from masplit.split.config import DefaultSplit


def split_options(function: Callable):
    """Click options for split settings decorator

    Args:
        function: function to add split options to

    Returns:
        decorated function
    """

    @click.option(
        "--delimiter",
        default=DEFAULT_DELIMITER,
        show_default=True,
        help="Character that delimits values in a cell. Only the first character is used",
    )
    @click.option(
        "--count",
        is_flag=True,
        default=DefaultSplit.count,
        help="Return the number of values in each cell",
    )
    @click.option(
        "--record",
        default=DefaultSplit.record,
        show_default=True,
        type=int,
        help="Which (1-based) value to return from each cell",
    )
    @click.option(
        "--sort/--no-sort",
        default=DefaultSplit.sort,
        show_default=True,
        help="Sort values before selecting the record",
    )
    @click.option(
        "--decreasing/--increasing",
        default=DefaultSplit.decreasing,
        show_default=True,
        help="Sort order of values",
    )
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        return function(*args, **kwargs)

    return wrapper
