"""
Functions for splitting matrices of delimited strings

Examples
--------

Keep the second value of each cell, in order of appearance
```
from masplit.split import masplit
second = masplit([["9,23,12", "7,2"], [None, "3"]], sort=False, record=2)
```
 or
```
masplit split \
    --input "ad.tsv" \
    --no-sort \
    --record 2 \
    --output "second.tsv"
```
"""
# This package imports all public members from all submodules.
# Flake complains since they are not used directly.
# flake8: noqa

from .config import DefaultSplit, SplitConfig, validate_config
from .options import split_options
from .transform import ParseFailure, SplitResult, masplit, split_matrix
