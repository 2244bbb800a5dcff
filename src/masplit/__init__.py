"""
Python package `masplit` provides objects, functions and a command-line
interface for decoding matrices of delimited numeric strings, such as the
per-allele depths (`AD`) of a vcf file, into numeric matrices.

Each cell (e.g. "9,23,12") is split on a delimiter and reduced to a single
number, either the count of values or the value at a given (1-based) rank
after an optional sort.

Command-line interface
----------------------
The library can also be used from the command line. For instance, to extract
allele depths from a vcf file and keep the largest depth of each cell, you can run:

```
masplit extract --vcf <data.vcf> --field AD --output <ad.tsv>
masplit split --input <ad.tsv> --output <max_ad.tsv>
```
"""
__version__ = "1.0.0"

# flake8: noqa
from masplit.data import Matrix, is_error_sentinel
from masplit.split import masplit, split_matrix
