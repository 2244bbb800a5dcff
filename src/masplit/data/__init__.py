"""
Classes for representation, reading and writing of split matrices

Format Specification
====================
Numeric matrices produced by splitting can be stored in a structured
[hdf5](https://www.hdfgroup.org/solutions/hdf5/) file. One file can
contain one or more matrices.

Structure
---------
```
<root>
+-- metadata
+-- matrices
    +-- <name>
        +-- metadata
        +-- layers
            +-- values
        +-- ra
            +-- id
        +-- ca
            +-- id
```

- **metadata** group at the root contains file metadata (date_created, sdk_version).

- **matrices** group stores one sub-group per matrix.

- **layers/values** holds the matrix. Rows are variants, columns are samples
and missing values are stored as NaN.

- **ra** and **ca** hold row (variant) and column (sample) labels. Labels are
optional, when present they must have one element per row/column.

- **metadata** group of a matrix contains the settings used to compute it
(delimiter, count, record, sort, decreasing) and the number of tokens
which could not be parsed.

Delimited text matrices are read from and written to tab separated files
with `read_tsv` and `write_tsv`.
"""
# This package imports all public members from all submodules.
# Flake complains since they are not used directly.
# flake8: noqa

from .matrix import Matrix, as_matrix, is_error_sentinel
from .reader import H5Reader, read_tsv
from .writer import H5Writer, write_tsv
