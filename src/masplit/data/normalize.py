"""
Normalization of values stored in and read from hdf5 files
"""
import html
import logging

import numpy as np

from masplit.utils import is_missing

log = logging.getLogger(__name__)


def encode_string(value) -> bytes:
    """Encode a string-like value as ascii bytes

    Non-ascii characters are replaced with xml character references.

    Args:
        value: value to encode

    Returns:
        encoded value
    """
    if isinstance(value, bytes):
        return value
    if is_missing(value):
        return b""
    return str(value).encode("ascii", "xmlcharrefreplace")


def normalize_attr_strings(a: np.ndarray) -> np.ndarray:
    """Take an array of string-like elements and return an array of ascii bytes

    Args:
        a: value to normalize

    Returns:
        normalized value
    """
    encoded = [encode_string(x) for x in a.flatten()]
    return np.array(encoded, dtype=np.bytes_).reshape(a.shape)


def normalize_attr_values(a) -> np.ndarray:
    """Take all kinds of input values and validate/normalize them for storage

    Args:
        a: scalar, list, tuple or np.ndarray
            Elements can be strings, numbers or bools

    Returns:
        normalized value (scalar if a was a scalar)

    Raises:
        ValueError: on unsupported input type
    """
    scalar = np.isscalar(a)
    arr = np.array([a]) if scalar else np.asarray(a)

    kind = arr.dtype.kind
    if kind in "iuf":
        pass  # numbers are stored as they are
    elif kind == "b":
        arr = arr.astype("ubyte")
    elif kind in "USO":
        arr = normalize_attr_strings(arr)
    else:
        raise ValueError(f"Unsupported value type {arr.dtype}")

    if scalar:
        return arr[0]
    return arr


def decode_scalar(value):
    """Decode a single value read from hdf5 file

    Args:
        value: value to decode

    Returns:
        str for bytes values, the value itself otherwise
    """
    if isinstance(value, bytes):
        return html.unescape(value.decode("ascii", "ignore"))
    return value


def decode_value(value):
    """Decode value read from hdf5 file

    Args:
        value: h5py dataset or numpy array to decode

    Returns:
        decoded value
    """
    value = np.asarray(value[()])
    if not value.shape:
        return decode_scalar(value[()])

    if value.dtype.kind in "SO":
        decoded = [decode_scalar(x) for x in value.flatten()]
        return np.array(decoded, dtype=object).reshape(value.shape)
    return value


def to_text(cell) -> str:
    """Return text of a non-missing matrix cell

    Args:
        cell: cell value

    Returns:
        cell text (bytes are decoded as utf-8)
    """
    if isinstance(cell, bytes):
        return cell.decode("utf-8", "replace")
    return str(cell)
