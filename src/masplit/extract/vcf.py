import logging
from typing import Any, Dict, Optional

import allel
import numpy as np
from pandas import Series

from masplit.constants import DEFAULT_ALT_NUMBER, DEFAULT_DELIMITER, DEFAULT_FIELD
from masplit.data import Matrix
from masplit.exceptions import UserError

__all__ = ["extract_field"]

log = logging.getLogger(__name__)

ALT = "variants/ALT"
CHROM = "variants/CHROM"
POS = "variants/POS"
REF = "variants/REF"
SAMPLES = "samples"

# values used by allel for absent entries of string fields
STRING_FILLS = ("", ".")


def extract_field(
    vcf_file: str,
    field: str = DEFAULT_FIELD,
    delimiter: str = DEFAULT_DELIMITER,
    alt_number: int = DEFAULT_ALT_NUMBER,
) -> Matrix:
    """Extract a FORMAT field from a vcf file as a matrix of delimited strings

    Multiple values of a single sample (e.g. allele depths) are joined
    with the delimiter, so that "AD" of a multiallelic variant becomes "9,23,12".
    Samples without any value are missing (None).

    Args:
        vcf_file: path to the vcf file
        field: name of the FORMAT field (e.g. AD, DP, GQ)
        delimiter: used for joining multiple values
        alt_number: maximum number of alternate alleles read for each variant

    Returns:
        text matrix with a row for each variant and a column for each sample

    Raises:
        UserError: if the file has no variants or does not contain the field
    """
    vcf_field = f"calldata/{field}"

    # allel only warns about fields missing from the header
    headers = allel.read_vcf_headers(vcf_file)
    if field not in headers.formats:
        raise UserError(f'"{field}" is not a FORMAT field of {vcf_file}')

    log.info(f"Reading {field} from {vcf_file}")
    data = allel.read_vcf(
        vcf_file, fields=[vcf_field, ALT, CHROM, POS, REF, SAMPLES], alt_number=alt_number
    )
    if data is None or vcf_field not in data:
        raise UserError(f"{vcf_file} does not contain any variants")

    layer = data[vcf_field]
    if layer.ndim == 2:
        layer = layer[:, :, np.newaxis]

    log.info("Joining values")
    n_variants, n_samples = layer.shape[:2]
    values = np.empty((n_variants, n_samples), dtype=object)
    for i in range(n_variants):
        for j in range(n_samples):
            values[i, j] = join_values(layer[i, j], delimiter)

    return Matrix(
        values,
        name=field,
        row_names=variant_ids(data),
        col_names=np.asarray(data[SAMPLES], dtype=object),
    )


def join_values(values: np.ndarray, delimiter: str) -> Optional[str]:
    """Join present values of a single vcf entry

    Args:
        values: values of one sample for one variant
        delimiter: string put between values

    Returns:
        joined values or None if all values are absent
    """
    tokens = [token for token in (format_value(v) for v in values) if token is not None]
    if not tokens:
        return None
    return delimiter.join(tokens)


def format_value(value: Any) -> Optional[str]:
    """Convert value read by allel to text

    Args:
        value: single value

    Returns:
        text of the value, None for fill values
    """
    if isinstance(value, (bool, np.bool_)):
        return str(int(value))
    if isinstance(value, (int, np.integer)):
        return None if value == -1 else str(int(value))
    if isinstance(value, (float, np.floating)):
        return None if np.isnan(value) else np.format_float_positional(value, trim="-")
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", "replace")
    return None if value in STRING_FILLS else str(value)


def variant_ids(data: Dict[str, np.ndarray]) -> np.ndarray:
    """Create a unique id (chr:pos:ref/alt) for each variant

    Only the first alternate allele is used.

    Args:
        data: arrays read by allel.read_vcf

    Returns:
        array of variant ids
    """
    alt = data[ALT]
    if alt.ndim > 1:
        alt = alt[:, 0]

    chrom = Series(data[CHROM]).map(lambda x: x.lstrip("chrCHR"))
    ids = [
        "chr{0}:{1}:{2}/{3}".format(c, p, r, a)
        for c, p, r, a in zip(chrom, data[POS], data[REF], alt)
    ]
    return np.array(ids, dtype=object)
