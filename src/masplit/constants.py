"""Constants holding names of group/keys in data files and defaults"""

# predefined h5 groups
MATRICES = "matrices"
LAYERS = "layers"
ROW_ATTRS = "ra"
COL_ATTRS = "ca"
METADATA = "metadata"

# name of the layer holding matrix values
VALUES = "values"

# row/column annotation
ID = "id"

# special metadata
DATE_CREATED = "date_created"
SDK_VERSION = "sdk_version"

# split metadata
DELIMITER = "delimiter"
N_PARSE_FAILURES = "n_parse_failures"

# vcf fields
AD = "AD"
DP = "DP"

# default values
DEFAULT_DELIMITER = ","
DEFAULT_FIELD = AD
DEFAULT_ALT_NUMBER = 3
DEFAULT_NAME = "split"

# text markers read as missing cells
MISSING_VALUES = ["", "NA", "."]
# text written for missing cells
MISSING_OUTPUT = "NA"

H5_SUFFIXES = (".h5", ".hdf5")
