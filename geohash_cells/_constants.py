"""Constants used across the project."""

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"

DEFAULT_HASH_LENGTH = 12

MAX_HASH_LENGTH = 12

# Longest hash length present in the cell centre separation table.
MAX_TABULATED_HASH_LENGTH = 11

# Both measured at the equator.
METRES_PER_DEGREE_LATITUDE = 110_574.0
METRES_PER_DEGREE_LONGITUDE = 111_320.0

__all__ = [
    "BASE32",
    "DEFAULT_HASH_LENGTH",
    "MAX_HASH_LENGTH",
    "MAX_TABULATED_HASH_LENGTH",
    "METRES_PER_DEGREE_LATITUDE",
    "METRES_PER_DEGREE_LONGITUDE",
]
