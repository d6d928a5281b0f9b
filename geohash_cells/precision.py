"""Hash length selection based on the cell size in metres."""

from geohash_cells._constants import (
    MAX_TABULATED_HASH_LENGTH,
    METRES_PER_DEGREE_LATITUDE,
    METRES_PER_DEGREE_LONGITUDE,
)
from geohash_cells.codec import height_degrees, width_degrees

__all__ = ["CELL_CENTRE_SEPARATION_METRES", "min_hash_length_for_cell_centre_separation"]

# Hash length -> (north-south, east-west) largest distance between any point of a cell
# and the cell centre, measured at the equator. Index 0 holds the length 1.
CELL_CENTRE_SEPARATION_METRES: tuple[tuple[float, float], ...] = tuple(
    (
        height_degrees(length) / 2 * METRES_PER_DEGREE_LATITUDE,
        width_degrees(length) / 2 * METRES_PER_DEGREE_LONGITUDE,
    )
    for length in range(1, MAX_TABULATED_HASH_LENGTH + 1)
)


def min_hash_length_for_cell_centre_separation(distance_metres: float) -> int:
    """
    Find the shortest hash length keeping every point close to its cell centre.

    Returned length guarantees that, at the equator, no point is further from the centre of
    its cell than the given distance along either axis. Distances smaller than the finest
    tabulated cell return the length 11.

    Args:
        distance_metres (float): Maximal accepted distance in metres.

    Returns:
        int: Hash length between 1 and 11.

    Examples:
        >>> from geohash_cells import min_hash_length_for_cell_centre_separation
        >>> min_hash_length_for_cell_centre_separation(3900)
        5
    """
    for length, (north_south, east_west) in enumerate(CELL_CENTRE_SEPARATION_METRES, start=1):
        if max(north_south, east_west) <= distance_metres:
            return length
    return MAX_TABULATED_HASH_LENGTH
