"""
Coverage.

This module finds sets of geohashes covering a rectangular region.
"""

import warnings
from typing import NamedTuple

from geohash_cells._constants import (
    MAX_HASH_LENGTH,
    METRES_PER_DEGREE_LATITUDE,
    METRES_PER_DEGREE_LONGITUDE,
)
from geohash_cells._exceptions import InvalidArgumentError, NotEnoughHashesWarning
from geohash_cells.adjacency import Direction, adjacent_hash
from geohash_cells.codec import encode
from geohash_cells.precision import min_hash_length_for_cell_centre_separation

__all__ = ["BoundingBox", "hashes_to_cover_bounding_box"]


class BoundingBox(NamedTuple):
    """Rectangular region defined by two opposite corners."""

    top_lat: float
    left_lon: float
    bottom_lat: float
    right_lon: float

    @property
    def north(self) -> float:
        """Northern edge latitude."""
        return max(self.top_lat, self.bottom_lat)

    @property
    def south(self) -> float:
        """Southern edge latitude."""
        return min(self.top_lat, self.bottom_lat)

    @property
    def west_east(self) -> tuple[float, float]:
        """
        Western and eastern edge longitudes.

        Corners more than 180 degrees apart describe a box crossing the antimeridian,
        so the western edge has a larger value than the eastern one.
        """
        difference = abs(self.left_lon - self.right_lon)
        if difference >= 360:
            return -180.0, 180.0
        low, high = sorted((self.left_lon, self.right_lon))
        if difference > 180:
            return high, low
        return low, high

    @property
    def height_metres(self) -> float:
        """Approximate north-south extent measured at the equator."""
        return (self.north - self.south) * METRES_PER_DEGREE_LATITUDE

    @property
    def width_metres(self) -> float:
        """Approximate east-west extent measured at the equator."""
        west, east = self.west_east
        span = east - west if east >= west else east - west + 360
        return span * METRES_PER_DEGREE_LONGITUDE


def hashes_to_cover_bounding_box(
    top_lat: float, left_lon: float, bottom_lat: float, right_lon: float, min_hashes: int
) -> set[str]:
    """
    Find geohashes of the coarsest grid covering a bounding box with enough cells.

    The search starts from the hash length with cells of about the size of the longer box
    side and increases it until the cover has at least `min_hashes` cells. The cover is the
    block of cells between the cells containing the box corners.

    Args:
        top_lat (float): Latitude of the first corner.
        left_lon (float): Longitude of the first corner.
        bottom_lat (float): Latitude of the opposite corner.
        right_lon (float): Longitude of the opposite corner.
        min_hashes (int): Minimal number of geohashes in the result.

    Raises:
        InvalidArgumentError: If `min_hashes` is lower than 1.

    Returns:
        set[str]: Geohashes of equal length covering the box.

    Examples:
        >>> from geohash_cells import hashes_to_cover_bounding_box
        >>> sorted(hashes_to_cover_bounding_box(42.3583, -71.0603, 45, -73, 1))
        ['drs', 'drt', 'dru', 'drv']
    """
    if min_hashes < 1:
        raise InvalidArgumentError(f"min_hashes must be greater than zero (got {min_hashes}).")

    bounding_box = BoundingBox(top_lat, left_lon, bottom_lat, right_lon)
    length = min_hash_length_for_cell_centre_separation(
        max(bounding_box.height_metres, bounding_box.width_metres)
    )
    hashes = _cover_bounding_box(bounding_box, length)
    while len(hashes) < min_hashes and length < MAX_HASH_LENGTH:
        length += 1
        hashes = _cover_bounding_box(bounding_box, length)

    if len(hashes) < min_hashes:
        warnings.warn(
            f"Bounding box {tuple(bounding_box)} is covered by only {len(hashes)} geohashes"
            f" of the maximal length {MAX_HASH_LENGTH} ({min_hashes} requested).",
            NotEnoughHashesWarning,
            stacklevel=2,
        )

    return hashes


def _cover_bounding_box(bounding_box: BoundingBox, length: int) -> set[str]:
    west, east = bounding_box.west_east
    top_left = encode(bounding_box.north, west, length)
    top_right = encode(bounding_box.north, east, length)
    bottom_left = encode(bounding_box.south, west, length)

    columns = 1
    current_hash = top_left
    while current_hash != top_right:
        current_hash = adjacent_hash(current_hash, Direction.RIGHT)
        columns += 1

    row_starts = [top_left]
    while row_starts[-1] != bottom_left:
        row_starts.append(adjacent_hash(row_starts[-1], Direction.BOTTOM))

    hashes = set()
    for row_start in row_starts:
        current_hash = row_start
        hashes.add(current_hash)
        for _ in range(columns - 1):
            current_hash = adjacent_hash(current_hash, Direction.RIGHT)
            hashes.add(current_hash)
    return hashes
