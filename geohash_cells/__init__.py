"""
Geohash Cells.

Geohash Cells is a Python library for encoding geographic coordinates into geohashes,
decoding them, walking the geohash grid and covering bounding boxes with geohash cells.
"""

from geohash_cells._exceptions import (
    InvalidArgumentError,
    InvalidCharacterError,
    NotEnoughHashesWarning,
)
from geohash_cells.adjacency import Direction, adjacent_hash, neighbours
from geohash_cells.codec import decode, encode, geohash_bounds, height_degrees, width_degrees
from geohash_cells.coverage import BoundingBox, hashes_to_cover_bounding_box
from geohash_cells.geometry import geohash_to_geometry, geohashes_to_geometry
from geohash_cells.precision import min_hash_length_for_cell_centre_separation

__app_name__ = "GeohashCells"
__version__ = "0.1.0"

__all__ = [
    "encode",
    "decode",
    "geohash_bounds",
    "height_degrees",
    "width_degrees",
    "Direction",
    "adjacent_hash",
    "neighbours",
    "min_hash_length_for_cell_centre_separation",
    "BoundingBox",
    "hashes_to_cover_bounding_box",
    "geohash_to_geometry",
    "geohashes_to_geometry",
    "InvalidArgumentError",
    "InvalidCharacterError",
    "NotEnoughHashesWarning",
]
