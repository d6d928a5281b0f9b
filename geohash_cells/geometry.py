"""Conversion of geohash cells into Shapely geometries."""

from collections.abc import Iterable

import shapely
from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry

from geohash_cells._exceptions import InvalidArgumentError
from geohash_cells._geohash_parser import geohash_bounds

__all__ = ["geohash_to_geometry", "geohashes_to_geometry"]


def geohash_to_geometry(geohash: str) -> Polygon:
    """
    Create a polygon of a geohash cell.

    Args:
        geohash (str): Geohash of the cell.

    Raises:
        InvalidCharacterError: If any character is outside of the geohash alphabet.

    Returns:
        Polygon: Cell rectangle in the EPSG:4326 coordinates.
    """
    return box(*geohash_bounds(geohash))


def geohashes_to_geometry(geohashes: Iterable[str]) -> BaseGeometry:
    """
    Merge multiple geohash cells into a single geometry.

    Args:
        geohashes (Iterable[str]): Geohashes of the cells. Can have different lengths.

    Raises:
        InvalidArgumentError: If no geohash has been passed.
        InvalidCharacterError: If any character is outside of the geohash alphabet.

    Returns:
        BaseGeometry: Union of all cell rectangles.
    """
    geometries = [geohash_to_geometry(geohash) for geohash in geohashes]
    if not geometries:
        raise InvalidArgumentError("At least one geohash is required to create a geometry.")
    return shapely.union_all(geometries)
