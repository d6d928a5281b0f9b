"""
Codec.

This module converts coordinates into geohashes and back.
"""

from geohash_cells._constants import BASE32, DEFAULT_HASH_LENGTH
from geohash_cells._exceptions import InvalidArgumentError
from geohash_cells._geohash_parser import geohash_bounds

__all__ = ["encode", "decode", "geohash_bounds", "height_degrees", "width_degrees"]


def encode(latitude: float, longitude: float, length: int = DEFAULT_HASH_LENGTH) -> str:
    """
    Encode a point into a geohash.

    Ranges of both axes are bisected alternately, starting with the longitude. A coordinate
    lying exactly on the middle of a range is assigned to the lower half.

    Args:
        latitude (float): Latitude in degrees, between -90 and 90.
        longitude (float): Longitude in degrees, between -180 and 180.
        length (int, optional): Number of characters of the result. Defaults to 12.

    Raises:
        InvalidArgumentError: If length is lower than 1.

    Returns:
        str: Geohash of the cell containing the point.

    Examples:
        >>> from geohash_cells import encode
        >>> encode(38.89710201881826, -77.03669792041183)
        'dqcjqcp84c6e'
        >>> encode(-25.382708, -49.265506, 6)
        '6gkzwg'
    """
    if length < 1:
        raise InvalidArgumentError(f"Geohash length must be greater than zero (got {length}).")

    even_bit = True
    lat_min = -90.0
    lat_max = 90.0
    lon_min = -180.0
    lon_max = 180.0

    characters = []
    for _ in range(length):
        index = 0
        for _ in range(5):
            index <<= 1
            if even_bit:
                lon_mid = (lon_min + lon_max) / 2
                if longitude > lon_mid:
                    index |= 1
                    lon_min = lon_mid
                else:
                    lon_max = lon_mid
            else:
                lat_mid = (lat_min + lat_max) / 2
                if latitude > lat_mid:
                    index |= 1
                    lat_min = lat_mid
                else:
                    lat_max = lat_mid
            even_bit = not even_bit
        characters.append(BASE32[index])

    return "".join(characters)


def decode(geohash: str) -> tuple[float, float]:
    """
    Decode a geohash into the centre of its cell.

    Args:
        geohash (str): Geohash to decode. Empty geohash decodes to `(0.0, 0.0)`.

    Raises:
        InvalidCharacterError: If any character is outside of the geohash alphabet.

    Returns:
        tuple[float, float]: Latitude and longitude of the cell centre.

    Examples:
        >>> from geohash_cells import decode
        >>> decode("")
        (0.0, 0.0)
        >>> decode("u4")
        (59.0625, 5.625)
    """
    lon_min, lat_min, lon_max, lat_max = geohash_bounds(geohash)
    return (lat_min + lat_max) / 2, (lon_min + lon_max) / 2


def _bits(length: int) -> tuple[int, int]:
    if length < 0:
        raise InvalidArgumentError(f"Geohash length cannot be negative (got {length}).")
    total_bits = length * 5
    latitude_bits = total_bits // 2
    return latitude_bits, total_bits - latitude_bits


def height_degrees(length: int) -> float:
    """Height in degrees of every geohash cell of a given length."""
    latitude_bits, _ = _bits(length)
    return 180.0 / (1 << latitude_bits)


def width_degrees(length: int) -> float:
    """Width in degrees of every geohash cell of a given length."""
    _, longitude_bits = _bits(length)
    return 360.0 / (1 << longitude_bits)
