"""
Adjacency.

This module finds geohashes of the cells sharing an edge or a corner with a given cell
without decoding it into coordinates.

Based on https://github.com/davetroy/geohash-js (MIT Licence).
"""

from enum import Enum
from types import MappingProxyType
from typing import Union

from geohash_cells._constants import BASE32
from geohash_cells._exceptions import InvalidArgumentError
from geohash_cells._geohash_parser import validate_geohash

__all__ = ["Direction", "adjacent_hash", "neighbours"]


class Direction(str, Enum):
    """Enum of directions on the geohash grid."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def _missing_(cls, value):  # type: ignore
        value = str(value).lower()
        for member in cls:
            if member.value == value:
                return member
        return None


EVEN = 0
ODD = 1

_EVEN_NEIGHBOURS = {
    Direction.RIGHT: "bc01fg45238967deuvhjyznpkmstqrwx",
    Direction.LEFT: "238967debc01fg45kmstqrwxuvhjyznp",
    Direction.TOP: "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
    Direction.BOTTOM: "14365h7k9dcfesgujnmqp0r2twvyx8zb",
}

_EVEN_BORDERS = {
    Direction.RIGHT: "bcfguvyz",
    Direction.LEFT: "0145hjnp",
    Direction.TOP: "prxz",
    Direction.BOTTOM: "028b",
}

# Odd length cells are the even ones mirrored over the diagonal.
_MIRRORED = {
    Direction.RIGHT: Direction.TOP,
    Direction.LEFT: Direction.BOTTOM,
    Direction.TOP: Direction.RIGHT,
    Direction.BOTTOM: Direction.LEFT,
}

NEIGHBOURS = MappingProxyType(
    {
        **{(direction, EVEN): table for direction, table in _EVEN_NEIGHBOURS.items()},
        **{
            (direction, ODD): _EVEN_NEIGHBOURS[mirrored]
            for direction, mirrored in _MIRRORED.items()
        },
    }
)

BORDERS = MappingProxyType(
    {
        **{(direction, EVEN): frozenset(border) for direction, border in _EVEN_BORDERS.items()},
        **{
            (direction, ODD): frozenset(_EVEN_BORDERS[mirrored])
            for direction, mirrored in _MIRRORED.items()
        },
    }
)


def adjacent_hash(geohash: str, direction: Union[Direction, str]) -> str:
    """
    Find the geohash of the cell next to the given one.

    Cells on the edge of the world wrap around: the right neighbour of a cell touching
    the 180th meridian lies next to the -180th meridian.

    Args:
        geohash (str): Geohash of the cell. Cannot be empty.
        direction (Union[Direction, str]): Direction of the move. Can be passed as a string
            value (`top`, `bottom`, `left` or `right`).

    Raises:
        InvalidArgumentError: If the geohash is empty.
        InvalidCharacterError: If any character is outside of the geohash alphabet.

    Returns:
        str: Geohash of the adjacent cell with the same length.

    Examples:
        >>> from geohash_cells import Direction, adjacent_hash
        >>> adjacent_hash("u1pb", Direction.BOTTOM)
        'u0zz'
        >>> adjacent_hash("u1pb", "right")
        'u300'
    """
    if not geohash:
        raise InvalidArgumentError(
            "Adjacency has no meaning for an empty geohash covering the whole world."
        )
    try:
        parsed_direction = Direction(direction)
    except ValueError:
        raise InvalidArgumentError(f"Unknown direction: {direction!r}") from None
    return _adjacent_hash(validate_geohash(geohash), parsed_direction)


def _adjacent_hash(geohash: str, direction: Direction) -> str:
    last_char = geohash[-1]
    parity = ODD if len(geohash) % 2 else EVEN
    base = geohash[:-1]
    if base and last_char in BORDERS[direction, parity]:
        base = _adjacent_hash(base, direction)
    return base + BASE32[NEIGHBOURS[direction, parity].index(last_char)]


def neighbours(geohash: str) -> list[str]:
    """
    Find geohashes of all eight cells surrounding the given one.

    Args:
        geohash (str): Geohash of the cell. Cannot be empty.

    Raises:
        InvalidArgumentError: If the geohash is empty.
        InvalidCharacterError: If any character is outside of the geohash alphabet.

    Returns:
        list[str]: Geohashes in the order: top, bottom, right, left, top-right, top-left,
            bottom-right, bottom-left.
    """
    top = adjacent_hash(geohash, Direction.TOP)
    bottom = adjacent_hash(geohash, Direction.BOTTOM)
    return [
        top,
        bottom,
        adjacent_hash(geohash, Direction.RIGHT),
        adjacent_hash(geohash, Direction.LEFT),
        adjacent_hash(top, Direction.RIGHT),
        adjacent_hash(top, Direction.LEFT),
        adjacent_hash(bottom, Direction.RIGHT),
        adjacent_hash(bottom, Direction.LEFT),
    ]
