"""CLI module for geohash operations."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated, Optional, cast

import click
import typer

from geohash_cells._constants import DEFAULT_HASH_LENGTH, MAX_HASH_LENGTH
from geohash_cells._exceptions import InvalidArgumentError, InvalidCharacterError
from geohash_cells.adjacency import Direction

app = typer.Typer(
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
    no_args_is_help=True,
)

NEIGHBOUR_NAMES = (
    "top",
    "bottom",
    "right",
    "left",
    "top-right",
    "top-left",
    "bottom-right",
    "bottom-left",
)


def _version_callback(value: bool) -> None:
    if value:
        from geohash_cells import __app_name__, __version__

        typer.echo(f"{__app_name__} {__version__}")
        raise typer.Exit()


@contextmanager
def _report_library_errors() -> Iterator[None]:
    try:
        yield
    except (InvalidArgumentError, InvalidCharacterError) as ex:
        from rich.console import Console

        err_console = Console(stderr=True)
        err_console.print(ex)
        raise typer.Exit(code=1) from None


def _parse_floats(value: str, expected_count: int) -> tuple[float, ...]:
    parsed_values = tuple(float(x.strip()) for x in value.split(","))
    if len(parsed_values) != expected_count:
        raise ValueError(f"Expected {expected_count} values, got {len(parsed_values)}")
    return parsed_values


class PointParser(click.ParamType):  # type: ignore
    """Parser for a point in `lat,lon` form."""

    name = "LAT,LON"

    def convert(self, value, param=None, ctx=None):  # type: ignore
        """Convert parameter value."""
        if isinstance(value, tuple):
            return value
        try:
            return _parse_floats(value, expected_count=2)
        except ValueError:  # ValueError raised when passing non-numbers to float()
            raise typer.BadParameter(
                "Cannot parse provided point."
                " Valid value must contain 2 floating point numbers"
                " (latitude and longitude) separated by a comma."
            ) from None


class BboxParser(click.ParamType):  # type: ignore
    """Parser for a bounding box in `top,left,bottom,right` form."""

    name = "TOP,LEFT,BOTTOM,RIGHT"

    def convert(self, value, param=None, ctx=None):  # type: ignore
        """Convert parameter value."""
        if isinstance(value, tuple):
            return value
        try:
            return _parse_floats(value, expected_count=4)
        except ValueError:
            raise typer.BadParameter(
                "Cannot parse provided bounding box."
                " Valid value must contain 4 floating point numbers"
                " separated by commas."
            ) from None


class GeohashGeometryParser(click.ParamType):  # type: ignore
    """Parser for geometry in comma separated Geohash form."""

    name = "TEXT (Geohash)"

    def convert(self, value, param=None, ctx=None):  # type: ignore
        """Convert parameter value."""
        if not isinstance(value, str):
            return value

        from geohash_cells.geometry import geohashes_to_geometry

        try:
            return geohashes_to_geometry(
                geohash.strip() for geohash in value.split(",") if geohash.strip()
            )
        except (InvalidArgumentError, InvalidCharacterError):
            raise typer.BadParameter(f"Cannot parse provided Geohash value: {value}") from None


@app.callback()  # type: ignore
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show the application's version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Geohash Cells CLI.

    Encodes and decodes geohashes, finds neighbouring cells and covers bounding boxes
    with geohash cells.
    """


@app.command()  # type: ignore
def encode(
    point: Annotated[
        str,
        typer.Argument(
            help=(
                "Point to encode in the [bold dark_orange]lat,lon[/bold dark_orange] format."
                " Put [bold bright_cyan]--[/bold bright_cyan] before negative values."
            ),
            click_type=PointParser(),
            metavar="LAT,LON",
            show_default=False,
        ),
    ],
    length: Annotated[
        int,
        typer.Option(
            "--length",
            "-l",
            help="Number of characters of the geohash.",
            min=1,
            max=MAX_HASH_LENGTH,
        ),
    ] = DEFAULT_HASH_LENGTH,
) -> None:
    """Encode a point into a geohash."""
    from geohash_cells.codec import encode as encode_point

    latitude, longitude = cast("tuple[float, float]", point)
    typer.echo(encode_point(latitude, longitude, length))


@app.command()  # type: ignore
def decode(
    geohash: Annotated[
        str,
        typer.Argument(help="Geohash to decode.", show_default=False),
    ],
    bounds: Annotated[
        bool,
        typer.Option(
            "--bounds/",
            help=(
                "Print the cell bounds ([bold green]lon_min lat_min lon_max lat_max[/bold green])"
                " instead of the cell centre."
            ),
            show_default=False,
        ),
    ] = False,
) -> None:
    """Decode a geohash into the centre of its cell."""
    from geohash_cells.codec import decode as decode_geohash
    from geohash_cells.codec import geohash_bounds

    with _report_library_errors():
        if bounds:
            typer.echo(" ".join(str(value) for value in geohash_bounds(geohash)))
        else:
            latitude, longitude = decode_geohash(geohash)
            typer.echo(f"{latitude} {longitude}")


@app.command()  # type: ignore
def adjacent(
    geohash: Annotated[
        str,
        typer.Argument(help="Geohash of the starting cell.", show_default=False),
    ],
    direction: Annotated[
        Direction,
        typer.Argument(
            help="Direction of the move.",
            case_sensitive=False,
            show_default=False,
        ),
    ],
) -> None:
    """Find the geohash of the adjacent cell."""
    from geohash_cells.adjacency import adjacent_hash

    with _report_library_errors():
        typer.echo(adjacent_hash(geohash, direction))


@app.command()  # type: ignore
def neighbours(
    geohash: Annotated[
        str,
        typer.Argument(help="Geohash of the central cell.", show_default=False),
    ],
) -> None:
    """Show geohashes of all eight surrounding cells."""
    from rich import print as rprint
    from rich.table import Table

    from geohash_cells.adjacency import neighbours as find_neighbours

    with _report_library_errors():
        found_neighbours = find_neighbours(geohash)

    table = Table("Direction", "Geohash", title=geohash.lower())
    for name, neighbour in zip(NEIGHBOUR_NAMES, found_neighbours):
        table.add_row(name, neighbour)
    rprint(table)


@app.command()  # type: ignore
def precision(
    distance_metres: Annotated[
        float,
        typer.Argument(
            help=(
                "Maximal accepted distance in metres between a point and the centre"
                " of its cell."
            ),
            metavar="METRES",
            min=0,
            show_default=False,
        ),
    ],
) -> None:
    """Find the shortest geohash length for a given cell size."""
    from geohash_cells.precision import min_hash_length_for_cell_centre_separation

    typer.echo(min_hash_length_for_cell_centre_separation(distance_metres))


@app.command()  # type: ignore
def cover(
    bbox: Annotated[
        str,
        typer.Argument(
            help=(
                "Bounding box in the"
                " [bold dark_orange]top,left,bottom,right[/bold dark_orange] format."
                " Boxes with longitudes more than 180 degrees apart cross the antimeridian."
            ),
            click_type=BboxParser(),
            metavar="TOP,LEFT,BOTTOM,RIGHT",
            show_default=False,
        ),
    ],
    min_hashes: Annotated[
        int,
        typer.Option(
            "--min-hashes",
            "-m",
            help="Minimal number of geohashes covering the bounding box.",
        ),
    ] = 1,
    wkt_result: Annotated[
        bool,
        typer.Option(
            "--wkt/",
            help="Print the union of the covering cells in the WKT format instead of geohashes.",
            show_default=False,
        ),
    ] = False,
) -> None:
    """Cover a bounding box with geohash cells."""
    from geohash_cells.coverage import hashes_to_cover_bounding_box
    from geohash_cells.geometry import geohashes_to_geometry

    top_lat, left_lon, bottom_lat, right_lon = cast("tuple[float, float, float, float]", bbox)

    with _report_library_errors():
        hashes = hashes_to_cover_bounding_box(
            top_lat, left_lon, bottom_lat, right_lon, min_hashes=min_hashes
        )

    if wkt_result:
        typer.echo(geohashes_to_geometry(hashes).wkt)
    else:
        for geohash in sorted(hashes):
            typer.echo(geohash)


@app.command()  # type: ignore
def geometry(
    geohashes: Annotated[
        str,
        typer.Argument(
            help="Geohashes to merge into a single geometry. Separate multiple values with a comma.",
            click_type=GeohashGeometryParser(),
            metavar="GEOHASHES",
            show_default=False,
        ),
    ],
) -> None:
    """Print the union of geohash cells in the WKT format."""
    from shapely.geometry.base import BaseGeometry

    typer.echo(cast(BaseGeometry, geohashes).wkt)
