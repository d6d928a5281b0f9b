"""Tests for CLI."""

import pytest
from parametrization import Parametrization as P
from typer.testing import CliRunner

from geohash_cells import __app_name__, __version__, cli

runner = CliRunner()


def test_version() -> None:
    """Test if version is properly returned."""
    result = runner.invoke(cli.app, ["--version"])

    assert result.exit_code == 0
    assert f"{__app_name__} {__version__}\n" in result.stdout


@P.parameters("args", "expected_result")  # type: ignore
@P.case("Default length", ["38.89710201881826,-77.03669792041183"], "dqcjqcp84c6e")  # type: ignore
@P.case("Spaces", ["38.89710201881826, -77.03669792041183"], "dqcjqcp84c6e")  # type: ignore
@P.case("Length", ["--length", "6", "--", "-25.382708,-49.265506"], "6gkzwg")  # type: ignore
@P.case("Length short", ["-l", "6", "--", "-25.382708,-49.265506"], "6gkzwg")  # type: ignore
@P.case("Positive coordinates", ["20,31"], "sew1c2vs2q5r")  # type: ignore
def test_encode(args: list[str], expected_result: str) -> None:
    """Test if points are encoded."""
    result = runner.invoke(cli.app, ["encode", *args])

    assert result.exit_code == 0
    assert result.stdout.strip() == expected_result


@P.parameters("args")  # type: ignore
@P.case("Not a number", ["abc,def"])  # type: ignore
@P.case("Single value", ["38.8"])  # type: ignore
@P.case("Three values", ["38.8,-77.0,1"])  # type: ignore
@P.case("Zero length", ["--length", "0", "38.8,-77.0"])  # type: ignore
@P.case("Too long", ["--length", "13", "38.8,-77.0"])  # type: ignore
def test_encode_wrong_arguments(args: list[str]) -> None:
    """Test if wrong encode arguments are rejected."""
    result = runner.invoke(cli.app, ["encode", *args])

    assert result.exit_code == 2


def test_decode() -> None:
    """Test if geohash is decoded into the cell centre."""
    result = runner.invoke(cli.app, ["decode", "dqcjqcp84c6e"])

    assert result.exit_code == 0
    latitude, longitude = (float(value) for value in result.stdout.split())
    assert latitude == pytest.approx(38.89710201881826, abs=1e-9)
    assert longitude == pytest.approx(-77.03669792041183, abs=1e-9)


def test_decode_bounds() -> None:
    """Test if geohash is decoded into the cell bounds."""
    result = runner.invoke(cli.app, ["decode", "7", "--bounds"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "-45.0 -45.0 0.0 0.0"


def test_decode_invalid_character() -> None:
    """Test if invalid geohash ends with an error."""
    result = runner.invoke(cli.app, ["decode", "dqcja"])

    assert result.exit_code == 1


@P.parameters("direction", "expected_result")  # type: ignore
@P.case("Top", "top", "u1pc")  # type: ignore
@P.case("Bottom", "bottom", "u0zz")  # type: ignore
@P.case("Left upper case", "LEFT", "u1p8")  # type: ignore
@P.case("Right", "right", "u300")  # type: ignore
def test_adjacent(direction: str, expected_result: str) -> None:
    """Test if adjacent cells are found."""
    result = runner.invoke(cli.app, ["adjacent", "u1pb", direction])

    assert result.exit_code == 0
    assert result.stdout.strip() == expected_result


def test_adjacent_unknown_direction() -> None:
    """Test if unknown direction is rejected."""
    result = runner.invoke(cli.app, ["adjacent", "u1pb", "up"])

    assert result.exit_code == 2


def test_adjacent_invalid_character() -> None:
    """Test if invalid geohash ends with an error."""
    result = runner.invoke(cli.app, ["adjacent", "u1pa", "top"])

    assert result.exit_code == 1


def test_neighbours() -> None:
    """Test if all neighbours are printed."""
    result = runner.invoke(cli.app, ["neighbours", "dqcjqc"])

    assert result.exit_code == 0
    for neighbour in ("dqcjqf", "dqcjqb", "dqcjr1", "dqcjq9", "dqcjqd", "dqcjr4", "dqcjr0", "dqcjq8"):
        assert neighbour in result.stdout


@P.parameters("distance", "expected_result")  # type: ignore
@P.case("Zero", "0", "11")  # type: ignore
@P.case("Medium", "3900", "5")  # type: ignore
@P.case("Very large", "10007060", "1")  # type: ignore
def test_precision(distance: str, expected_result: str) -> None:
    """Test if hash length is calculated."""
    result = runner.invoke(cli.app, ["precision", distance])

    assert result.exit_code == 0
    assert result.stdout.strip() == expected_result


def test_cover() -> None:
    """Test if covering geohashes are printed in order."""
    result = runner.invoke(cli.app, ["cover", "42.3583,-71.0603,45,-73"])

    assert result.exit_code == 0
    assert result.stdout.split() == ["drs", "drt", "dru", "drv"]


def test_cover_min_hashes() -> None:
    """Test if minimal number of hashes is passed to the cover."""
    result = runner.invoke(cli.app, ["cover", "--min-hashes", "5", "42.3583,-71.0603,45,-73"])

    assert result.exit_code == 0
    hashes = result.stdout.split()
    assert len(hashes) >= 5
    assert all(len(geohash) == 4 for geohash in hashes)


def test_cover_wkt() -> None:
    """Test if cover can be printed as a WKT geometry."""
    result = runner.invoke(cli.app, ["cover", "--wkt", "--", "0,135,10,145"])

    assert result.exit_code == 0
    assert result.stdout.startswith("POLYGON")


def test_cover_non_positive_min_hashes() -> None:
    """Test if non-positive minimal number of hashes ends with an error."""
    result = runner.invoke(cli.app, ["cover", "-m", "0", "0,135,10,145"])

    assert result.exit_code == 1


def test_cover_wrong_bounding_box() -> None:
    """Test if wrong bounding box is rejected."""
    result = runner.invoke(cli.app, ["cover", "0,135,10"])

    assert result.exit_code == 2


def test_geometry() -> None:
    """Test if geohashes are merged into a WKT geometry."""
    result = runner.invoke(cli.app, ["geometry", "wc,x1"])

    assert result.exit_code == 0
    assert result.stdout.startswith("POLYGON")


def test_geometry_invalid_geohash() -> None:
    """Test if invalid geohash is rejected."""
    result = runner.invoke(cli.app, ["geometry", "wc,wa"])

    assert result.exit_code == 2
