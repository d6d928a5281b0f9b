"""Common components for tests."""

import pytest

WHITE_HOUSE_LATITUDE = 38.89710201881826
WHITE_HOUSE_LONGITUDE = -77.03669792041183
WHITE_HOUSE_GEOHASH = "dqcjqcp84c6e"

BOSTON_BOUNDING_BOX = (42.3583, -71.0603, 45.0, -73.0)
BOSTON_COVER = {"drv", "drs", "drt", "dru"}


@pytest.fixture()  # type: ignore
def white_house_point() -> tuple[float, float]:
    """White House coordinates."""
    return WHITE_HOUSE_LATITUDE, WHITE_HOUSE_LONGITUDE


@pytest.fixture()  # type: ignore
def boston_bounding_box() -> tuple[float, float, float, float]:
    """Bounding box north of Boston in the top, left, bottom, right order."""
    return BOSTON_BOUNDING_BOX


@pytest.fixture()  # type: ignore
def boston_cover() -> set[str]:
    """Geohashes covering the bounding box north of Boston."""
    return set(BOSTON_COVER)


@pytest.fixture()  # type: ignore
def white_house_geohash() -> str:
    """White House geohash of the default length."""
    return WHITE_HOUSE_GEOHASH
