import pytest

from airport_dashboard.data.mock_airports import load_mock_catalog
from airport_dashboard.models.airport import Airport, Coordinates
from airport_dashboard.models.catalog import AirportCatalog
from airport_dashboard.models.viewport_bounds import ViewportBounds
from airport_dashboard.sync.coordinator import DashboardCoordinator


def make_airport(airport_id: str, latitude: float, longitude: float, code: str = None, **kwargs) -> Airport:
    """Build a minimal airport at the given position."""
    fields = dict(
        id=airport_id,
        code=code or f"T{airport_id}",
        name=f"Test airport {airport_id}",
        city="X",
        country="Y",
        coordinates=Coordinates(latitude=latitude, longitude=longitude),
        elevation=0,
        runways=1,
        type="regional",
    )
    fields.update(kwargs)
    return Airport(**fields)


@pytest.fixture
def airport_factory():
    """Return the `make_airport` helper."""
    return make_airport


@pytest.fixture
def mock_catalog() -> AirportCatalog:
    """Return a fresh copy of the seed catalog."""
    return load_mock_catalog()


@pytest.fixture
def sample_airports(mock_catalog):
    """Return the first five seed airports (LAX, SFO, JFK, ORD, ATL)."""
    return mock_catalog.airports.all()[:5]


@pytest.fixture
def dateline_airports():
    """Airports on both sides of the antimeridian plus one far away."""
    return [
        make_airport('a', 10, 170, code='AAA'),
        make_airport('b', 10, -175, code='BBB'),
        make_airport('c', 10, -20, code='CCC'),
    ]


@pytest.fixture
def west_coast_bounds() -> ViewportBounds:
    return ViewportBounds(north=42, south=32, west=-125, east=-110)


@pytest.fixture
def dateline_bounds() -> ViewportBounds:
    return ViewportBounds(north=20, south=0, west=160, east=-170)


@pytest.fixture
def coordinator(mock_catalog):
    """Create a coordinator over the seed catalog, closed after the test."""
    with DashboardCoordinator(mock_catalog) as c:
        yield c
