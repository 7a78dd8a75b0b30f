import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest


# Ensure project root is importable for tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


from services.pacer.preprocessing import PacerPreprocessor
from services.pacer_service import PacerService


@pytest.fixture
def pacer_service() -> PacerService:
    return PacerService()


@pytest.fixture
def route_factory():
    """Build a route from explicit cumulative distances and elevations."""
    preprocessor = PacerPreprocessor()

    def _make(distances, elevations=None, name="Test Route"):
        distances = np.asarray(distances, dtype=float)
        if elevations is None:
            elevations = np.zeros_like(distances)
        df = pd.DataFrame(
            {
                "lat": 45.0 + distances * 1e-5,
                "lon": np.full_like(distances, 5.0),
                "elevationM": np.asarray(elevations, dtype=float),
                "distanceM": distances,
            }
        )
        return preprocessor.build_route(name, df)

    return _make


@pytest.fixture
def flat_10k(route_factory):
    """Flat 10,000 m route sampled every 100 m."""
    return route_factory(np.arange(0, 10001, 100))


@pytest.fixture
def single_climb_5k(route_factory):
    """Flat 5,000 m route with a +100 m climb between 2,000 and 3,000 m."""
    distances = np.arange(0, 5001, 100)
    elevations = np.clip(distances - 2000, 0, 1000) / 10.0
    return route_factory(distances, elevations)


@pytest.fixture
def alternating_route(route_factory):
    """3,000 m alternating flat/climb every 300 m (climbs at 5 %)."""
    distances = np.arange(0, 3001, 100)
    elevations = [0.0]
    for d in distances[:-1]:
        climbing = (int(d) // 300) % 2 == 1
        elevations.append(elevations[-1] + (5.0 if climbing else 0.0))
    return route_factory(distances, elevations)


@pytest.fixture
def hilly_route(route_factory):
    """Irregular rolling route of about 7.3 km."""
    distances = np.arange(0, 7345, 37.0)
    distances = np.append(distances, 7345.0)
    elevations = 300 + 40 * np.sin(distances / 700) + 15 * np.sin(distances / 97)
    return route_factory(distances, elevations, name="Rolling Hills")
