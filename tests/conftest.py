"""Shared fixtures."""

from pathlib import Path

import pytest

from src.geo import CityMap
from src.pathfinding import Graph
from src.query import build_graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def sample_graph() -> Graph:
    """A->B(10), A->C(15), B->D(12), C->D(5), B->E(2), D->E(10)."""
    return build_graph()


@pytest.fixture
def city_map(data_dir: Path) -> CityMap:
    """The French city map shipped in data/."""
    return CityMap.from_files(data_dir / "roads.csv", data_dir / "cities.csv")
