"""Geographic helpers: distances, A* estimates, city maps and name lookup."""

from .city_map import City, CityMap
from .city_resolver import NameResolver, normalize_name
from .distance import haversine
from .heuristics import StraightLineEstimate

__all__ = [
    "haversine",
    "StraightLineEstimate",
    "City",
    "CityMap",
    "NameResolver",
    "normalize_name",
]
