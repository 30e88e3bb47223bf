"""City map loading from CSV files."""

import csv
import math
from dataclasses import dataclass, field
from pathlib import Path

from src.pathfinding.graph import Graph

TRUE_VALUES = {"1", "true", "yes", "y", "oui"}


@dataclass
class City:
    """City data."""

    name: str
    lat: float
    lon: float


@dataclass
class CityMap:
    """
    Road network between cities.

    Nodes are city names, edge weights are road distances in km.
    Coordinates are optional and only used for the A* straight-line
    estimate.
    """

    graph: Graph = field(default_factory=Graph)
    cities: dict[str, City] = field(default_factory=dict)
    rows_skipped: int = 0

    @property
    def coordinates(self) -> dict[str, tuple[float, float]]:
        """City name -> (lat, lon)."""
        return {name: (city.lat, city.lon) for name, city in self.cities.items()}

    def load_cities(self, filepath: str | Path) -> int:
        """
        Load cities as nodes from CSV.

        Expected columns: name, lat, lon

        Returns:
            Number of cities loaded
        """
        filepath = Path(filepath)
        loaded = 0

        with open(filepath, encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                try:
                    name = row["name"].strip()
                    if not name:
                        raise ValueError("empty city name")
                    lat = float(row["lat"])
                    lon = float(row["lon"])
                    if not (math.isfinite(lat) and math.isfinite(lon)):
                        raise ValueError("non-finite coordinates")
                    city = City(name=name, lat=lat, lon=lon)
                except (ValueError, KeyError, AttributeError):
                    self.rows_skipped += 1
                    continue

                self.cities[name] = city
                self.graph.add_node(name)
                loaded += 1

        return loaded

    def load_roads(self, filepath: str | Path) -> int:
        """
        Load roads as edges from CSV.

        Expected columns: from, to, distance
        Optional column: two_way (1/true/yes adds the reverse edge too)

        Rows with a negative or unreadable distance are skipped.

        Returns:
            Number of roads loaded
        """
        filepath = Path(filepath)
        loaded = 0

        with open(filepath, encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                try:
                    source = row["from"].strip()
                    destination = row["to"].strip()
                    if not source or not destination:
                        raise ValueError("empty endpoint")
                    distance = float(row["distance"])
                    if distance.is_integer():
                        distance = int(distance)
                    two_way = (row.get("two_way") or "").strip().lower() in TRUE_VALUES

                    if two_way:
                        self.graph.add_two_way_edge(source, destination, distance)
                    else:
                        self.graph.add_edge(source, destination, distance)
                except (ValueError, KeyError, AttributeError, TypeError):
                    # InvalidWeightError is a ValueError
                    self.rows_skipped += 1
                    continue

                loaded += 1

        return loaded

    @classmethod
    def from_files(cls, roads_file: str | Path, cities_file: str | Path | None = None) -> "CityMap":
        """Build a city map from a roads file and an optional cities file."""
        city_map = cls()
        if cities_file is not None:
            city_map.load_cities(cities_file)
        city_map.load_roads(roads_file)
        return city_map
