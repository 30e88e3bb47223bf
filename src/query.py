"""
Query boundary between the pathfinding engine and its front ends.

Front ends (CLI, web form) pass raw text in and get a QueryResult back.
Every expected failure (unknown place, unknown algorithm, no route) comes
back as a QueryResult status instead of an exception.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from src import config
from src.geo import CityMap, NameResolver, StraightLineEstimate
from src.pathfinding import (
    AStarSearch,
    Graph,
    InvalidInputError,
    NoPathFoundError,
    UnknownAlgorithmError,
    get_strategy,
    normalize_algorithm_name,
)


class QueryStatus(str, Enum):
    OK = "ok"
    NO_PATH = "no_path"
    INVALID_INPUT = "invalid_input"
    UNKNOWN_ALGORITHM = "unknown_algorithm"


@dataclass
class QueryResult:
    """Result of a query, ready for display."""

    status: QueryStatus
    algorithm: str
    source: str | None = None
    destination: str | None = None
    distance: float | None = None  # None unless status is OK
    path: list = field(default_factory=list)
    message: str = ""
    suggestions: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status is QueryStatus.OK

    @property
    def display_distance(self) -> float:
        """Distance for display, -1 when there is no path."""
        return self.distance if self.found else -1

    @property
    def num_hops(self) -> int:
        return max(len(self.path) - 1, 0)


def build_graph() -> Graph:
    """Build the sample graph used when no city map is available."""
    return Graph.from_edges([
        ("A", "B", 10),
        ("A", "C", 15),
        ("B", "D", 12),
        ("C", "D", 5),
        ("B", "E", 2),
        ("D", "E", 10),
    ])


class CityPathFinder:
    """
    Answer shortest-path queries typed by a user.

    Resolves the typed names to nodes, picks the search strategy by name
    and turns the outcome into a QueryResult. When coordinates are known,
    A* is guided by the straight-line distance.
    """

    def __init__(
        self,
        graph: Graph,
        coordinates: Mapping | None = None,
        fuzzy_threshold: int = config.FUZZY_THRESHOLD,
        max_suggestions: int = config.MAX_SUGGESTIONS,
    ):
        """
        Initialize the path finder.

        Args:
            graph: Graph whose nodes are place names
            coordinates: Optional node -> (lat, lon) for the A* estimate
            fuzzy_threshold: Minimum score for name suggestions (0-100)
            max_suggestions: Maximum number of name suggestions
        """
        self.graph = graph
        self.coordinates = dict(coordinates or {})
        self.resolver = NameResolver(
            graph.nodes(), threshold=fuzzy_threshold, max_suggestions=max_suggestions
        )

    @classmethod
    def from_city_map(cls, city_map: CityMap, **kwargs) -> "CityPathFinder":
        return cls(city_map.graph, coordinates=city_map.coordinates, **kwargs)

    def strategy_options(self, algorithm: str) -> dict:
        if algorithm == AStarSearch.name and self.coordinates:
            return {"estimate": StraightLineEstimate(self.coordinates)}
        return {}

    def run_query(self, algorithm_name: str, source_text: str, destination_text: str) -> QueryResult:
        """
        Find the shortest path between two typed place names.

        Args:
            algorithm_name: "dijkstra" or "astar" (display names accepted)
            source_text: Starting place as typed
            destination_text: Destination as typed

        Returns:
            QueryResult; never raises for bad input or missing routes
        """
        try:
            algorithm = normalize_algorithm_name(algorithm_name)
        except UnknownAlgorithmError as e:
            return QueryResult(
                status=QueryStatus.UNKNOWN_ALGORITHM,
                algorithm=algorithm_name,
                message=str(e),
            )

        try:
            source = self.resolver.resolve(source_text)
            destination = self.resolver.resolve(destination_text)
        except InvalidInputError as e:
            return QueryResult(
                status=QueryStatus.INVALID_INPUT,
                algorithm=algorithm,
                message=str(e),
                suggestions=e.suggestions,
            )

        strategy = get_strategy(algorithm, **self.strategy_options(algorithm))
        result = strategy.search(self.graph, source, destination)

        try:
            path = result.path_to(destination)
        except NoPathFoundError as e:
            return QueryResult(
                status=QueryStatus.NO_PATH,
                algorithm=algorithm,
                source=source,
                destination=destination,
                message=str(e),
            )

        distance = result.distance_to(destination)
        return QueryResult(
            status=QueryStatus.OK,
            algorithm=algorithm,
            source=source,
            destination=destination,
            distance=distance,
            path=path,
            message=f"Shortest distance from {source} to {destination}: {distance}",
        )


def run_query(
    algorithm_name: str,
    source_text: str,
    destination_text: str,
    graph: Graph | None = None,
) -> QueryResult:
    """Run one query against graph (the sample graph by default)."""
    finder = CityPathFinder(graph if graph is not None else build_graph())
    return finder.run_query(algorithm_name, source_text, destination_text)


def format_path(path: list, separator: str = " → ") -> str:
    """Format a path for display."""
    return separator.join(str(node) for node in path)
