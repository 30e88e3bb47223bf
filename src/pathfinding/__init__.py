"""Shortest-path engine: graph, search strategies and their results."""

from .astar import AStarSearch, zero_heuristic
from .base import SearchStrategy
from .dijkstra import UniformCostSearch
from .errors import (
    InvalidInputError,
    InvalidWeightError,
    NoPathFoundError,
    PathfindingError,
    UnknownAlgorithmError,
)
from .graph import Graph
from .result import INFINITY, PathResult
from .strategy import available_algorithms, get_strategy, normalize_algorithm_name

__all__ = [
    "Graph",
    "PathResult",
    "INFINITY",
    "SearchStrategy",
    "UniformCostSearch",
    "AStarSearch",
    "zero_heuristic",
    "get_strategy",
    "available_algorithms",
    "normalize_algorithm_name",
    "PathfindingError",
    "InvalidWeightError",
    "NoPathFoundError",
    "UnknownAlgorithmError",
    "InvalidInputError",
]
