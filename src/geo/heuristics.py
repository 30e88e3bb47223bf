"""A* heuristics built from node coordinates."""

from collections.abc import Mapping

from .distance import haversine


class StraightLineEstimate:
    """
    Estimate the remaining road distance as the great-circle distance.

    Admissible as long as every edge weight is at least the great-circle
    distance between its endpoints, which holds for road distances in km.
    Nodes without coordinates are estimated at 0, which keeps the estimate
    admissible.

    Usage:
        estimate = StraightLineEstimate(city_map.coordinates)
        AStarSearch(estimate=estimate)
    """

    def __init__(self, coordinates: Mapping, scale: float = 1.0):
        """
        Args:
            coordinates: Node -> (lat, lon) in degrees
            scale: Multiplier converting km to the graph's weight unit
        """
        self.coordinates = coordinates
        self.scale = scale

    def __call__(self, node, destination) -> float:
        start = self.coordinates.get(node)
        end = self.coordinates.get(destination)
        if start is None or end is None:
            return 0.0
        return haversine(start[0], start[1], end[0], end[1]) * self.scale
