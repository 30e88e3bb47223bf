"""Search results and path reconstruction."""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .errors import NoPathFoundError

# Distance of a node the search never reached
INFINITY = math.inf


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of one search call.

    distances maps every node the search knows about to its shortest
    distance from the source (INFINITY when unreached). predecessors maps a
    reached node to the node before it on its shortest path; the source and
    unreached nodes have no entry. destination is set for point-to-point
    searches and None for single-source ones. None is never a node, since
    networkx refuses None as a node.
    """

    source: Any
    distances: Mapping[Any, float] = field(default_factory=dict)
    predecessors: Mapping[Any, Any] = field(default_factory=dict)
    destination: Any = None

    def __post_init__(self):
        # Callers get read-only views; the tables belong to this result
        object.__setattr__(self, "distances", MappingProxyType(dict(self.distances)))
        object.__setattr__(self, "predecessors", MappingProxyType(dict(self.predecessors)))

    @property
    def found(self) -> bool:
        """True if the destination of a point-to-point search was reached."""
        if self.destination is None:
            return False
        return self.is_reached(self.destination)

    def is_reached(self, node) -> bool:
        return self.distance_to(node) < INFINITY

    def distance_to(self, node) -> float:
        """Shortest distance to node, INFINITY if it was not reached."""
        return self.distances.get(node, INFINITY)

    def path_to(self, destination=None) -> list:
        """
        Rebuild the path from the source to destination.

        Walks the predecessor table backwards and stops only on reaching
        the source. A node with no predecessor before that point means the
        destination is not connected.

        Args:
            destination: Target node (defaults to the search's destination)

        Returns:
            Nodes from source to destination, both included

        Raises:
            NoPathFoundError: If destination was not reached
        """
        if destination is None:
            destination = self.destination
        if not self.is_reached(destination):
            raise NoPathFoundError(self.source, destination)

        path = [destination]
        current = destination
        seen = {destination}
        while current != self.source:
            if current not in self.predecessors:
                raise NoPathFoundError(self.source, destination)
            current = self.predecessors[current]
            if current in seen:
                raise NoPathFoundError(self.source, destination)
            seen.add(current)
            path.append(current)

        path.reverse()
        return path

