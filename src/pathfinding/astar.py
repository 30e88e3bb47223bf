"""A* search over a Graph."""

import heapq
from collections.abc import Callable
from itertools import count

from .base import SearchStrategy
from .graph import Graph
from .result import INFINITY, PathResult


def zero_heuristic(node) -> float:
    """Heuristic that knows nothing; turns A* into uniform-cost search."""
    return 0


class AStarSearch(SearchStrategy):
    """
    Point-to-point shortest path guided by a heuristic.

    The frontier is ordered by g + h, where g is the cost from the source
    and h the heuristic estimate of the remaining cost. The search stops as
    soon as the destination is popped.

    The heuristic must not overestimate the remaining cost (admissible) and
    must be consistent, otherwise the returned path may not be the shortest.
    This is not checked.
    """

    name = "astar"

    def __init__(self, estimate: Callable[[object, object], float] | None = None):
        """
        Initialize the strategy.

        Args:
            estimate: Function (node, destination) -> estimated remaining
                cost. Defaults to zero everywhere.
        """
        self.estimate = estimate

    def find_shortest_path(
        self,
        graph: Graph,
        source,
        destination,
        heuristic: Callable[[object], float] = zero_heuristic,
    ) -> PathResult:
        """
        Find the shortest path between source and destination.

        Args:
            graph: Graph to search
            source: Starting node
            destination: Target node
            heuristic: Function node -> estimated remaining cost to
                destination

        Returns:
            PathResult restricted to the nodes of the path found. If the
            destination is unreachable, only the source is reported.
        """
        best = {source: 0}
        predecessors = {}

        # (g + h, insertion order, g, node)
        tiebreak = count()
        frontier = [(heuristic(source), next(tiebreak), 0, source)]

        while frontier:
            _, _, current_cost, current = heapq.heappop(frontier)

            if current_cost > best[current]:
                continue

            if current == destination:
                return self._restrict_to_path(source, destination, best, predecessors)

            for neighbor, weight in graph.neighbors(current):
                candidate = current_cost + weight
                if candidate < best.get(neighbor, INFINITY):
                    best[neighbor] = candidate
                    predecessors[neighbor] = current
                    priority = candidate + heuristic(neighbor)
                    heapq.heappush(frontier, (priority, next(tiebreak), candidate, neighbor))

        return PathResult(
            source=source,
            distances={source: 0, destination: INFINITY},
            destination=destination,
        )

    def search(self, graph: Graph, source, destination) -> PathResult:
        if self.estimate is None:
            heuristic = zero_heuristic
        else:
            def heuristic(node):
                return self.estimate(node, destination)
        return self.find_shortest_path(graph, source, destination, heuristic)

    @staticmethod
    def _restrict_to_path(source, destination, best, predecessors) -> PathResult:
        path = [destination]
        while path[-1] != source:
            path.append(predecessors[path[-1]])
        return PathResult(
            source=source,
            distances={node: best[node] for node in path},
            predecessors={node: predecessors[node] for node in path if node != source},
            destination=destination,
        )
