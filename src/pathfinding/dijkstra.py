"""Uniform-cost search (Dijkstra) over a Graph."""

import heapq
from itertools import count

from .base import SearchStrategy
from .graph import Graph
from .result import INFINITY, PathResult


class UniformCostSearch(SearchStrategy):
    """
    Single-source shortest paths using Dijkstra's algorithm.

    The frontier is a binary heap keyed by tentative distance. Improved
    entries are pushed again rather than updated in place, so the heap may
    hold superseded entries; those are skipped when popped.

    Edge weights must be non-negative. Graph.add_edge guarantees this,
    which is why the loop does not check it.
    """

    name = "dijkstra"

    def find_shortest_paths(self, graph: Graph, source) -> PathResult:
        """
        Compute shortest distances from source to every node.

        Args:
            graph: Graph to search
            source: Starting node

        Returns:
            PathResult covering all nodes of the graph, unreached ones at
            INFINITY
        """
        distances = {node: INFINITY for node in graph.nodes()}
        distances[source] = 0
        predecessors = {}

        # (distance, insertion order, node); the counter keeps ties stable
        # and avoids comparing nodes
        tiebreak = count()
        frontier = [(0, next(tiebreak), source)]

        while frontier:
            current_distance, _, current = heapq.heappop(frontier)

            if current_distance > distances[current]:
                continue

            for neighbor, weight in graph.neighbors(current):
                candidate = current_distance + weight
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    predecessors[neighbor] = current
                    heapq.heappush(frontier, (candidate, next(tiebreak), neighbor))

        return PathResult(source=source, distances=distances, predecessors=predecessors)

    def get_path(self, graph: Graph, source, destination) -> list:
        """
        Find the shortest path between two nodes.

        Returns:
            Nodes from source to destination, both included

        Raises:
            NoPathFoundError: If destination is not reachable from source
        """
        return self.find_shortest_paths(graph, source).path_to(destination)

    def search(self, graph: Graph, source, destination) -> PathResult:
        result = self.find_shortest_paths(graph, source)
        return PathResult(
            source=source,
            distances=result.distances,
            predecessors=result.predecessors,
            destination=destination,
        )
