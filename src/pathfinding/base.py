"""Common contract shared by the search strategies."""

from abc import ABC, abstractmethod

from .graph import Graph
from .result import PathResult


class SearchStrategy(ABC):
    """
    A way of finding the shortest path between two nodes.

    Implementations never mutate the graph and keep all search state local
    to the call, so one instance can serve any number of queries.
    """

    name: str = ""

    @abstractmethod
    def search(self, graph: Graph, source, destination) -> PathResult:
        """
        Search for the shortest path from source to destination.

        Returns:
            PathResult whose destination is set; result.found is False
            when the destination cannot be reached
        """
