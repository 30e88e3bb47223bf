"""Directed weighted graph used by the search strategies."""

import math
from collections.abc import Hashable, Iterable
from numbers import Real
from typing import Generic, TypeVar

import networkx as nx

from .errors import InvalidWeightError

Node = TypeVar("Node", bound=Hashable)


def _validate_weight(source, destination, weight) -> None:
    # bool is a Real subclass but never a meaningful distance
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(source, destination, weight)
    # inf would be indistinguishable from an unreached node
    if not math.isfinite(weight) or weight < 0:
        raise InvalidWeightError(source, destination, weight)


class Graph(Generic[Node]):
    """
    Directed graph with non-negative edge weights.

    Nodes can be any hashable value. The adjacency is stored in a
    networkx DiGraph, each edge carrying its cost under the "weight" key.
    Negative weights are rejected on insertion, which is what lets the
    searches assume non-negative costs without checking inside their loops.
    """

    def __init__(self):
        """Initialize empty graph."""
        self.graph = nx.DiGraph()

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[Node, Node, float]]) -> "Graph[Node]":
        """Build a graph from (source, destination, weight) triples."""
        graph = cls()
        for source, destination, weight in edges:
            graph.add_edge(source, destination, weight)
        return graph

    def add_node(self, node: Node) -> None:
        """Add a node. Does nothing if it is already present."""
        if node not in self.graph:
            self.graph.add_node(node)

    def add_edge(self, source: Node, destination: Node, weight: float) -> None:
        """
        Add a directed edge, inserting both endpoints if needed.

        Adding an edge that already exists overwrites its weight.

        Raises:
            InvalidWeightError: If weight is negative or not a number
        """
        _validate_weight(source, destination, weight)
        self.graph.add_edge(source, destination, weight=weight)

    def add_two_way_edge(self, first: Node, second: Node, weight: float) -> None:
        """Add edges in both directions with the same weight."""
        _validate_weight(first, second, weight)
        self.graph.add_edge(first, second, weight=weight)
        self.graph.add_edge(second, first, weight=weight)

    def weight(self, source: Node, destination: Node) -> float | None:
        """Get the weight of an edge, or None if there is no such edge."""
        if self.graph.has_edge(source, destination):
            return self.graph[source][destination]["weight"]
        return None

    def neighbors(self, node: Node) -> list[tuple[Node, float]]:
        """Get (neighbor, weight) pairs for the outgoing edges of a node."""
        if node not in self.graph:
            return []
        return [
            (neighbor, data["weight"])
            for neighbor, data in self.graph.adj[node].items()
        ]

    def nodes(self) -> set[Node]:
        """Get the set of all nodes."""
        return set(self.graph.nodes())

    def edges(self) -> list[tuple[Node, Node, float]]:
        """Get all edges as (source, destination, weight) triples."""
        return [
            (source, destination, data["weight"])
            for source, destination, data in self.graph.edges(data=True)
        ]

    def number_of_edges(self) -> int:
        return self.graph.number_of_edges()

    def __contains__(self, node) -> bool:
        return node in self.graph

    def __len__(self) -> int:
        """Return number of nodes."""
        return len(self.graph)
