"""Exceptions raised by the pathfinding engine and its query boundary."""


class PathfindingError(Exception):
    """Base class for every error the engine reports."""


class InvalidWeightError(PathfindingError, ValueError):
    """
    Raised when an edge is inserted with an unusable weight.

    Weights must be non-negative numbers. The graph is left unchanged
    when this is raised.
    """

    def __init__(self, source, destination, weight):
        self.source = source
        self.destination = destination
        self.weight = weight
        super().__init__(
            f"Invalid weight {weight!r} for edge {source!r} -> {destination!r}: "
            "weights must be non-negative numbers"
        )


class NoPathFoundError(PathfindingError, LookupError):
    """Raised when the destination cannot be reached from the source."""

    def __init__(self, source, destination):
        self.source = source
        self.destination = destination
        super().__init__(f"No path from {source!r} to {destination!r}")


class UnknownAlgorithmError(PathfindingError, LookupError):
    """Raised when a search strategy is requested by an unregistered name."""

    def __init__(self, name, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        message = f"Unknown algorithm: {name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class InvalidInputError(PathfindingError, ValueError):
    """
    Raised when user-supplied text cannot be turned into a node.

    Attributes:
        text: The raw text that was rejected
        suggestions: Close matches among known node names, best first
    """

    def __init__(self, message: str, text: str = "", suggestions: list[str] | None = None):
        self.text = text
        self.suggestions = suggestions or []
        super().__init__(message)
