"""Selection of search strategies by name."""

from .astar import AStarSearch
from .base import SearchStrategy
from .dijkstra import UniformCostSearch
from .errors import UnknownAlgorithmError

STRATEGIES: dict[str, type[SearchStrategy]] = {
    UniformCostSearch.name: UniformCostSearch,
    AStarSearch.name: AStarSearch,
}

# Names as they appear in forms and dropdowns
ALIASES = {
    "a*": AStarSearch.name,
    "a-star": AStarSearch.name,
    "a_star": AStarSearch.name,
    "ucs": UniformCostSearch.name,
    "uniform-cost": UniformCostSearch.name,
}

DISPLAY_NAMES = {
    UniformCostSearch.name: "Dijkstra",
    AStarSearch.name: "A*",
}


def available_algorithms() -> list[str]:
    """Get the registered algorithm names."""
    return list(STRATEGIES)


def normalize_algorithm_name(name: str) -> str:
    """
    Map a user-facing algorithm name to its registered name.

    Examples:
        "Dijkstra" -> "dijkstra"
        "A*" -> "astar"

    Raises:
        UnknownAlgorithmError: If the name is not registered
    """
    key = (name or "").strip().lower()
    key = ALIASES.get(key, key)
    if key not in STRATEGIES:
        raise UnknownAlgorithmError(name, available_algorithms())
    return key


def get_strategy(name: str, **options) -> SearchStrategy:
    """
    Create the search strategy registered under name.

    Options are passed to the strategy's constructor, e.g.
    get_strategy("astar", estimate=straight_line).

    Raises:
        UnknownAlgorithmError: If the name is not registered
    """
    return STRATEGIES[normalize_algorithm_name(name)](**options)
