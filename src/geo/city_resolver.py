"""Resolve user-typed city names to graph nodes."""

import unicodedata

from rapidfuzz import fuzz, process

from src.pathfinding.errors import InvalidInputError


def remove_accents(text: str) -> str:
    """Remove accents from text while preserving case."""
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(c for c in nfkd if not unicodedata.combining(c))


def normalize_name(name: str) -> str:
    """
    Normalize a name for matching.

    Examples:
        "Saint-Étienne" -> "saint etienne"
        "  LYON " -> "lyon"
    """
    name = remove_accents(name.lower())
    name = name.replace("-", " ").replace("_", " ")
    return " ".join(name.split())


class NameResolver:
    """
    Map free text to the node names of a graph.

    Matching ignores case, accents, hyphens and extra spaces. Unknown names
    are rejected with fuzzy suggestions ("Marseile" -> "Marseille").
    """

    def __init__(self, names, threshold: int = 75, max_suggestions: int = 3):
        """
        Args:
            names: Known node names
            threshold: Minimum similarity score for suggestions (0-100)
            max_suggestions: Maximum number of suggestions to return
        """
        self.threshold = threshold
        self.max_suggestions = max_suggestions
        self.by_normalized: dict[str, str] = {}
        for name in names:
            self.by_normalized.setdefault(normalize_name(str(name)), name)

    def resolve(self, text: str | None) -> str:
        """
        Resolve text to a known node name.

        Raises:
            InvalidInputError: If text is empty or matches no known name
        """
        if text is None or not text.strip():
            raise InvalidInputError("Please enter both start and end points.", text="")

        normalized = normalize_name(text)
        if normalized in self.by_normalized:
            return self.by_normalized[normalized]

        suggestions = self.suggest(text)
        message = f"Unknown location: {text.strip()}"
        if suggestions:
            message += f". Did you mean: {', '.join(suggestions)}?"
        raise InvalidInputError(message, text=text, suggestions=suggestions)

    def suggest(self, text: str) -> list[str]:
        """Get known names close to text, best match first."""
        if not text or not self.by_normalized:
            return []
        matches = process.extract(
            normalize_name(text),
            list(self.by_normalized),
            scorer=fuzz.ratio,
            limit=self.max_suggestions,
            score_cutoff=self.threshold,
        )
        return [self.by_normalized[match] for match, _score, _idx in matches]
