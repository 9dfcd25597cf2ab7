"""Free-text list parsing for skills and target companies."""

from collections.abc import Iterable


def parse_list(text: str | None) -> list[str]:
    """Split comma-separated text into trimmed, lowercased, non-empty tokens.

    Order is kept and duplicates are not removed.

    >>> parse_list(" Java ,  , React")
    ['java', 'react']
    """
    if not text:
        return []
    return normalize_tokens(text.split(","))


def normalize_tokens(values: Iterable[str]) -> list[str]:
    """Apply the parse_list token rules to an already-split sequence."""
    tokens = (v.strip().lower() for v in values)
    return [t for t in tokens if t]


def parse_skills(text: str | None) -> list[str]:
    return parse_list(text)


def parse_companies(text: str | None) -> list[str]:
    return parse_list(text)
