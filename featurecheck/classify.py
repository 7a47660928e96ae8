"""Path-rule feature classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .models import UNCATEGORIZED_ID, UNCATEGORIZED_NAME, UNKNOWN_CATEGORY, FeatureRule


@dataclass(frozen=True)
class Classification:
    """Feature assignment for a single path."""

    id: str
    name: str
    category: str


UNCATEGORIZED = Classification(UNCATEGORIZED_ID, UNCATEGORIZED_NAME, UNKNOWN_CATEGORY)


def normalize_path(path: str) -> str:
    """Return ``path`` with forward slashes and a leading separator."""
    return "/" + path.replace("\\", "/")


def classify_path(path: str, rules: Sequence[FeatureRule]) -> Classification:
    """Return the first rule, in declared order, with a substring contained in ``path``.

    Matching is plain substring containment on the normalised path, so a rule
    listing ``/api`` also claims ``/apiary/``. Rules are never reordered: put
    specific overrides ahead of broad catch-alls.
    """
    normalized = normalize_path(path)
    for rule in rules:
        for fragment in rule.paths:
            if fragment in normalized:
                return Classification(rule.id, rule.name, rule.category)
    return UNCATEGORIZED


__all__ = ["Classification", "UNCATEGORIZED", "classify_path", "normalize_path"]
