"""Per-feature symbol counters for a single census run."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from .classify import classify_path
from .models import (
    UNCATEGORIZED_ID,
    UNCATEGORIZED_NAME,
    UNKNOWN_CATEGORY,
    CanonicalSymbol,
    FeatureReport,
    FeatureRule,
)


class FeatureAggregator:
    """Owns one bucket per feature id; build a fresh instance for every run."""

    def __init__(self, rules: Sequence[FeatureRule]) -> None:
        self.rules = list(rules)
        self._buckets: Dict[str, FeatureReport] = {}
        for rule in self.rules:
            self._buckets[rule.id] = FeatureReport(id=rule.id, name=rule.name, category=rule.category)
        self._buckets[UNCATEGORIZED_ID] = FeatureReport(
            id=UNCATEGORIZED_ID, name=UNCATEGORIZED_NAME, category=UNKNOWN_CATEGORY
        )

    def bucket(self, feature_id: str, name: str | None = None) -> FeatureReport:
        """Return the bucket for ``feature_id``, creating an Unknown-category one if needed."""
        report = self._buckets.get(feature_id)
        if report is None:
            report = FeatureReport(id=feature_id, name=name or feature_id, category=UNKNOWN_CATEGORY)
            self._buckets[feature_id] = report
        return report

    def get(self, feature_id: str) -> FeatureReport | None:
        return self._buckets.get(feature_id)

    def add(self, symbol: CanonicalSymbol) -> None:
        report = self.bucket(symbol.feature, symbol.feature_name)
        if symbol.kind == "function":
            report.functions += 1
        elif symbol.kind == "method":
            report.methods += 1
        elif symbol.kind == "class":
            report.classes += 1
        else:
            raise ValueError(f"Unexpected symbol kind '{symbol.kind}' for {symbol.name}")
        report.total += 1

    def classify_and_add(self, symbols: Iterable[CanonicalSymbol]) -> None:
        """Assign each symbol its feature and count it."""
        for symbol in symbols:
            match = classify_path(symbol.file, self.rules)
            symbol.feature = match.id
            symbol.feature_name = match.name
            self.add(symbol)

    def reports(self) -> List[FeatureReport]:
        return list(self._buckets.values())


__all__ = ["FeatureAggregator"]
