"""Coverage rate and presentation ordering of feature reports."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from functools import cmp_to_key
from typing import Dict, Iterable, List, Optional, Tuple

from .models import FeatureReport


def coverage_rate(uncategorized: int, total: int) -> Optional[float]:
    """Percentage of symbols attributed to a configured feature, to one decimal.

    Halves round up. Returns None when there are no symbols at all; callers
    render that as "n/a".
    """
    if total <= 0:
        return None
    percent = Decimal((1 - uncategorized / total) * 100)
    return float(percent.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_coverage(rate: Optional[float]) -> str:
    return "n/a" if rate is None else f"{rate:.1f}%"


def is_reportable(report: FeatureReport) -> bool:
    return report.total > 0 or bool(report.churn and report.churn > 0)


def compare_reports(a: FeatureReport, b: FeatureReport, *, with_churn: bool) -> int:
    """Order by hotspot score when both sides have one, otherwise by symbol total."""
    if with_churn and a.hotspot_score is not None and b.hotspot_score is not None:
        return b.hotspot_score - a.hotspot_score
    return b.total - a.total


def rank_features(reports: Iterable[FeatureReport], *, with_churn: bool) -> List[FeatureReport]:
    """Drop empty buckets and sort the rest for presentation. The sort is stable."""
    candidates = [report for report in reports if is_reportable(report)]
    key = cmp_to_key(lambda a, b: compare_reports(a, b, with_churn=with_churn))
    return sorted(candidates, key=key)


def group_by_category(
    reports: Iterable[FeatureReport], *, with_churn: bool
) -> List[Tuple[str, List[FeatureReport]]]:
    """Group ranked reports by category, largest categories first."""
    grouped: Dict[str, List[FeatureReport]] = {}
    for report in reports:
        grouped.setdefault(report.category, []).append(report)

    ordered = sorted(grouped.items(), key=lambda item: -sum(r.total for r in item[1]))
    result: List[Tuple[str, List[FeatureReport]]] = []
    for category, features in ordered:
        if with_churn:
            features = sorted(features, key=lambda r: -(r.hotspot_score or 0))
        else:
            features = sorted(features, key=lambda r: -r.total)
        result.append((category, features))
    return result


__all__ = [
    "compare_reports",
    "coverage_rate",
    "format_coverage",
    "group_by_category",
    "is_reportable",
    "rank_features",
]
