"""Churn overlay and hotspot scoring."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from .aggregate import FeatureAggregator
from .classify import classify_path
from .models import FeatureReport, FeatureRule, RawChurnRecord, TopFile

TOP_FILES_LIMIT = 10


def hotspot_score(churn: Optional[int], commits: Optional[int]) -> Optional[int]:
    """Return ``round(churn * sqrt(commits))``, or None unless both are positive.

    Halves round up.
    """
    if churn is None or commits is None or churn <= 0 or commits <= 0:
        return None
    return int(math.floor(churn * math.sqrt(commits) + 0.5))


def overlay_churn(
    aggregator: FeatureAggregator,
    records: Iterable[RawChurnRecord],
    rules: Sequence[FeatureRule] | None = None,
) -> None:
    """Fold per-file churn into the aggregator's buckets, then score and trim them."""
    active_rules = aggregator.rules if rules is None else list(rules)
    for record in records:
        match = classify_path(record.path, active_rules)
        report = aggregator.bucket(match.id, match.name)
        report.commits = (report.commits or 0) + record.commits
        report.churn = (report.churn or 0) + record.churn
        if report.top_files is None:
            report.top_files = []
        report.top_files.append(TopFile(path=record.path, commits=record.commits, churn=record.churn))

    for report in aggregator.reports():
        finalize_report(report)


def finalize_report(report: FeatureReport) -> None:
    """Compute the hotspot score and keep the ten highest-churn files (stable)."""
    score = hotspot_score(report.churn, report.commits)
    if score is not None:
        report.hotspot_score = score
    if report.top_files is not None:
        report.top_files = sorted(report.top_files, key=lambda item: -item.churn)[:TOP_FILES_LIMIT]


__all__ = ["TOP_FILES_LIMIT", "finalize_report", "hotspot_score", "overlay_churn"]
