"""JSON artifact mirroring the census result."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..models import CanonicalSymbol, CensusResult, FeatureReport


def feature_to_dict(report: FeatureReport) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": report.id,
        "name": report.name,
        "category": report.category,
        "functions": report.functions,
        "methods": report.methods,
        "classes": report.classes,
        "total": report.total,
    }
    if report.commits is not None:
        payload["commits"] = report.commits
    if report.churn is not None:
        payload["churn"] = report.churn
    if report.hotspot_score is not None:
        payload["hotspotScore"] = report.hotspot_score
    if report.top_files is not None:
        payload["topFiles"] = [
            {"path": item.path, "commits": item.commits, "churn": item.churn}
            for item in report.top_files
        ]
    return payload


def symbol_to_dict(symbol: CanonicalSymbol) -> Dict[str, Any]:
    return {
        "name": symbol.name,
        "kind": symbol.kind,
        "file": symbol.file,
        "line": symbol.line,
        "scope": symbol.scope,
        "feature": symbol.feature,
    }


def build_json_payload(result: CensusResult) -> Dict[str, Any]:
    rate = result.coverage_rate
    return {
        "repo": result.repo,
        "extractedAt": result.extracted_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "since": result.since or None,
        "totals": dict(result.totals),
        "coverageRate": None if rate is None else f"{rate:.1f}%",
        "features": [feature_to_dict(report) for report in result.features],
        "symbols": [symbol_to_dict(symbol) for symbol in result.symbols],
    }


def write_json(result: CensusResult, path: Path) -> Path:
    """Write the JSON artifact to ``path`` and return the resolved location."""
    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(build_json_payload(result), indent=2) + "\n", encoding="utf-8")
    return target


__all__ = ["build_json_payload", "feature_to_dict", "symbol_to_dict", "write_json"]
