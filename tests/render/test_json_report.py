"""Tests for the JSON artifact writer."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

from featurecheck.models import CanonicalSymbol, CensusResult, FeatureReport, TopFile
from featurecheck.render.json_report import build_json_payload, write_json


def _result(coverage: float | None) -> CensusResult:
    scored = FeatureReport(
        id="billing",
        name="Billing",
        category="Commerce",
        functions=1,
        total=1,
        commits=4,
        churn=100,
        hotspot_score=200,
        top_files=[TopFile(path="billing/a.py", commits=4, churn=100)],
    )
    plain = FeatureReport(id="uncategorized", name="Uncategorized", category="Unknown", classes=1, total=1)
    symbols = [
        CanonicalSymbol(
            name="charge", kind="function", file="billing/a.py", line=3, signature="def charge():", feature="billing"
        ),
        CanonicalSymbol(name="Tool", kind="class", file="tools/t.py", line=1, scope="mod", feature="uncategorized"),
    ]
    return CensusResult(
        repo="/work/shop",
        since="2025-01-01",
        symbols=symbols,
        features=[scored, plain],
        totals={"symbols": 2, "functions": 1, "methods": 0, "classes": 1},
        coverage_rate=coverage,
        extracted_at=datetime(2025, 3, 1, 12, 0, tzinfo=UTC),
    )


def test_payload_shape() -> None:
    payload = build_json_payload(_result(50.0))

    assert payload["repo"] == "/work/shop"
    assert payload["extractedAt"] == "2025-03-01T12:00:00.000Z"
    assert payload["since"] == "2025-01-01"
    assert payload["totals"] == {"symbols": 2, "functions": 1, "methods": 0, "classes": 1}
    assert payload["coverageRate"] == "50.0%"
    assert payload["features"][0] == {
        "id": "billing",
        "name": "Billing",
        "category": "Commerce",
        "functions": 1,
        "methods": 0,
        "classes": 0,
        "total": 1,
        "commits": 4,
        "churn": 100,
        "hotspotScore": 200,
        "topFiles": [{"path": "billing/a.py", "commits": 4, "churn": 100}],
    }
    assert "hotspotScore" not in payload["features"][1]
    assert "topFiles" not in payload["features"][1]
    assert payload["symbols"][1] == {
        "name": "Tool",
        "kind": "class",
        "file": "tools/t.py",
        "line": 1,
        "scope": "mod",
        "feature": "uncategorized",
    }


def test_undefined_coverage_is_null() -> None:
    assert build_json_payload(_result(None))["coverageRate"] is None


def test_write_json_round_trips_through_disk(tmp_path: Path) -> None:
    target = write_json(_result(50.0), tmp_path / "out" / "census.json")

    loaded = json.loads(target.read_text(encoding="utf-8"))
    assert loaded == build_json_payload(_result(50.0))
