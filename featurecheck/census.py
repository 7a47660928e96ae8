"""Pipeline orchestration for a single census run."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .aggregate import FeatureAggregator
from .config import FeatureConfig
from .extractors.ctags import CtagsExtractor
from .git.churn import ChurnCollector
from .hotspots import overlay_churn
from .logging import get_logger
from .models import UNCATEGORIZED_ID, CanonicalSymbol, CensusResult
from .ranking import coverage_rate, rank_features
from .symbols import KindPromoter, OrphanScanner, normalize_entries


class Census:
    """Coordinates extraction, classification, churn overlay and ranking."""

    def __init__(
        self,
        extractor: CtagsExtractor | None = None,
        churn_collector: ChurnCollector | None = None,
        orphan_scanner: OrphanScanner | None = None,
        promoters: Optional[Sequence[KindPromoter]] = None,
    ) -> None:
        self.extractor = extractor or CtagsExtractor()
        self.churn_collector = churn_collector or ChurnCollector()
        self.orphan_scanner = orphan_scanner or OrphanScanner()
        self._promoters = list(promoters) if promoters is not None else None
        self.logger = get_logger("census")

    def run(
        self,
        path: str,
        config: FeatureConfig,
        *,
        since: str | None = None,
        extra_excludes: Sequence[str] = (),
    ) -> CensusResult:
        """Run the census over ``path`` and return ranked feature reports."""
        repo_root = str(Path(path).expanduser().resolve())
        effective = config.with_excludes(extra_excludes)

        entries = self.extractor.extract(repo_root, effective.exclude_paths)
        symbols = normalize_entries(entries, repo_root, self._promoters)
        symbols = self.orphan_scanner.scan(entries, symbols, repo_root)
        self.logger.info(
            "  Filtered to %s symbols (functions, methods, classes)", f"{len(symbols):,}"
        )

        aggregator = FeatureAggregator(effective.features)
        aggregator.classify_and_add(symbols)

        if since:
            records = self.churn_collector.collect(repo_root, since, effective.exclude_churn)
            overlay_churn(aggregator, records)

        ranked = rank_features(aggregator.reports(), with_churn=bool(since))
        totals = count_kinds(symbols)
        uncategorized = aggregator.get(UNCATEGORIZED_ID)
        rate = coverage_rate(uncategorized.total if uncategorized else 0, totals["symbols"])
        if rate is None:
            self.logger.warning("No symbols found under %s; coverage is undefined", repo_root)

        return CensusResult(
            repo=repo_root,
            since=since,
            symbols=symbols,
            features=ranked,
            totals=totals,
            coverage_rate=rate,
            extracted_at=datetime.now(UTC),
        )


def count_kinds(symbols: List[CanonicalSymbol]) -> Dict[str, int]:
    return {
        "symbols": len(symbols),
        "functions": sum(1 for symbol in symbols if symbol.kind == "function"),
        "methods": sum(1 for symbol in symbols if symbol.kind == "method"),
        "classes": sum(1 for symbol in symbols if symbol.kind == "class"),
    }


__all__ = ["Census", "count_kinds"]
