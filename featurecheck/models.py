"""Core data models shared across featurecheck components."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple

UNCATEGORIZED_ID = "uncategorized"
UNCATEGORIZED_NAME = "Uncategorized"
UNKNOWN_CATEGORY = "Unknown"


@dataclass(frozen=True)
class RawSymbolEntry:
    """One tag as reported by the structural extractor."""

    name: str
    path: str
    line: int = 0
    kind: str = "unknown"
    scope: Optional[str] = None
    scope_kind: Optional[str] = None
    pattern: Optional[str] = None


@dataclass
class CanonicalSymbol:
    """A function, method, or class recognised as meaningful structure."""

    name: str
    kind: str
    file: str
    line: int
    scope: Optional[str] = None
    signature: Optional[str] = None
    feature: str = ""
    feature_name: str = ""


@dataclass(frozen=True)
class FeatureRule:
    """Maps path substrings to a feature. Declared order is priority order."""

    id: str
    name: str
    category: str
    paths: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TopFile:
    """A churned file attributed to a feature."""

    path: str
    commits: int
    churn: int


@dataclass
class FeatureReport:
    """Per-feature counters, optionally overlaid with churn data."""

    id: str
    name: str
    category: str
    functions: int = 0
    methods: int = 0
    classes: int = 0
    total: int = 0
    commits: Optional[int] = None
    churn: Optional[int] = None
    hotspot_score: Optional[int] = None
    top_files: Optional[List[TopFile]] = None


@dataclass(frozen=True)
class RawChurnRecord:
    """Change volume for one file, already summed over the history window."""

    path: str
    commits: int
    additions: int
    deletions: int

    @property
    def churn(self) -> int:
        return self.additions + self.deletions


@dataclass
class CensusResult:
    """Everything a renderer needs from one census run."""

    repo: str
    since: Optional[str]
    symbols: List[CanonicalSymbol]
    features: List[FeatureReport]
    totals: Dict[str, int]
    coverage_rate: Optional[float]
    extracted_at: datetime = field(default_factory=datetime.now)

    @property
    def has_churn(self) -> bool:
        return bool(self.since)
