"""Feature configuration loading (JSON or YAML)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import UNCATEGORIZED_NAME, FeatureRule


class ConfigError(RuntimeError):
    """Raised when the feature configuration cannot be read or parsed."""


@dataclass
class FeatureConfig:
    """Represents the feature rules and exclusions for a census run."""

    name: str = "default"
    description: Optional[str] = None
    exclude_paths: List[str] = field(default_factory=list)
    exclude_churn: List[str] = field(default_factory=list)
    features: List[FeatureRule] = field(default_factory=list)

    def with_excludes(self, extra: Sequence[str]) -> "FeatureConfig":
        """Return a copy with command-line excludes appended to both exclusion lists."""
        return FeatureConfig(
            name=self.name,
            description=self.description,
            exclude_paths=[*self.exclude_paths, *extra],
            exclude_churn=[*self.exclude_churn, *extra],
            features=list(self.features),
        )


def load_config(config_path: Path | None) -> FeatureConfig:
    """Load feature configuration from disk; no path yields the default config."""
    if config_path is None:
        return FeatureConfig()

    config_file = Path(config_path).expanduser()
    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    features_data = data.get("features")
    if features_data is None:
        features_data = []
    if not isinstance(features_data, list):
        raise ConfigError("'features' must be a list of feature rules")

    features = [_parse_rule(item, index) for index, item in enumerate(features_data)]

    return FeatureConfig(
        name=_as_str(data.get("name")) or "default",
        description=_as_str(data.get("description")),
        exclude_paths=_as_str_list(_first_present(data, "excludePaths", "exclude_paths")),
        exclude_churn=_as_str_list(_first_present(data, "excludeChurn", "exclude_churn")),
        features=features,
    )


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read feature config {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _parse_rule(item: Any, index: int) -> FeatureRule:
    if not isinstance(item, dict):
        raise ConfigError(f"Feature #{index + 1} must be a mapping")
    rule_id = _as_str(item.get("id"))
    if not rule_id:
        raise ConfigError(f"Feature #{index + 1} is missing an 'id'")
    if "paths" not in item:
        raise ConfigError(f"Feature '{rule_id}' is missing 'paths'")
    paths = _as_str_list(item.get("paths"))
    return FeatureRule(
        id=rule_id,
        name=_as_str(item.get("name")) or rule_id,
        category=_as_str(item.get("category")) or UNCATEGORIZED_NAME,
        paths=tuple(paths),
    )


def _first_present(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["ConfigError", "FeatureConfig", "load_config"]
