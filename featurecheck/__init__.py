"""Feature census: symbols attributed to features, ranked by churn."""

from .census import Census
from .config import ConfigError, FeatureConfig, load_config
from .models import CanonicalSymbol, CensusResult, FeatureReport, FeatureRule

__all__ = [
    "CanonicalSymbol",
    "Census",
    "CensusResult",
    "ConfigError",
    "FeatureConfig",
    "FeatureReport",
    "FeatureRule",
    "load_config",
]

__version__ = "0.1.0"
