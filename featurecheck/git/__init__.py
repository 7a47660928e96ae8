"""Git history collaborators."""

from .churn import ChurnCollector

__all__ = ["ChurnCollector"]
