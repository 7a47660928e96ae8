"""Base classes for kind-promotion strategies."""

from abc import ABC, abstractmethod
from typing import Optional


class KindPromoter(ABC):
    """Decides whether a constant tag is really a callable worth counting."""

    @abstractmethod
    def supports(self, path: str) -> bool:
        """Return True when this promoter applies to the file at ``path``."""

    @abstractmethod
    def promote(self, name: str) -> Optional[str]:
        """Return the canonical kind for ``name``, or None to leave it alone."""
