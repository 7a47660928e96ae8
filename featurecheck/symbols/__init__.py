"""Symbol normalisation, kind promotion, and orphan recovery."""

from .base import KindPromoter
from .normalizer import normalize_entries
from .orphans import OrphanScanner
from .promotion import load_promoters

__all__ = ["KindPromoter", "OrphanScanner", "load_promoters", "normalize_entries"]
