"""Turns raw extractor tags into canonical symbols."""

from __future__ import annotations

import os
from typing import Iterable, List, Optional, Sequence

from ..models import CanonicalSymbol, RawSymbolEntry
from .base import KindPromoter
from .promotion import load_promoters, promote_constant

FUNCTION_KINDS = frozenset({"function", "generator"})
METHOD_KINDS = frozenset({"method"})
CLASS_KINDS = frozenset({"class", "object"})

# Anonymous callables and export aliases carry no structural meaning.
NOISE_NAMES = frozenset({"<lambda>", "<anonymous>", "anonymous", "module.exports"})
INTERNAL_PREFIX = "__"


def normalize_entries(
    entries: Iterable[RawSymbolEntry],
    repo_root: str,
    promoters: Sequence[KindPromoter] | None = None,
) -> List[CanonicalSymbol]:
    """Filter and canonicalise raw entries, preserving their relative order."""
    active = list(promoters) if promoters is not None else load_promoters()
    symbols: List[CanonicalSymbol] = []
    for entry in entries:
        if is_noise(entry.name):
            continue
        kind = canonical_kind(entry, active)
        if kind is None:
            continue
        symbols.append(
            CanonicalSymbol(
                name=entry.name,
                kind=kind,
                file=os.path.relpath(entry.path, repo_root),
                line=entry.line,
                scope=entry.scope,
                signature=clean_signature(entry.pattern),
            )
        )
    return symbols


def is_noise(name: str) -> bool:
    return name in NOISE_NAMES or name.startswith(INTERNAL_PREFIX)


def canonical_kind(entry: RawSymbolEntry, promoters: Sequence[KindPromoter]) -> Optional[str]:
    """Map an extractor kind onto function/method/class, or None to drop the entry."""
    if entry.kind in FUNCTION_KINDS:
        return "function"
    if entry.kind in METHOD_KINDS:
        return "method"
    if entry.kind in CLASS_KINDS:
        return "class"
    # Exported arrow functions and components are tagged as constants.
    if entry.kind == "constant":
        return promote_constant(entry.name, entry.path, promoters)
    return None


def clean_signature(pattern: Optional[str]) -> Optional[str]:
    """Strip the ``/^`` and ``$/`` search anchors ctags wraps around source lines."""
    if pattern is None:
        return None
    text = pattern
    if text.startswith("/^"):
        text = text[2:]
    if text.endswith("$/"):
        text = text[:-2]
    return text.strip()


__all__ = ["canonical_kind", "clean_signature", "is_noise", "normalize_entries"]
