"""Kind-promotion strategies for constants."""

from __future__ import annotations

import re
from importlib import metadata
from typing import Iterable, List, Optional, Sequence

from .base import KindPromoter

_ENTRY_POINT_GROUP = "featurecheck.promoters"

_COMPONENT_NAME = re.compile(r"^[A-Z][a-zA-Z0-9]+$")
_HOOK_NAME = re.compile(r"^use[A-Z]")
_HELPER_NAME = re.compile(r"^[a-z][a-zA-Z0-9]+$")


class ComponentPromoter(KindPromoter):
    """Treats component-style and hook-style constants as functions in every file."""

    def supports(self, path: str) -> bool:
        return True

    def promote(self, name: str) -> Optional[str]:
        if _COMPONENT_NAME.match(name) or _HOOK_NAME.match(name):
            return "function"
        return None


class TsxHelperPromoter(KindPromoter):
    """Treats lowercase alphanumeric constants in .tsx files as exported helpers."""

    suffixes: Sequence[str] = (".tsx",)

    def supports(self, path: str) -> bool:
        return path.endswith(tuple(self.suffixes))

    def promote(self, name: str) -> Optional[str]:
        if _HELPER_NAME.match(name):
            return "function"
        return None


BUILTIN_PROMOTERS: Sequence[type[KindPromoter]] = (ComponentPromoter, TsxHelperPromoter)


def load_promoters() -> List[KindPromoter]:
    """Built-in promoters first, then any registered under ``featurecheck.promoters``."""
    promoters: List[KindPromoter] = [factory() for factory in BUILTIN_PROMOTERS]
    for entry in _registered_entry_points():
        loaded = entry.load()
        promoter = loaded() if isinstance(loaded, type) else loaded
        if not isinstance(promoter, KindPromoter):
            raise TypeError(f"Entry point '{entry.name}' does not provide a KindPromoter")
        promoters.append(promoter)
    return promoters


def promote_constant(name: str, path: str, promoters: Iterable[KindPromoter]) -> Optional[str]:
    """Return the kind the first applicable promoter assigns, or None to drop the tag."""
    for promoter in promoters:
        if not promoter.supports(path):
            continue
        kind = promoter.promote(name)
        if kind is not None:
            return kind
    return None


def _registered_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "ComponentPromoter",
    "KindPromoter",
    "TsxHelperPromoter",
    "load_promoters",
    "promote_constant",
]
