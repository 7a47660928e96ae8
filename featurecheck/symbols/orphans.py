"""Recovers exported components the extractor never reported."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Callable, Iterable, List, Sequence, Set, Tuple

from ..logging import get_logger
from ..models import CanonicalSymbol, RawSymbolEntry

_EXPORT_DECLARATION = re.compile(
    r"export\s+(?:default\s+)?(?:const|function)\s+([A-Z][a-zA-Z0-9]*)"
)

COMPONENT_SUFFIXES: Tuple[str, ...] = (".tsx", ".jsx")


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def line_number_for_offset(content: str, offset: int) -> int:
    return content.count("\n", 0, offset) + 1


class OrphanScanner:
    """Second pass over component files that adds exported declarations ctags skipped."""

    def __init__(
        self,
        reader: Callable[[Path], str] | None = None,
        suffixes: Sequence[str] = COMPONENT_SUFFIXES,
    ) -> None:
        self._reader = reader or _read_text
        self._suffixes = tuple(suffixes)
        self.logger = get_logger("symbols.orphans")

    def scan(
        self,
        entries: Iterable[RawSymbolEntry],
        symbols: Sequence[CanonicalSymbol],
        repo_root: str,
    ) -> List[CanonicalSymbol]:
        """Return ``symbols`` extended with recovered declarations, without duplicates."""
        result = list(symbols)
        seen: Set[Tuple[str, str]] = {(symbol.file, symbol.name) for symbol in result}
        root = Path(repo_root)

        for rel_file in self._component_files(entries, repo_root):
            try:
                source = self._reader(root / rel_file)
            except OSError as exc:
                self.logger.warning("Skipping orphan scan of %s: %s", rel_file, exc)
                continue
            recovered = 0
            for match in _EXPORT_DECLARATION.finditer(source):
                name = match.group(1)
                if (rel_file, name) in seen:
                    continue
                seen.add((rel_file, name))
                result.append(
                    CanonicalSymbol(
                        name=name,
                        kind="function",
                        file=rel_file,
                        line=line_number_for_offset(source, match.start()),
                        signature=match.group(0).strip(),
                    )
                )
                recovered += 1
            if recovered:
                self.logger.debug("Recovered %d exported symbols from %s", recovered, rel_file)
        return result

    def _component_files(self, entries: Iterable[RawSymbolEntry], repo_root: str) -> List[str]:
        files: List[str] = []
        seen: Set[str] = set()
        for entry in entries:
            rel = os.path.relpath(entry.path, repo_root)
            if rel.endswith(self._suffixes) and rel not in seen:
                seen.add(rel)
                files.append(rel)
        return files


__all__ = ["COMPONENT_SUFFIXES", "OrphanScanner", "line_number_for_offset"]
