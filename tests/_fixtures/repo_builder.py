"""Helper utilities for constructing temporary repositories in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from featurecheck.models import RawSymbolEntry


class RepoBuilder:
    """Utility for writing files into a throwaway repository and tagging them."""

    def __init__(self, tmp_path: Path) -> None:
        root = tmp_path / "repo"
        root.mkdir()
        self.root = root.resolve()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the repository."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def entry(self, relative: str, name: str, kind: str, line: int = 1, **extra: object) -> RawSymbolEntry:
        """Return a raw tag for a file under the repository, as ctags would report it."""
        return RawSymbolEntry(name=name, path=str(self.root / relative), line=line, kind=kind, **extra)  # type: ignore[arg-type]

    def path(self) -> Path:
        """Return the repository root path."""
        return self.root


__all__ = ["RepoBuilder"]
