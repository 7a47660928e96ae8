"""Per-file change volume from git history."""

from __future__ import annotations

import subprocess
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Sequence

from ..errors import ExternalToolError
from ..logging import get_logger
from ..models import RawChurnRecord


@dataclass
class _LineTotals:
    additions: int = 0
    deletions: int = 0
    seen_text: bool = False


class ChurnCollector:
    """Sums commits and added/deleted lines per file since a date."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("git.churn")

    def collect(
        self, repo_path: str, since: str, exclude: Sequence[str] = ()
    ) -> List[RawChurnRecord]:
        repo = Path(repo_path)
        if not (repo / ".git").exists():
            raise ExternalToolError(f"{repo_path} is not a Git repository")

        self.logger.info("Extracting git churn since %s...", since)
        commit_counts = self._commit_counts(repo, since)
        line_totals = self._line_totals(repo, since)

        records: List[RawChurnRecord] = []
        for path, totals in line_totals.items():
            if not totals.seen_text:
                continue
            if any(pattern in path for pattern in exclude):
                continue
            records.append(
                RawChurnRecord(
                    path=path,
                    commits=commit_counts.get(path, 0),
                    additions=totals.additions,
                    deletions=totals.deletions,
                )
            )
        records.sort(key=lambda record: -record.churn)
        self.logger.debug("Collected churn for %d files", len(records))
        return records

    # ------------------------------------------------------------------
    # Internals

    def _commit_counts(self, repo: Path, since: str) -> Counter[str]:
        output = self._run(
            ["git", "log", f"--since={since}", "--format=format:", "--name-only"], cwd=repo
        )
        return Counter(line.strip() for line in output.splitlines() if line.strip())

    def _line_totals(self, repo: Path, since: str) -> Dict[str, _LineTotals]:
        output = self._run(
            ["git", "log", f"--since={since}", "--numstat", "--format=format:"], cwd=repo
        )
        totals: Dict[str, _LineTotals] = {}
        for line in output.splitlines():
            parts = line.split("\t", 2)
            if len(parts) < 3 or not parts[2].strip():
                continue
            added, deleted, path = parts[0].strip(), parts[1].strip(), parts[2].strip()
            entry = totals.setdefault(path, _LineTotals())
            # Binary files report "-" instead of line counts.
            if added != "-":
                entry.additions += _as_int(added)
                entry.seen_text = True
            if deleted != "-":
                entry.deletions += _as_int(deleted)
        return totals

    def _run(self, args: Iterable[str], *, cwd: Path) -> str:
        return self._runner(args, cwd=cwd)

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        try:
            completed = subprocess.run(
                list(args),
                cwd=str(cwd),
                check=True,
                text=True,
                capture_output=True,
            )
        except FileNotFoundError as exc:
            raise ExternalToolError("git executable not found") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise ExternalToolError(f"git log failed: {detail}") from exc
        return completed.stdout


def _as_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


__all__ = ["ChurnCollector"]
