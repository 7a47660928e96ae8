"""Universal Ctags runner and JSON-lines parser."""

from __future__ import annotations

import json
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from ..errors import CtagsNotFoundError, ExternalToolError
from ..logging import get_logger
from ..models import RawSymbolEntry

_CANDIDATE_BINARIES: Sequence[str] = (
    "/opt/homebrew/bin/ctags",
    "/usr/local/bin/ctags",
)

_VERSION_MARKER = "Universal Ctags"

DEFAULT_EXCLUDES: Sequence[str] = (
    "node_modules",
    ".next",
    "dist",
    "build",
    ".git",
    "*.d.ts",
    "__pycache__",
    ".gradle",
    "target",
    "coverage",
)

_LANGUAGES = "TypeScript,Kotlin,JavaScript,Python,Go,Rust,Java"

# Kind letters per language: keep callables, types and component constants only.
_KIND_ARGS: Sequence[str] = (
    "--kinds-TypeScript=fcmgM",
    "--kinds-Kotlin=cfmoC",
    "--kinds-JavaScript=fcmgM",
    "--kinds-Python=cfm",
    "--kinds-Go=ftsm",
    "--kinds-Rust=fsPtm",
    "--kinds-Java=cmi",
)

Runner = Callable[..., str]

_LOGGER = get_logger("extractors.ctags")


def _default_runner(args: Iterable[str], *, cwd: Path | None = None) -> str:
    command = list(args)
    try:
        completed = subprocess.run(
            command,
            cwd=str(cwd) if cwd else None,
            text=True,
            capture_output=True,
        )
    except OSError as exc:
        raise ExternalToolError(f"Cannot execute {command[0]}: {exc}") from exc
    if completed.returncode != 0:
        detail = (completed.stderr or "").strip() or f"exit status {completed.returncode}"
        # Non-zero exits that still produced output carry usable tags.
        if not completed.stdout.strip():
            raise ExternalToolError(f"{Path(command[0]).name} failed: {detail}")
        _LOGGER.warning("%s exited with status %d: %s", Path(command[0]).name, completed.returncode, detail)
    return completed.stdout


def _is_universal_ctags(binary: str, runner: Runner) -> bool:
    try:
        output = runner([binary, "--version"])
    except ExternalToolError:
        return False
    return _VERSION_MARKER in output


def find_ctags(
    runner: Runner | None = None,
    *,
    exists: Callable[[str], bool] | None = None,
    which: Callable[[str], Optional[str]] | None = None,
) -> str:
    """Locate a Universal Ctags binary, preferring Homebrew installs over PATH."""
    run = runner or _default_runner
    path_exists = exists or (lambda candidate: Path(candidate).exists())
    lookup = which or shutil.which

    for candidate in _CANDIDATE_BINARIES:
        if path_exists(candidate) and _is_universal_ctags(candidate, run):
            return candidate

    on_path = lookup("ctags")
    if on_path and _is_universal_ctags(on_path, run):
        return on_path

    raise CtagsNotFoundError(
        "universal-ctags not found. Install it with your package manager "
        "(e.g. `brew install universal-ctags`)."
    )


def build_ctags_args(binary: str, repo_root: str, exclude_paths: Sequence[str] = ()) -> List[str]:
    excludes = [f"--exclude={pattern}" for pattern in (*DEFAULT_EXCLUDES, *exclude_paths)]
    return [
        binary,
        "--output-format=json",
        f"--languages={_LANGUAGES}",
        *_KIND_ARGS,
        "--fields=+KZSn",
        "--extras=+q",
        *excludes,
        "-R",
        repo_root,
    ]


def parse_ctags_output(text: str) -> List[RawSymbolEntry]:
    """Parse ctags JSON lines; blank or malformed lines are ignored."""
    entries: List[RawSymbolEntry] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            obj = json.loads(line)
        except json.JSONDecodeError:
            continue
        if not isinstance(obj, dict) or "name" not in obj or "path" not in obj:
            continue
        entries.append(
            RawSymbolEntry(
                name=str(obj["name"]),
                path=str(obj["path"]),
                line=int(obj.get("line") or 0),
                kind=str(obj.get("kind") or "unknown"),
                scope=obj.get("scope"),
                scope_kind=obj.get("scopeKind"),
                pattern=obj.get("pattern"),
            )
        )
    return entries


class CtagsExtractor:
    """Runs ctags over a repository and returns its raw tags."""

    def __init__(self, runner: Runner | None = None, binary: str | None = None) -> None:
        self._runner = runner or _default_runner
        self._binary = binary
        self.logger = get_logger("extractors.ctags")

    def extract(self, repo_root: str, exclude_paths: Sequence[str] = ()) -> List[RawSymbolEntry]:
        binary = self._binary or find_ctags(self._runner)
        self.logger.info("Running ctags on %s...", repo_root)
        output = self._runner(build_ctags_args(binary, repo_root, exclude_paths))
        entries = parse_ctags_output(output)
        self.logger.info("  ctags found %s raw entries", f"{len(entries):,}")
        return entries


__all__ = [
    "CtagsExtractor",
    "DEFAULT_EXCLUDES",
    "build_ctags_args",
    "find_ctags",
    "parse_ctags_output",
]
