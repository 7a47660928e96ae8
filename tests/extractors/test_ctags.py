"""Tests for the ctags collaborator."""

from __future__ import annotations

import json
import subprocess

import pytest

from featurecheck.errors import CtagsNotFoundError, ExternalToolError
from featurecheck.extractors import ctags
from featurecheck.extractors.ctags import (
    CtagsExtractor,
    build_ctags_args,
    find_ctags,
    parse_ctags_output,
)
from featurecheck.models import RawSymbolEntry


def _line(**fields: object) -> str:
    return json.dumps({"_type": "tag", **fields})


def test_parse_ctags_output_maps_fields_and_skips_junk() -> None:
    text = "\n".join(
        [
            _line(name="Widget", path="/repo/a.ts", line=4, kind="class", pattern="/^class Widget {$/"),
            "",
            "not json",
            _line(name="render", path="/repo/a.ts", line=5, kind="method", scope="Widget", scopeKind="class"),
            _line(name="orphan", path="/repo/b.ts"),
            json.dumps({"_type": "ptag", "name": "!_TAG_PROGRAM_NAME"}),
        ]
    )

    entries = parse_ctags_output(text)

    assert entries == [
        RawSymbolEntry(name="Widget", path="/repo/a.ts", line=4, kind="class", pattern="/^class Widget {$/"),
        RawSymbolEntry(
            name="render", path="/repo/a.ts", line=5, kind="method", scope="Widget", scope_kind="class"
        ),
        RawSymbolEntry(name="orphan", path="/repo/b.ts", line=0, kind="unknown"),
    ]


def test_build_ctags_args_includes_default_and_custom_excludes() -> None:
    args = build_ctags_args("/usr/bin/ctags", "/repo", ["vendor", "*.gen.ts"])

    assert args[0] == "/usr/bin/ctags"
    assert "--output-format=json" in args
    assert "--kinds-Python=cfm" in args
    assert "--fields=+KZSn" in args
    assert "--exclude=node_modules" in args
    assert "--exclude=*.d.ts" in args
    assert args.index("--exclude=coverage") < args.index("--exclude=vendor")
    assert "--exclude=*.gen.ts" in args
    assert args[-2:] == ["-R", "/repo"]


def test_find_ctags_prefers_universal_candidate() -> None:
    def runner(args, cwd=None):  # type: ignore[no-untyped-def]
        if args[0] == "/usr/local/bin/ctags":
            return "Universal Ctags 6.1.0"
        return "Exuberant Ctags 5.8"

    found = find_ctags(
        runner,
        exists=lambda path: path in {"/opt/homebrew/bin/ctags", "/usr/local/bin/ctags"},
        which=lambda name: "/usr/bin/ctags",
    )

    assert found == "/usr/local/bin/ctags"


def test_find_ctags_falls_back_to_path() -> None:
    found = find_ctags(
        lambda args, cwd=None: "Universal Ctags 6.0.0",
        exists=lambda path: False,
        which=lambda name: "/usr/bin/ctags",
    )
    assert found == "/usr/bin/ctags"


def test_find_ctags_rejects_non_universal_and_failures() -> None:
    def runner(args, cwd=None):  # type: ignore[no-untyped-def]
        if args[0] == "/opt/homebrew/bin/ctags":
            raise ExternalToolError("boom")
        return "Exuberant Ctags 5.8"

    with pytest.raises(CtagsNotFoundError):
        find_ctags(runner, exists=lambda path: True, which=lambda name: "/usr/bin/ctags")


def test_extractor_runs_binary_and_parses() -> None:
    calls: list[list[str]] = []

    def runner(args, cwd=None):  # type: ignore[no-untyped-def]
        calls.append(list(args))
        return _line(name="main", path="/repo/main.go", line=3, kind="function") + "\n"

    extractor = CtagsExtractor(runner=runner, binary="/bin/ctags")
    entries = extractor.extract("/repo", ["vendor"])

    assert [e.name for e in entries] == ["main"]
    assert calls[0][0] == "/bin/ctags"
    assert "--exclude=vendor" in calls[0]


def test_extractor_propagates_tool_failure() -> None:
    def runner(args, cwd=None):  # type: ignore[no-untyped-def]
        raise ExternalToolError("ctags failed: bad option")

    with pytest.raises(ExternalToolError, match="bad option"):
        CtagsExtractor(runner=runner, binary="/bin/ctags").extract("/repo")


def _completed(returncode: int, stdout: str, stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=["ctags"], returncode=returncode, stdout=stdout, stderr=stderr)


def test_default_runner_keeps_output_from_nonzero_exit(monkeypatch: pytest.MonkeyPatch) -> None:
    output = _line(name="main", path="/repo/main.go", line=3, kind="function") + "\n"
    monkeypatch.setattr(ctags.subprocess, "run", lambda *args, **kwargs: _completed(1, output, "parse error"))

    assert ctags._default_runner(["/bin/ctags", "-R", "/repo"]) == output


def test_default_runner_fails_on_nonzero_exit_without_output(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ctags.subprocess, "run", lambda *args, **kwargs: _completed(2, "", "unknown option"))

    with pytest.raises(ExternalToolError, match="unknown option"):
        ctags._default_runner(["/bin/ctags", "--bogus"])


def test_default_runner_fails_when_binary_cannot_launch(monkeypatch: pytest.MonkeyPatch) -> None:
    def run(*args, **kwargs):  # type: ignore[no-untyped-def]
        raise FileNotFoundError(2, "No such file or directory", "/missing/ctags")

    monkeypatch.setattr(ctags.subprocess, "run", run)

    with pytest.raises(ExternalToolError, match="Cannot execute /missing/ctags"):
        ctags._default_runner(["/missing/ctags", "--version"])
