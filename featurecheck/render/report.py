"""Text and markdown census reports rendered through Jinja templates."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import CensusResult, FeatureReport
from ..ranking import format_coverage, group_by_category

HOTTEST_FILES_LIMIT = 20


@dataclass(frozen=True)
class HotFile:
    """A top file flattened out of its feature for cross-feature ranking."""

    path: str
    commits: int
    churn: int
    feature: str


def hottest_files(features: Sequence[FeatureReport], limit: int = HOTTEST_FILES_LIMIT) -> List[HotFile]:
    """Merge every feature's top files and keep the highest-churn ones."""
    merged: List[HotFile] = []
    for feature in features:
        for item in feature.top_files or []:
            merged.append(HotFile(path=item.path, commits=item.commits, churn=item.churn, feature=feature.name))
    merged.sort(key=lambda item: -item.churn)
    return merged[:limit]


def _thousands(value: int | None) -> str:
    return f"{value or 0:,}"


def _md_cell(value: object) -> str:
    return str(value).replace("|", "\\|")


def feature_line(feature: FeatureReport, *, with_churn: bool) -> str:
    parts = [
        f"{feature.total:>5} sym",
        f"{feature.functions:>4}f",
        f"{feature.methods:>5}m",
        f"{feature.classes:>4}c",
    ]
    if with_churn and feature.churn:
        parts.append(f"{_thousands(feature.churn):>7} churn")
    return f"{feature.name:<32} {'  '.join(parts)}"


def hot_file_line(item: HotFile) -> str:
    return f"{_thousands(item.churn):>7} churn  {item.commits:>3} commits  [{item.feature:<24}]  {item.path}"


class ReportRenderer:
    """Renders a census result as a console report or a markdown document."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._env = self._create_env(templates_dir)

    def render_text(self, result: CensusResult) -> str:
        with_churn = result.has_churn
        categories = []
        for category, features in group_by_category(result.features, with_churn=with_churn):
            categories.append(
                {
                    "name": category.upper(),
                    "total": _thousands(sum(f.total for f in features)),
                    "churn": _thousands(sum(f.churn or 0 for f in features)),
                    "lines": [feature_line(f, with_churn=with_churn) for f in features],
                }
            )
        template = self._env.get_template("report.txt.j2")
        return template.render(
            result=result,
            totals={key: _thousands(value) for key, value in result.totals.items()},
            coverage=format_coverage(result.coverage_rate),
            categories=categories,
            hot_lines=[hot_file_line(item) for item in hottest_files(result.features)] if with_churn else [],
        )

    def render_markdown(self, result: CensusResult) -> str:
        template = self._env.get_template("report.md.j2")
        categories = {feature.category for feature in result.features}
        return template.render(
            result=result,
            repo_name=Path(result.repo).name or result.repo,
            analyzed=result.extracted_at.date().isoformat(),
            coverage=format_coverage(result.coverage_rate),
            category_count=len(categories),
            groups=group_by_category(result.features, with_churn=result.has_churn),
            hot_files=hottest_files(result.features) if result.has_churn else [],
        )

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["thousands"] = _thousands
        env.filters["cell"] = _md_cell
        return env


__all__ = ["HotFile", "ReportRenderer", "feature_line", "hot_file_line", "hottest_files"]
