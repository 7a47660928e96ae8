"""CLI entrypoint for repo-feature-check."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .census import Census
from .config import ConfigError, load_config
from .errors import ExternalToolError
from .logging import configure_logging, get_logger
from .prompting import ANALYSIS_PROMPT, USAGE_HINTS
from .render import ReportRenderer, write_json

_EPILOG = """\
examples:
  repo-feature-check .
  repo-feature-check /path/to/repo --json /tmp/symbols.json --since 2024-06-01
  repo-feature-check . --config my-features.json --json /tmp/out.json

requires universal-ctags on PATH (brew install universal-ctags)
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-feature-check",
        description="Extract every function, method, and class from a codebase.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to the repository root.",
    )
    parser.add_argument(
        "--json",
        dest="json_out",
        type=Path,
        default=None,
        help="Write full symbol data as JSON to this path.",
    )
    parser.add_argument(
        "--markdown",
        dest="markdown_out",
        type=Path,
        default=None,
        help="Write a markdown feature map to this path.",
    )
    parser.add_argument(
        "--since",
        default=None,
        help="Overlay git churn data since this date (e.g. 2024-01-01).",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Exclude paths from extraction and churn (repeatable).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Feature config (JSON or YAML) for path-based classification.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None, census: Census | None = None) -> None:
    """CLI entrypoint for repo-feature-check."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.path is None:
        sys.stdout.write(ANALYSIS_PROMPT)
        sys.stderr.write("\n" + "\n".join(USAGE_HINTS) + "\n")
        parser.exit(0)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"Invalid feature config: {exc}\n")

    runner = census or Census()
    try:
        result = runner.run(
            args.path,
            config,
            since=args.since,
            extra_excludes=args.exclude,
        )
    except ExternalToolError as exc:
        parser.exit(1, f"repo-feature-check failed: {exc}\nRun with --verbose for more details.\n")

    renderer = ReportRenderer()

    if args.json_out is not None:
        target = write_json(result, args.json_out)
        size_mb = target.stat().st_size / 1024 / 1024
        logger.info("Written to %s (%.1f MB)", target, size_mb)

    if args.markdown_out is not None:
        target = Path(args.markdown_out).expanduser()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(renderer.render_markdown(result), encoding="utf-8")
        logger.info("Markdown report written to %s", target)

    sys.stdout.write(renderer.render_text(result))


if __name__ == "__main__":
    main(sys.argv[1:])
