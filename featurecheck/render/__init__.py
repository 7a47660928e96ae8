"""Report renderers for census results."""

from .json_report import build_json_payload, write_json
from .report import ReportRenderer

__all__ = ["ReportRenderer", "build_json_payload", "write_json"]
