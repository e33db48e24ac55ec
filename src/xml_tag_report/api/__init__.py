"""Extraction and reporting API.

Level 1: ``generate_report()`` builds the default report in one call.
Level 2: ``extract_tags`` / ``build_report`` for custom files and tags.
"""

from .adapters import (
    format_report,
    report_to_csv,
    report_to_dataframe,
    report_to_dict,
    report_to_records,
)
from .extractor import (
    FileResult,
    extract_all,
    extract_tags,
    extract_tags_async,
    resolve_path,
)
from .report import (
    REPORT_HEADER,
    Report,
    align_rows,
    build_report,
    generate_report,
    render_text,
)

__all__ = [
    "format_report",
    "report_to_csv",
    "report_to_dataframe",
    "report_to_dict",
    "report_to_records",
    "FileResult",
    "extract_all",
    "extract_tags",
    "extract_tags_async",
    "resolve_path",
    "REPORT_HEADER",
    "Report",
    "align_rows",
    "build_report",
    "generate_report",
    "render_text",
]
