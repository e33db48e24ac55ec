"""XML Tag Report.

Extracts the text of a fixed set of element names from XML documents and
prints them as an aligned, column-oriented report.

Progressive API Disclosure:
- Level 1: generate_report() with the built-in files and tags
- Level 2: extract_tags() / build_report() with ReportConfig or explicit lists
"""

__version__ = "0.1.0"
__author__ = "XML Tag Report Team"

from .api import (
    FileResult,
    Report,
    align_rows,
    build_report,
    extract_tags,
    format_report,
    generate_report,
    render_text,
)
from .shared import ParseError, ReadError, ReportConfig
from .tree import clean_values, collect_tag, parse_bytes, parse_file

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: one-call report
    "generate_report",
    "render_text",
    "format_report",

    # Level 2: building blocks
    "extract_tags",
    "build_report",
    "align_rows",
    "parse_file",
    "parse_bytes",
    "collect_tag",
    "clean_values",

    # Result objects, configuration and errors
    "FileResult",
    "Report",
    "ReportConfig",
    "ReadError",
    "ParseError",
]
