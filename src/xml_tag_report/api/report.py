"""Report assembly and text rendering.

Rows are built by zipping each file's per-tag value lists by position and
padding the shorter lists with a placeholder. Values on the same row are not
joined by any key: a row is a display convenience, not a record.
"""

import asyncio
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from xml_tag_report.shared import (
    ExtractionError,
    ReportConfig,
    get_logger,
)
from xml_tag_report.shared.config import DEFAULT_PLACEHOLDER, DEFAULT_SEPARATOR

from .extractor import FileResult, extract_all

REPORT_HEADER = "Relatório de Tags:"
FILE_HEADER = "Arquivo: {path}"

Row = Tuple[str, ...]


def align_rows(
    values: Mapping[str, Sequence[str]],
    tags: Sequence[str],
    placeholder: str = DEFAULT_PLACEHOLDER
) -> List[Row]:
    """Zip per-tag value lists into rows, padding with ``placeholder``.

    Tags missing from ``values`` count as empty lists. The row count is the
    length of the longest list; zero when every list is empty.
    """
    columns = [list(values.get(tag, ())) for tag in tags]
    max_length = max((len(column) for column in columns), default=0)

    rows = []
    for index in range(max_length):
        rows.append(tuple(
            column[index] if index < len(column) else placeholder
            for column in columns
        ))
    return rows


@dataclass
class Report:
    """Extraction results of one run, in input file order."""

    tags: List[str]
    results: List[FileResult] = field(default_factory=list)
    failures: List[ExtractionError] = field(default_factory=list)
    placeholder: str = DEFAULT_PLACEHOLDER

    @property
    def files(self) -> List[str]:
        return [result.path for result in self.results]

    def rows(self, result: FileResult) -> List[Row]:
        return align_rows(result.values, self.tags, self.placeholder)

    def iter_rows(self):
        """Yield ``(result, rows)`` for every file in order."""
        for result in self.results:
            yield result, self.rows(result)

    @property
    def row_count(self) -> int:
        return sum(len(rows) for _, rows in self.iter_rows())


async def build_report(
    files: Sequence[Union[str, Path]],
    tags: Sequence[str],
    base_dir: Optional[Path] = None,
    concurrent: bool = False,
    placeholder: str = DEFAULT_PLACEHOLDER,
    correlation_id: Optional[str] = None
) -> Report:
    """Extract every file and gather the successes into a report."""
    logger = get_logger(__name__, correlation_id, "report_builder")

    outcomes = await extract_all(
        files,
        tags,
        base_dir=base_dir,
        concurrent=concurrent,
        correlation_id=correlation_id,
    )

    report = Report(tags=list(tags), placeholder=placeholder)
    for _, outcome in outcomes:
        if isinstance(outcome, ExtractionError):
            report.failures.append(outcome)
        else:
            report.results.append(outcome)

    logger.info(
        "Report built",
        extra={
            "file_count": len(report.results),
            "failure_count": len(report.failures),
        }
    )
    return report


def generate_report(
    config: Optional[ReportConfig] = None,
    correlation_id: Optional[str] = None
) -> Report:
    """Build the report described by ``config`` (defaults when omitted)."""
    config = config or ReportConfig()
    correlation_id = correlation_id or uuid.uuid4().hex[:8]

    return asyncio.run(build_report(
        config.files,
        config.tags,
        base_dir=config.base_dir,
        concurrent=config.concurrent,
        placeholder=config.placeholder,
        correlation_id=correlation_id,
    ))


def render_text(
    report: Report,
    separator: str = DEFAULT_SEPARATOR,
    header: str = REPORT_HEADER
) -> str:
    """Render the report as the plain-text listing printed on stdout."""
    lines = [header]
    for result, rows in report.iter_rows():
        lines.append("")
        lines.append(FILE_HEADER.format(path=result.path))
        for row in rows:
            lines.append(separator.join(row))
    return "\n".join(lines)
