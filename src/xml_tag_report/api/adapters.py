"""Export adapters for built reports.

Text is the default listing; JSON and CSV carry the same aligned rows for
downstream tools, and a pandas DataFrame is available when pandas is installed.
"""

import csv
import io
import json
from typing import Any, Dict, List

from .report import Report, render_text

FILE_COLUMN = "file"


def report_to_records(report: Report) -> List[Dict[str, str]]:
    """Flatten the report into one record per aligned row."""
    records = []
    for result, rows in report.iter_rows():
        for row in rows:
            record = {FILE_COLUMN: result.path}
            record.update(zip(report.tags, row))
            records.append(record)
    return records


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert the report to a JSON-compatible dictionary."""
    return {
        "tags": list(report.tags),
        "files": [
            {
                "file": result.path,
                "values": {tag: list(result.get(tag)) for tag in report.tags},
                "rows": [list(row) for row in rows],
            }
            for result, rows in report.iter_rows()
        ],
        "failures": [
            {
                "file": failure.path,
                "error": type(failure).__name__,
                "message": str(failure),
            }
            for failure in report.failures
        ],
    }


def report_to_csv(report: Report) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow([FILE_COLUMN, *report.tags])
    for record in report_to_records(report):
        writer.writerow([record[FILE_COLUMN], *(record[tag] for tag in report.tags)])
    return output.getvalue().rstrip("\n")


def format_report(report: Report, format_type: str = "text", separator: str = ", ") -> str:
    """Format a report for output.

    Args:
        report: Report to format
        format_type: ``text``, ``json`` or ``csv``
        separator: Column separator for the text listing

    Returns:
        Formatted report
    """
    if format_type == "json":
        return json.dumps(report_to_dict(report), indent=2, ensure_ascii=False)
    if format_type == "csv":
        return report_to_csv(report)
    if format_type == "text":
        return render_text(report, separator=separator)
    raise ValueError(f"Unknown output format: {format_type}")


def report_to_dataframe(report: Report):
    """Convert the aligned rows into a pandas DataFrame.

    Columns are ``file`` followed by the report tags, one row per aligned row.

    Raises:
        ImportError: If pandas is not installed
    """
    try:
        import pandas as pd
    except ImportError as e:
        raise ImportError(
            "report_to_dataframe requires pandas: pip install 'xml-tag-report[dataframe]'"
        ) from e

    return pd.DataFrame(report_to_records(report), columns=[FILE_COLUMN, *report.tags])
