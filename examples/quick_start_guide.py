#!/usr/bin/env python3
"""
Quick Start Guide for XML Tag Report.

Walks through the building blocks: parsing a document into a tree, collecting
tag values, and building the aligned report for several files.
"""

import asyncio
import sys
import tempfile
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_tag_report import (
    align_rows,
    build_report,
    clean_values,
    collect_tag,
    format_report,
    parse_bytes,
)

SAMPLE_XML = b"""<usuarios>
    <usuario>
        <cd_corretor>10</cd_corretor>
        <nm_usuario> Alice </nm_usuario>
        <cd_usuario>5</cd_usuario>
    </usuario>
    <usuario>
        <cd_corretor>11</cd_corretor>
    </usuario>
</usuarios>"""

TAGS = ["cd_corretor", "nm_usuario", "cd_usuario"]


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - XML Tag Report")
    print("=" * 35)

    # Step 1: Parse a document into the generic tree
    print("\nStep 1: Document tree")
    print("-" * 30)
    tree = parse_bytes(SAMPLE_XML, source="sample")
    print(tree)

    # Step 2: Collect and clean the values of each tag
    print("\nStep 2: Collected values")
    print("-" * 30)
    values = {tag: clean_values(collect_tag(tree, tag)) for tag in TAGS}
    for tag, items in values.items():
        print(f"  {tag}: {items}")

    # Step 3: Align the value lists into rows
    print("\nStep 3: Aligned rows")
    print("-" * 30)
    for row in align_rows(values, TAGS):
        print("  " + ", ".join(row))

    # Step 4: Full report over files, including one that fails
    print("\nStep 4: Report over files")
    print("-" * 30)
    with tempfile.TemporaryDirectory() as tmp:
        good = Path(tmp) / "usuarios.xml"
        good.write_bytes(SAMPLE_XML)
        broken = Path(tmp) / "broken.xml"
        broken.write_text("<usuarios><usuario>", encoding="utf-8")

        report = asyncio.run(build_report([broken, good], TAGS, concurrent=True))
        print(format_report(report))
        print(f"\nFailed files: {[failure.path for failure in report.failures]}")


if __name__ == "__main__":
    quick_start_example()
