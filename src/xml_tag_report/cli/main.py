"""Main CLI entry point for the xml-tag-report command-line tool.

Without arguments the built-in file and tag lists are used. Paths given on the
command line resolve against the current directory, and command-line options
override values loaded from a configuration file.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from xml_tag_report import __version__
from xml_tag_report.api import format_report, generate_report
from xml_tag_report.shared import (
    ConfigError,
    ReportConfig,
    configure_logging,
    get_logger,
)
from xml_tag_report.shared.config import OUTPUT_FORMATS


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml-tag-report",
        description="Extract element values from XML files into an aligned report"
    )

    parser.add_argument("--version", action="version", version=__version__)

    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="XML files to read (default: built-in sample list)"
    )
    parser.add_argument(
        "--tags", "-t",
        help="Comma separated element names to extract"
    )
    parser.add_argument(
        "--format", "-f",
        choices=list(OUTPUT_FORMATS),
        help="Output format (default: text)"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON configuration file"
    )
    parser.add_argument(
        "--concurrent",
        action="store_true",
        help="Process files concurrently (report order is unchanged)"
    )
    parser.add_argument(
        "--placeholder",
        help="Marker printed for missing values (default: N/A)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only report errors"
    )

    return parser


def parse_tags(value: str) -> List[str]:
    return [tag.strip() for tag in value.split(",") if tag.strip()]


def build_config(args: argparse.Namespace) -> ReportConfig:
    """Merge the configuration file and command-line overrides."""
    if args.config:
        config = ReportConfig.from_file(args.config)
    else:
        config = ReportConfig()

    overrides = config.to_dict()
    if args.paths:
        overrides["files"] = [str(path) for path in args.paths]
        overrides["base_dir"] = str(Path.cwd())
    if args.tags is not None:
        overrides["tags"] = parse_tags(args.tags)
    if args.format:
        overrides["output_format"] = args.format
    if args.placeholder is not None:
        overrides["placeholder"] = args.placeholder
    if args.concurrent:
        overrides["concurrent"] = True

    return ReportConfig.from_dict(overrides)


def cmd_report(args: argparse.Namespace) -> int:
    """Build, format and write the report."""
    logger = get_logger(__name__, component="cli")

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report = generate_report(config)
    formatted_output = format_report(
        report, config.output_format, separator=config.separator
    )

    if args.output:
        try:
            args.output.write_text(formatted_output + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        logger.info(f"Results written to {args.output}")
    else:
        print(formatted_output)

    # Per-file failures are already logged and never change the exit code
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        return cmd_report(args)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
