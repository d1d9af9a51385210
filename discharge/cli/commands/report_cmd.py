"""Report command - extract discharge records from an export file."""
# ruff: noqa: T201

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from discharge.core.config import OUTPUT_FORMATS, DischargeConfig
from discharge.core.exceptions import InputNotFoundError
from discharge.reporting.export import write_csv, write_json
from discharge.reporting.text import format_text
from discharge.services.report_service import ReportService, select_mode

if TYPE_CHECKING:
    import argparse

    from discharge.core.models import ReportResult


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the arguments shared by every command that reads an export."""
    parser.add_argument(
        "input",
        type=Path,
        help="Circulation export text file"
    )

    parser.add_argument(
        "--encoding",
        help="Text encoding of the export (default: from config, utf-8)"
    )


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add command-specific arguments."""
    add_input_arguments(parser)

    parser.add_argument(
        "--brief",
        action="store_true",
        help="Show only Header, Author, Location and Description"
    )

    parser.add_argument(
        "--pretty", "--wide",
        dest="pretty",
        action="store_true",
        help=(
            "Render all fields as an auto-sized table (overrides --brief; "
            "text output only, cannot be combined with --format json/csv)"
        )
    )

    parser.add_argument(
        "--legacy-sorting",
        action="store_true",
        help="Keep export order instead of sorting by location, header, author, description"
    )

    parser.add_argument(
        "--show-char-count",
        action="store_true",
        help="Print the length of every line instead of extracting records"
    )

    parser.add_argument(
        "--pass-through",
        action="store_true",
        help="Print the input lines unchanged"
    )

    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: from config, text)"
    )

    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Write output to this file instead of stdout"
    )


def emit_result(
    result: ReportResult,
    output_format: str,
    pretty: bool = False,
    output: Path | None = None,
) -> None:
    """Write a report result to ``output`` or stdout."""
    stream = open(output, "w", encoding="utf-8", newline="") if output else sys.stdout
    try:
        if output_format == "json":
            write_json(result, stream)
        elif output_format == "csv":
            write_csv(result, stream)
        else:
            stream.write(format_text(result, pretty=pretty) + "\n")
        stream.flush()
    finally:
        if output:
            stream.close()


def execute(args: argparse.Namespace) -> int:
    """Execute the report command."""
    if args.pretty and args.format in ("json", "csv"):
        print(f"✗ --pretty cannot be combined with --format {args.format}")
        return 1

    try:
        config = DischargeConfig.load(config_path=args.config)
        pretty = args.pretty or config.pretty
        mode = select_mode(
            pass_through=args.pass_through,
            show_char_count=args.show_char_count,
            brief=args.brief or config.brief,
            pretty=pretty,
        )

        service = ReportService(config)
        result = service.run(
            args.input,
            mode=mode,
            legacy_sorting=args.legacy_sorting or config.legacy_sorting,
            encoding=args.encoding,
        )

        # Warnings in result.warnings have already been logged by the service.
        if result.is_empty:
            return 1

        emit_result(
            result,
            output_format=args.format or config.output_format,
            pretty=pretty,
            output=args.output,
        )

        if args.output:
            print(f"💾 Report saved to: {args.output}", file=sys.stderr)

        return 0

    except InputNotFoundError as e:
        print(f"✗ {e}")
        return 1
    except Exception as e:
        print(f"✗ Report command failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1
