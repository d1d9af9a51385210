"""Main CLI entry point for the discharge report parser."""
# ruff: noqa: T201

import argparse
import logging
import sys
from pathlib import Path

from discharge.cli.commands import lines_cmd, report_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="discharge",
        description="Discharge report - rebuild item records from a circulation export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  discharge report export.txt
  discharge report export.txt --brief
  discharge report export.txt --pretty --legacy-sorting
  discharge report export.txt --format csv --output discharged.csv
  discharge lines export.txt --show-char-count
        """,
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        metavar="COMMAND"
    )

    report_parser = subparsers.add_parser(
        "report",
        help="Extract discharge records from an export",
        description="Parse an export into one record per discharged item"
    )
    report_cmd.add_arguments(report_parser)

    lines_parser = subparsers.add_parser(
        "lines",
        help="Print export lines unchanged or with their lengths",
        description="Inspect the raw lines of an export for format debugging"
    )
    lines_cmd.add_arguments(lines_parser)

    return parser


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        return 1

    log_level = logging.DEBUG if parsed_args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    try:
        if parsed_args.command == "report":
            return report_cmd.execute(parsed_args)
        if parsed_args.command == "lines":
            return lines_cmd.execute(parsed_args)
        print(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except Exception as e:
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
