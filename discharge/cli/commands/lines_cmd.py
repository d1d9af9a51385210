"""Lines command - inspect an export without extracting records."""
# ruff: noqa: T201

from __future__ import annotations

from typing import TYPE_CHECKING

from discharge.cli.commands.report_cmd import add_input_arguments, emit_result
from discharge.core.config import DischargeConfig
from discharge.core.exceptions import InputNotFoundError
from discharge.services.report_service import ReportService, select_mode

if TYPE_CHECKING:
    import argparse


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add command-specific arguments."""
    add_input_arguments(parser)

    parser.add_argument(
        "--show-char-count",
        action="store_true",
        help="Prefix every line with its length"
    )


def execute(args: argparse.Namespace) -> int:
    """Execute the lines command."""
    try:
        config = DischargeConfig.load(config_path=args.config)
        mode = select_mode(
            pass_through=not args.show_char_count,
            show_char_count=args.show_char_count,
        )
        result = ReportService(config).run(args.input, mode=mode, encoding=args.encoding)
        emit_result(result, output_format="text")
        return 0

    except InputNotFoundError as e:
        print(f"✗ {e}")
        return 1
    except Exception as e:
        print(f"✗ Lines command failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1
