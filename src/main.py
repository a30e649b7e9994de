"""
Employee PDF Reports - Main Entry Point

Generates employee roster, department and salary-analysis PDF reports
from built-in sample data or a CSV file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from cli.menu import ReportMenu
from config.settings import get_output_dir, is_dev_mode
from reporting import ReportAssembler
from services.employee_directory import EmployeeDirectory
from utils.error_handling import handle_report_error
from utils.logging_utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate employee PDF reports.")
    parser.add_argument("--csv", type=Path, help="Load employees from this CSV file instead of sample data")
    parser.add_argument("--output-dir", type=Path, default=None, help="Directory for generated reports")
    parser.add_argument("--batch", action="store_true", help="Generate every report and exit")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Root log level (DEBUG in dev mode, INFO otherwise)",
    )
    return parser


def create_output_directory(path: Path) -> Path:
    """Create the report directory, announcing it the first time."""
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        print(f"Created output directory: {path}")
    print(f"Reports will be saved to: {path.resolve()}\n")
    return path


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    level_name = args.log_level or ("DEBUG" if is_dev_mode() else "INFO")
    setup_logging(level=getattr(logging, level_name))

    print("=== Employee PDF Report Generator ===")
    print("Initializing application...\n")

    try:
        output_dir = create_output_directory(args.output_dir or get_output_dir())
    except OSError as e:
        print(handle_report_error(e, "Failed to create output directory"), file=sys.stderr)
        return 1

    directory = EmployeeDirectory()
    if args.csv is not None:
        try:
            directory.load_csv(args.csv)
        except OSError as e:
            print(handle_report_error(e, "Error loading CSV file", args.csv), file=sys.stderr)
            print("Continuing with sample data...")

    assembler = ReportAssembler()

    if args.batch:
        result = assembler.generate_all(directory, output_dir)
        for path in result.generated:
            print(f"✓ {path.name}")
        for error in result.errors:
            print(f"✗ {error}", file=sys.stderr)
        print(f"Total reports created: {len(result.generated)}")
        return 0 if result.ok else 1

    ReportMenu(directory, assembler, output_dir).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
