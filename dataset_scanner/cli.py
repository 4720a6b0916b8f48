"""
Command-line interface for dataset scanner v1.0.

This module provides a command-line interface for the dataset scanner,
allowing users to scan a program file or a directory of program files and
print or export the report of permanent datasets they create.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from colorama import Fore, Style, init
from tabulate import tabulate

from dataset_scanner import DatasetExtractor, DatasetScanner, ErrorMode, ScanConfig
from dataset_scanner.exceptions import ScanError
from dataset_scanner.models.config import DEFAULT_EXTENSIONS
from dataset_scanner.models.scan_report import REPORT_COLUMNS

HAS_COLOR = True


def print_success(msg: str) -> None:
    """Print success message."""
    if HAS_COLOR:
        print(f"{Fore.GREEN}[OK] {msg}{Style.RESET_ALL}")
    else:
        print(f"[OK] {msg}")


def print_error(msg: str) -> None:
    """Print error message."""
    if HAS_COLOR:
        print(f"{Fore.RED}[ERROR] {msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(f"[ERROR] {msg}", file=sys.stderr)


def print_warning(msg: str) -> None:
    """Print warning message."""
    if HAS_COLOR:
        print(f"{Fore.YELLOW}[WARN] {msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(f"[WARN] {msg}", file=sys.stderr)


def print_info(msg: str) -> None:
    """Print info message."""
    if HAS_COLOR:
        print(f"{Fore.CYAN}{msg}{Style.RESET_ALL}")
    else:
        print(msg)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dataset-scanner",
        description="Permanent Dataset Scanner - v1.0",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scan a directory of programs
  %(prog)s programs/

  # Which programs create a dataset?
  %(prog)s programs/ --find lib1.sales

  # Datasets written by more than one program
  %(prog)s programs/ --shared

  # Export the report
  %(prog)s programs/ --format csv --export datasets.csv
  %(prog)s programs/ --format graph --export graph.json
        """,
    )

    input_group = parser.add_argument_group("Input Options")
    input_group.add_argument("path", help="Program file or directory to scan")
    input_group.add_argument(
        "--extensions",
        "-x",
        nargs="+",
        default=list(DEFAULT_EXTENSIONS),
        metavar="EXT",
        help=f"Recognized file extensions (default: {' '.join(DEFAULT_EXTENSIONS)})",
    )
    input_group.add_argument(
        "--encoding", default="utf-8", help="Source file encoding (default: utf-8)"
    )

    query_group = parser.add_argument_group("Query Options")
    query_group.add_argument(
        "--find",
        metavar="LIBRARY.MEMBER",
        help="Show only the rows creating this dataset",
    )
    query_group.add_argument(
        "--shared",
        action="store_true",
        help="List datasets created by more than one program",
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--format",
        "-f",
        choices=["table", "json", "csv", "graph"],
        default="table",
        help="Output format (default: table)",
    )
    output_group.add_argument(
        "--export", "-o", metavar="FILE", help="Write the output to a file"
    )
    output_group.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--workers",
        "-w",
        type=int,
        default=1,
        help="Number of files scanned concurrently (default: 1)",
    )
    config_group.add_argument(
        "--strict",
        action="store_true",
        help="Fail the run when a file cannot be read",
    )
    config_group.add_argument(
        "--no-warnings", action="store_true", help="Suppress diagnostics"
    )
    config_group.add_argument(
        "--verbose", "-v", action="store_true", help="Log every diagnostic"
    )
    return parser


def main(argv=None) -> None:
    """
    CLI main entry point.

    Supported commands:
        dataset-scanner programs/
        dataset-scanner job.sas --format json
        dataset-scanner programs/ --find lib1.sales
        dataset-scanner programs/ --shared
        dataset-scanner programs/ --format csv --export report.csv
    """
    args = build_parser().parse_args(argv)

    global HAS_COLOR
    HAS_COLOR = not args.no_color
    init(autoreset=True)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ScanConfig(
            extensions=tuple(args.extensions),
            encoding=args.encoding,
            max_workers=args.workers,
            on_unreadable=ErrorMode.FAIL if args.strict else ErrorMode.WARN,
        )
    except (TypeError, ValueError) as e:
        print_error(f"Invalid configuration: {e}")
        sys.exit(1)

    if args.find:
        try:
            args.find = DatasetExtractor.normalize_name(args.find)
        except ValueError as e:
            print_error(str(e))
            sys.exit(1)

    # Machine-readable output on stdout must not be mixed with status lines
    verbose_stdout = args.format == "table" or bool(args.export)

    try:
        if verbose_stdout:
            print_info(f"Scanning: {args.path}")
        result = DatasetScanner(config).scan(args.path)
    except ScanError as e:
        print_error(f"Scan failed: {e}")
        sys.exit(1)

    report = result.report

    if args.find:
        handle_find(report, args.find)
    elif args.shared:
        handle_shared(report)
    else:
        if verbose_stdout:
            print_success(
                f"Scanned {len(result.files)} file(s), "
                f"found {len(report)} permanent dataset reference(s)."
            )
        output = render(result, args.format)
        if args.export:
            handle_export(output, args.export)
        else:
            print(output)

    if not args.no_warnings:
        show_warnings(result)


def render(result, format: str) -> str:
    """Render a scan result in the requested format."""
    report = result.report
    if format == "json":
        return report.to_json(indent=2)
    if format == "csv":
        return report.to_csv()
    if format == "graph":
        return json.dumps(report.to_graph().to_dict(), indent=2, ensure_ascii=False)
    if not report.rows:
        return "No permanent datasets found."
    return tabulate(
        [
            [
                row.id,
                row.code_file,
                row.dataset,
                row.line_num,
                row.block_type.value,
                row.context,
            ]
            for row in report
        ],
        headers=REPORT_COLUMNS,
        tablefmt="github",
    )


def handle_find(report, dataset: str) -> None:
    """Handle --find command."""
    rows = report.find(dataset)
    if not rows:
        print_warning(f"No program creates {dataset}")
        return

    print_success(f"{dataset} is created in {len(rows)} place(s):\n")
    for row in rows:
        context = f" [{row.context}]" if row.context else ""
        print(f"  {row.code_file}:{row.line_num} ({row.block_type.value}){context}")


def handle_shared(report) -> None:
    """Handle --shared command."""
    shared = report.to_graph().get_shared_datasets()
    if not shared:
        print_success("No dataset is created by more than one program.")
        return

    print_success(f"{len(shared)} dataset(s) created by more than one program:\n")
    for dataset, producers in shared.items():
        if HAS_COLOR:
            print(f"{Fore.YELLOW}{dataset}:{Style.RESET_ALL}")
        else:
            print(f"{dataset}:")
        for producer in producers:
            print(f"  - {producer}")


def handle_export(output: str, output_file: str) -> None:
    """Write rendered output to a file."""
    output_path = Path(output_file)
    output_path.write_text(output, encoding="utf-8")
    print_success(f"Exported to {output_path}")


def show_warnings(result) -> None:
    """Show WARNING and ERROR diagnostics."""
    warnings = [w for w in result.warnings if w.level != "INFO"]
    if warnings:
        print_warning(f"{len(warnings)} warning(s):")
        for i, warning in enumerate(warnings, 1):
            print(f"  {i}. {warning}", file=sys.stderr)


if __name__ == "__main__":
    main()
