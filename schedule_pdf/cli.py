"""
Command-line interface for schedule_pdf.

Usage:
    schedule-pdf export turni-2026-10.json --output out/
    schedule-pdf info turni-2026-10.json --json
    schedule-pdf version
"""

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .utils.logger import get_logger

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="schedule-pdf",
        description="Render monthly shift schedules to PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  schedule-pdf export turni-2026-10.json --output out/
  schedule-pdf export turni-2026-10.json --display-config shift-display.config.json
  schedule-pdf info turni-2026-10.json
  schedule-pdf version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file (rotated at 10 MB)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    export_parser = subparsers.add_parser("export", help="Render a schedule JSON file to PDF")
    export_parser.add_argument("input", help="Schedule JSON file")
    export_parser.add_argument(
        "-o", "--output",
        default=".",
        help="Output directory (default: current directory)"
    )
    export_parser.add_argument(
        "--display-config",
        help="Shift display config JSON (aliases and labels)"
    )
    export_parser.add_argument(
        "--lines-per-page",
        type=int,
        help="Content lines below the header on each page (default: fill the page)"
    )
    export_parser.add_argument(
        "--prefix",
        help="Filename prefix (default: schedule)"
    )

    info_parser = subparsers.add_parser("info", help="Show schedule information")
    info_parser.add_argument("input", help="Schedule JSON file")
    info_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )

    subparsers.add_parser("version", help="Show version information")

    return parser


def _build_options(args):
    from .options import ExportOptions

    overrides = {}
    if getattr(args, "lines_per_page", None) is not None:
        overrides["lines_per_page"] = args.lines_per_page
    if getattr(args, "prefix", None):
        overrides["filename_prefix"] = args.prefix
    return ExportOptions.from_dict(overrides)


def cmd_export(args) -> int:
    """Handle export command."""
    from .api import export_schedule_pdf, load_schedule
    from .display_config import ShiftDisplayConfig
    from .export.sinks import FileSink

    grid = load_schedule(args.input)
    config = ShiftDisplayConfig.from_file(args.display_config) if args.display_config else None

    result = export_schedule_pdf(grid, FileSink(args.output), _build_options(args), config)
    print(f"Saved: {result.delivered} ({result.page_count} pages, {result.size:,} bytes)")
    return 0


def cmd_info(args) -> int:
    """Handle info command."""
    from .api import load_schedule
    from .engine.assembler import ScheduleAssembler

    grid = load_schedule(args.input)
    result = ScheduleAssembler().render(grid)

    info = {
        "file": str(Path(args.input)),
        "period": grid.period_id,
        "people": len(grid.people),
        "days": grid.day_count,
        "codes": grid.legend_codes(),
        "pages": result.page_count,
        "filename": result.filename,
    }

    if args.json:
        print(json.dumps(info, indent=2, ensure_ascii=False))
    else:
        table = Table(title=f"Schedule {grid.period_id}")
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="magenta")
        for key, value in info.items():
            if isinstance(value, list):
                value = ", ".join(value) or "-"
            table.add_row(key, str(value))
        Console().print(table)
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"schedule-pdf v{__version__}")
    return 0


def main(argv=None) -> int:
    """Main entry point for CLI."""
    from .exceptions import SchedulePdfError
    from .utils.rich_logger import setup_logging

    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, log_file=args.log_file)

    commands = {
        "export": cmd_export,
        "info": cmd_info,
        "version": cmd_version,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except SchedulePdfError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
