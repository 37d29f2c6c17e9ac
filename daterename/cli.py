import argparse
import sys
from pathlib import Path

from .errors import EXIT_INTERRUPTED, EXIT_OK, EXIT_PARTIAL_FAILURE, FatalInputError
from .models import DateOrder, RunOptions
from .pipeline import RunPipeline


def ask_yes_no(prompt: str) -> bool:
    return input(prompt + " [y/N]: ").strip().lower() in ("y", "yes")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daterename",
        description="Prefix image filenames with the date they were taken (YYYYMMDD_).",
    )
    parser.add_argument("--directory", "-d", required=True, help="Folder containing the images")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be done without modifying any file")
    parser.add_argument("--backup", action="store_true", help="Copy each file into a backup folder before renaming it")
    parser.add_argument("--fallback-mdate", action="store_true",
                        help="Use the file modification date when an image has no date taken")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only write to the log file")
    parser.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")
    parser.add_argument("--date-order", choices=[o.value for o in DateOrder], default=DateOrder.MDY.value,
                        help="Order of month and day in the metadata date (default: mdy)")
    parser.add_argument("--log-file", default="daterename.log", help="Name of the log file written in the folder")
    return parser


def options_from_args(args: argparse.Namespace) -> RunOptions:
    return RunOptions(
        directory=Path(args.directory).expanduser(),
        dry_run=args.dry_run,
        backup=args.backup,
        fallback_mdate=args.fallback_mdate,
        quiet=args.quiet,
        assume_yes=args.yes,
        date_order=DateOrder(args.date_order),
        log_name=args.log_file,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    options = options_from_args(args)
    pipeline = RunPipeline(options, confirm=ask_yes_no)
    try:
        result = pipeline.run()
    except FatalInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if result.counters.failed:
        return EXIT_PARTIAL_FAILURE
    return EXIT_OK
