"""
Command Line Interface

Parses saved Google Maps place responses into entries and writes them
to JSON and CSV.

Usage:
    python -m gmaps_entry place.json
    python -m gmaps_entry responses/*.json -o output/places.json --csv output/places.csv
    python -m gmaps_entry responses/*.json --skip-invalid --parallel 8
"""

import argparse
import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from . import config
from .config_manager import ExtractorConfig
from .exceptions import ConfigurationError, GMapsEntryError
from .export import write_csv, write_json
from .models import Entry
from .parsers import entry_from_json

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "output/entries.json"
DEFAULT_CSV = "output/entries.csv"


def parse_file(path: str) -> Tuple[str, Optional[Entry], Optional[str]]:
    """Parse one saved response file. Returns (path, entry, error)."""
    try:
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        return path, None, f"cannot read file: {e}"

    try:
        return path, entry_from_json(raw), None
    except GMapsEntryError as e:
        return path, None, str(e)


def parse_files(paths: List[str], workers: int) -> List[Tuple[str, Optional[Entry], Optional[str]]]:
    """Parse files in parallel, preserving input order."""
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(parse_file, paths))


def main(argv: List[str] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Google Maps Place Entry Extractor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m gmaps_entry place.json
  python -m gmaps_entry responses/*.json -o output/places.json
  python -m gmaps_entry responses/*.json --csv output/places.csv --skip-invalid
  python -m gmaps_entry responses/*.json --no-csv --parallel 8
        """
    )

    parser.add_argument(
        "files",
        nargs="+",
        help="Saved /maps/preview/place response bodies"
    )
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT,
        help=f"Output JSON file path (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument(
        "--csv",
        default=DEFAULT_CSV,
        help=f"Output CSV file path (default: {DEFAULT_CSV})"
    )
    parser.add_argument(
        "--no-csv",
        action="store_true",
        help="Disable CSV output"
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Leave out entries without a name or category"
    )
    parser.add_argument(
        "-p", "--parallel",
        type=int,
        default=None,
        help="Number of parallel workers (default: GMAPS_ENTRY_WORKERS or "
             f"{config.DEFAULT_PARALLEL_WORKERS}, capped at GMAPS_ENTRY_MAX_WORKERS or "
             f"{config.MAX_PARALLEL_WORKERS})"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: GMAPS_ENTRY_LOG_LEVEL or WARNING)"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress output"
    )

    args = parser.parse_args(argv)
    verbose = not args.quiet

    try:
        extractor_config = ExtractorConfig(log_level=args.log_level)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    extractor_config.apply()
    extractor_config.configure_logging()

    workers = args.parallel or extractor_config.default_workers
    workers = max(1, min(workers, extractor_config.max_workers))

    try:
        start_time = time.time()
        results = parse_files(args.files, workers)

        entries = []
        failed = 0
        invalid = 0
        for path, entry, error in results:
            if error:
                failed += 1
                logger.warning("Failed to parse %s: %s", path, error)
                if verbose:
                    print(f"  FAIL    {path}: {error}")
                continue

            if not entry.is_valid():
                invalid += 1
                if verbose:
                    print(f"  INVALID {path}: name or category missing")
                if args.skip_invalid:
                    continue
            elif verbose:
                print(f"  OK      {path}: {entry.title}")

            entries.append(entry)

        write_json(entries, args.output, metadata={
            'files': len(args.files),
            'failed': failed,
            'invalid': invalid,
            'skip_invalid': args.skip_invalid,
        })
        if not args.no_csv:
            write_csv(entries, args.csv)

        if verbose:
            print(f"\nDone in {time.time() - start_time:.1f}s! Extracted {len(entries)} entries.")
            print(f"  Failed: {failed}")
            print(f"  Invalid: {invalid}")
            print(f"  JSON output: {args.output}")
            if not args.no_csv:
                print(f"  CSV output: {args.csv}")

        return 1 if failed else 0

    except OSError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
