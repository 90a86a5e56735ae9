"""Command-line interface for generating assets maps."""

import argparse
import logging
import signal
import sys
import threading
from collections import Counter
from collections.abc import Sequence
from pathlib import PurePosixPath
from typing import NoReturn

from assets_mapper.assets_watcher import watch_assets_map
from assets_mapper.errors import AssetsMapperError
from assets_mapper.generate_assets_map import generate_assets_map
from assets_mapper.generation_result import GenerationResult
from assets_mapper.generator_options import DEFAULT_EXTS, GeneratorOptions
from assets_mapper.identifier_resolver import PREFIX_STRATEGIES
from assets_mapper.init_config import write_config_template
from assets_mapper.load_config import load_config
from assets_mapper.merge_config import merge_config
from assets_mapper.naming_strategies import NAMING_STRATEGIES

EPILOG = """
Examples:
  assets-mapper --src ./public/assets --out ./src/assetsMap.js --public
  assets-mapper --src ./src/assets --out ./src/assetsMap.js --watch
  assets-mapper --src ./assets --out ./src/assetsMap.js --exts png,svg,jpg
  assets-mapper --src ./assets --out ./src/assetsMap.ts --naming camelCase
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        """Print usage and exit with status 1."""
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_list(value: str) -> list[str]:
    """Split a comma-separated option value."""
    return [item.strip() for item in value.split(",") if item.strip()]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the assets-mapper command."""
    ap = _ArgumentParser(
        prog="assets-mapper",
        description="Generate typed asset maps for bundler-based web projects.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    ap.add_argument("--src", help="Source directory containing image assets")
    ap.add_argument("--out", help="Output file path for the generated map")
    ap.add_argument(
        "--public",
        action="store_true",
        default=None,
        help="Generate public URLs instead of import statements",
    )
    ap.add_argument(
        "--public-dir",
        help="Directory public URLs are relative to (default: ./public)",
    )
    ap.add_argument(
        "--watch",
        "-w",
        action="store_true",
        help="Watch for changes and auto-regenerate (stays running)",
    )
    ap.add_argument(
        "--exts",
        type=parse_list,
        help=(
            "Comma-separated file extensions "
            f"(default: {','.join(DEFAULT_EXTS)})"
        ),
    )
    ap.add_argument(
        "--exclude",
        type=parse_list,
        help="Comma-separated glob patterns to exclude",
    )
    ap.add_argument(
        "--include",
        type=parse_list,
        help="Comma-separated glob patterns; only matching files are processed",
    )
    ap.add_argument(
        "--naming",
        choices=NAMING_STRATEGIES,
        help="Naming strategy for export names (default: sanitized file name)",
    )
    ap.add_argument(
        "--prefix",
        choices=PREFIX_STRATEGIES,
        help="Prefix strategy for duplicate names (default: folder)",
    )
    ap.add_argument("--config", help="Path to a configuration file")
    ap.add_argument(
        "--init",
        action="store_true",
        help="Write a starter assets-mapper.config.yml and exit",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Print the generated module instead of writing it",
    )
    ap.add_argument(
        "--stats",
        action="store_true",
        help="Print per-directory counts and the identifier table",
    )
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return ap


def options_from_args(args: argparse.Namespace) -> GeneratorOptions:
    """Merge config file values with the command-line overrides."""
    overrides = {
        "src": args.src,
        "out": args.out,
        "public": args.public,
        "public_dir": args.public_dir,
        "exts": args.exts,
        "exclude": args.exclude,
        "include": args.include,
        "naming_strategy": args.naming,
        "prefix_strategy": args.prefix,
        "dry_run": args.dry_run,
    }
    return merge_config(load_config(args.config), overrides)


def print_summary(result: GenerationResult) -> None:
    """Print the outcome of a generation run."""
    # A dry run prints the module itself on stdout, so the summary goes to stderr.
    out = sys.stdout if result.written else sys.stderr
    if result.written:
        print("Assets map generated successfully!", file=out)
    else:
        print("Dry run: assets map not written.", file=out)
    print(f"   Output: {result.output_file}", file=out)
    print(f"   Processed: {result.total_files} files", file=out)
    if result.directories:
        print(f"   Directories: {', '.join(sorted(result.directories))}", file=out)
    if result.duplicates:
        print(f"   Duplicates: {', '.join(sorted(result.duplicates))}", file=out)


def print_stats(result: GenerationResult) -> None:
    """Print per-directory file counts and the identifier assignments."""
    out = sys.stdout if result.written else sys.stderr
    per_dir = Counter(str(PurePosixPath(p).parent) for p in result.processed_files)
    print("\nFiles per directory:", file=out)
    for directory, count in sorted(per_dir.items()):
        print(f"   {directory}: {count}", file=out)
    print("\nIdentifiers:", file=out)
    width = max((len(i) for i in result.identifiers.values()), default=0)
    for path in result.processed_files:
        print(f"   {result.identifiers[path]:<{width}}  {path}", file=out)


def run_watch(options: GeneratorOptions) -> int:
    """Keep regenerating until interrupted."""
    watcher = watch_assets_map(options)
    print("Press Ctrl+C to stop watching")
    stopped = threading.Event()
    signal.signal(signal.SIGTERM, lambda *_: stopped.set())
    try:
        while not stopped.wait(0.5):
            pass
    except KeyboardInterrupt:
        print("\nShutting down...")
    finally:
        watcher.stop()
    return 0


def run(args: argparse.Namespace) -> int:
    """Execute the command for parsed arguments."""
    if args.init:
        path = write_config_template()
        print(f"Created {path}")
        return 0

    options = options_from_args(args)
    if args.watch and options.dry_run:
        print("Error: --watch cannot be combined with --dry-run", file=sys.stderr)
        return 1

    result = generate_assets_map(options)
    if not result.written:
        sys.stdout.write(result.content)
    print_summary(result)
    if args.stats:
        print_stats(result)

    if args.watch:
        print()
        return run_watch(options)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the assets-mapper command line."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        level = logging.DEBUG
    elif args.watch:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        return run(args)
    except AssetsMapperError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
