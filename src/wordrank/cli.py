#!/usr/bin/env python3
"""Command line interface for ranking the most frequent words."""

import argparse
import json
import sys
from pathlib import Path

from .batch import BatchRanker, DocumentResult
from .config import DEFAULT_TOP, JobConfig, parse_parameter_overrides
from .sources import STDIN_SOURCE


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def main() -> int:
    """Rank the most frequent words of one or more documents."""
    parser = argparse.ArgumentParser(
        description="List the most frequent words of text documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s book.txt                      # Top 10 words
  %(prog)s book.txt -n 25 --counts       # Top 25 words with counts
  %(prog)s https://example.com/book.txt  # Download (cached) and rank
  cat book.txt | %(prog)s -              # Read from stdin
  %(prog)s --config job.yml --parallel   # Rank documents listed in YAML
  %(prog)s --config job.yml --set top=5 --json
        """,
    )

    parser.add_argument("sources", nargs="*", help="Files, URLs, or - for stdin")
    parser.add_argument(
        "-n", "--top", type=_positive_int, metavar="N", help=f"Number of words (default: {DEFAULT_TOP})"
    )
    parser.add_argument("--config", type=Path, help="Path to job YAML config")
    parser.add_argument(
        "--set",
        nargs="+",
        metavar="KEY=VALUE",
        help="Override parameters (e.g., --set top=5 encoding=latin-1)",
    )

    # Parallel execution
    parallel_group = parser.add_mutually_exclusive_group()
    parallel_group.add_argument(
        "--parallel", action="store_true", help="Rank documents in parallel (overrides config)"
    )
    parallel_group.add_argument(
        "--sequential", action="store_true", help="Force sequential ranking (overrides config)"
    )
    parser.add_argument(
        "--max-workers",
        type=_positive_int,
        metavar="N",
        help="Maximum number of parallel workers",
    )

    # Output
    parser.add_argument("--counts", action="store_true", help="Print counts next to words")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    args = parser.parse_args()

    try:
        config = _load_config(args)
    except (ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if config is None:
        return 1

    if args.parallel:
        config.parallel = True
    elif args.sequential:
        config.parallel = False

    if args.max_workers is not None:
        config.max_workers = args.max_workers

    results = BatchRanker(config).run()

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
    else:
        _print_results(results, counts=args.counts)

    return 0 if all(r.success for r in results) else 1


def _load_config(args: argparse.Namespace) -> JobConfig | None:
    """Build the job from --config and positional sources.

    Returns:
        Job configuration, or None if the config file does not exist.
    """
    if args.config is not None:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return None
        config = JobConfig.from_yaml(args.config)
        config.add_sources(args.sources)
    else:
        config = JobConfig.from_sources(args.sources or [STDIN_SOURCE])

    if args.set:
        config.override_parameters(parse_parameter_overrides(args.set))
    if args.top is not None:
        config.override_parameters({"top": args.top})
    return config


def _print_results(results: list[DocumentResult], counts: bool) -> None:
    """Print ranked words, with a header per document when there are several."""
    show_headers = len(results) > 1
    for i, result in enumerate(results):
        if not result.success:
            continue
        if show_headers:
            if i > 0:
                print()
            print(f"== {result.name} ==")
        for entry in result.words:
            print(f"{entry.word}\t{entry.count}" if counts else entry.word)


if __name__ == "__main__":
    sys.exit(main())
