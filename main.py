#!/usr/bin/env python3
"""
SortStats - Bubble sort, median and mode exercise
Main entry point for the sequence statistics report.

Usage:
    python main.py
    python main.py --values 4 2 7 1 --even-median mean
    python main.py --pig-latin "the end of inlets"
    python main.py --help
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent))

from core.analyzer import SequenceAnalyzer
from core.pig_latin import PigLatinTranslator
from core.preset_config import DEFAULT_PRESET, get_preset, list_presets
from core.statistics import EVEN_MEDIAN_POLICIES
from utils.reporter import ReportGenerator

logger = logging.getLogger(__name__)

DEFAULT_SENTENCE = ("Relaxing in basins at the end of inlets terminates "
                    "the endless tests from the box")


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.pig_latin is not None and (
            args.format != 'console' or args.detailed or args.even_median != 'none'):
        parser.error("--pig-latin cannot be combined with --format, --detailed or --even-median")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.pig_latin is not None:
            translator = PigLatinTranslator(case_sensitive=not args.ignore_case)
            print(f"Final pig latin: {translator.translate(args.pig_latin)}")
            return 0

        if args.values is not None:
            values = list(args.values)
        else:
            values = get_preset(args.preset)['values']

        analyzer = SequenceAnalyzer(even_median=args.even_median)
        reporter = ReportGenerator()

        report = analyzer.analyze(
            values,
            progress_callback=print_progress if args.verbose else None
        )

        if args.format == 'json':
            print(reporter.generate_json_report(report))
        else:
            reporter.print_console_report(report, detailed=args.detailed)

        return 0

    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            logger.exception("Analysis failed")
        return 1


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        description="SortStats - Bubble sort, median and mode of an integer sequence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --preset reversed --detailed
  python main.py --values 4 2 7 1 --even-median mean
  python main.py --format json
  python main.py --pig-latin
        """
    )

    # Input options
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        '--preset', '-p',
        choices=list_presets(),
        default=DEFAULT_PRESET,
        help=f'Built-in input sequence (default: {DEFAULT_PRESET})'
    )
    input_group.add_argument(
        '--values',
        nargs='*',
        type=int,
        help='Integer sequence to analyze instead of a preset'
    )
    input_group.add_argument(
        '--pig-latin',
        nargs='?',
        const=DEFAULT_SENTENCE,
        help='Translate text to pig latin instead of analyzing numbers '
             '(only --ignore-case and --verbose apply)'
    )

    # Statistics options
    parser.add_argument(
        '--even-median',
        choices=list(EVEN_MEDIAN_POLICIES),
        default='none',
        help="Median of even-length input: 'none' leaves it uncomputed, "
             "'mean' averages the two middle values (default: none)"
    )
    parser.add_argument(
        '--ignore-case',
        action='store_true',
        help='Treat uppercase vowels as vowels in pig latin'
    )

    # Output options
    parser.add_argument(
        '--format',
        choices=['console', 'json'],
        default='console',
        help='Output format for the report (default: console)'
    )
    parser.add_argument(
        '--detailed',
        action='store_true',
        help='Show descriptive statistics and sort counters in console report'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output, including every sort comparison'
    )

    return parser


def print_progress(message: str):
    """Progress callback function (stderr)"""
    print(f"Progress: {message}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
