"""
Command-line runner for the two lambda exercises.

With no arguments it sorts the sample numbers ascending then descending (the
second sort works on the output of the first) and adds the sample operands
through the named 'addition' reference:

    Ascending order: [3, 5, 10, 25, 100]
    Descending order: [100, 25, 10, 5, 3]
    Addition: 30
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

import psutil

from lambda_exercises import config
from lambda_exercises.dispatcher import BinaryIntOperation, OPERATIONS, apply, get_operation
from lambda_exercises.exceptions import ParseError
from lambda_exercises.parsing import parse_int
from lambda_exercises.sorter import Sorter, format_numbers, sort_ascending, sort_descending

logger = logging.getLogger(__name__)


def resident_mb() -> float:
    return psutil.Process().memory_info().rss / 2 ** 20


def format_memory(mb: float) -> str:
    # one decimal, switching to GB from 1024 MB
    return f"{mb / 1024:.1f} GB" if abs(mb) >= 1024 else f"{mb:.1f} MB"


def stats_lines(duration: float, start_mb: float, end_mb: float) -> List[str]:
    """Run summary printed by --stats."""
    return [
        f"Total execution time: {duration:.4f} seconds",
        f"Memory: {format_memory(end_mb)} ({format_memory(end_mb - start_mb)} change)",
    ]


def run_sorter(numbers: List[str]) -> List[str]:
    """Sort numbers ascending, print, then sort the same list descending and print.

    Returns:
        The printed lines

    Raises:
        ParseError: If an element is not an integer; lines printed before the
            failure stay printed
    """
    lines = []
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Input %s, ascending index order %s", format_numbers(numbers),
                     Sorter.ascending_sort(numbers).tolist())

    sort_ascending(numbers)
    lines.append(f"Ascending order: {format_numbers(numbers)}")
    print(lines[-1])

    sort_descending(numbers)
    lines.append(f"Descending order: {format_numbers(numbers)}")
    print(lines[-1])
    return lines


def run_dispatcher(op: BinaryIntOperation, x: int, y: int) -> str:
    line = f"Addition: {apply(op, x, y)}"
    print(line)
    return line


def _int_width(text):
    if text.lower() == 'none':
        return None
    try:
        width = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {text!r}") from None
    if width not in config.INT_WIDTHS:
        raise argparse.ArgumentTypeError(f"unsupported width: {width}")
    return width


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lambda_exercises',
        description='Sort numeric strings with lambda comparators and call addition through a function value')
    parser.add_argument('--numbers', nargs='+', default=list(config.SAMPLE_NUMBERS),
                        help='Integer strings to sort (default: %(default)s)')
    parser.add_argument('--operation', choices=sorted(OPERATIONS), default='method',
                        help="'method' uses the named addition function, 'lambda' an inline one (default: method)")
    # parsed in main() once --int-width is applied
    parser.add_argument('--operands', nargs=2, metavar=('X', 'Y'),
                        default=[str(v) for v in config.SAMPLE_OPERANDS],
                        help='Operands passed to the operation (default: 10 20)')
    parser.add_argument('--strategy', choices=config.SORT_STRATEGIES, default=config.get_sort_strategy(),
                        help='comparator: parse on every comparison, key: parse once per sort (default: %(default)s)')
    parser.add_argument('--int-width', type=_int_width, default=config.get_int_width(),
                        help="32 for signed 32-bit ints, 'none' for unbounded (default: %(default)s)")
    parser.add_argument('--stats', action='store_true',
                        help='Print elapsed time and memory usage after the run')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function; returns the process exit status"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    start_time = time.time()
    start_memory = resident_mb()

    saved = (config.get_sort_strategy(), config.get_int_width())
    config.set_sort_strategy(args.strategy)
    config.set_int_width(args.int_width)
    logger.debug("strategy=%s int_width=%s", args.strategy, args.int_width)

    try:
        try:
            x, y = (parse_int(v) for v in args.operands)
        except ParseError as e:
            logger.error("Invalid operand: %s", e)
            return 1

        try:
            run_sorter(list(args.numbers))
        except ParseError as e:
            logger.error("Cannot sort numbers: %s", e)
            return 1

        run_dispatcher(get_operation(args.operation), x, y)
    finally:
        config.set_sort_strategy(saved[0])
        config.set_int_width(saved[1])

    if args.stats:
        print()
        for line in stats_lines(time.time() - start_time, start_memory, resident_mb()):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
