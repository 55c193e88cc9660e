"""
Command line interface for word ranking.

Examples:
  wordrank -t the cat sat on the mat       # Rank words given inline
  wordrank -p 2 -m 3 -t a -b c             # Everything after -t is text
  wordrank -f book.txt -p 4                # Use 4 workers on a file
  wordrank -f book.txt -p 4 -m 10 -s       # Top 10 words and phase timings
  wordrank -f book.txt -v                  # Log intermediate results
  wordrank -f book.txt --backend thread    # Threads instead of processes
"""

import argparse
import logging
import sys
from typing import Optional

from .configs import BACKENDS, RunConfig
from .errors import EmptyInputError, WordRankError
from .pipeline import run_pipeline
from .report import format_duration, format_ranking, pluralize

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordrank",
        description="Show the most frequent words of a text. "
        "Letter case is ignored; anything outside [A-Za-z0-9] separates words.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("\n\n", 1)[1],
    )

    parser.add_argument(
        "-f",
        "--file",
        type=str,
        default=None,
        help="Path of the text file to process",
    )

    parser.add_argument(
        "-t",
        "--text",
        nargs=argparse.REMAINDER,
        default=None,
        help="Text to process when no file is given; takes every remaining "
        "argument, so put it last (words are joined by spaces)",
    )

    parser.add_argument(
        "-p",
        "--processes",
        type=int,
        default=1,
        help="Number of workers used for counting and sorting (default: 1)",
    )

    parser.add_argument(
        "-m",
        "--ranking-count",
        type=int,
        default=5,
        help="Number of ranked words to show (default: 5)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log intermediate results of every phase",
    )

    parser.add_argument(
        "-s",
        "--show-times",
        action="store_true",
        help="Show how long counting and sorting took",
    )

    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default="process",
        help="Worker pool implementation (default: process)",
    )

    return parser


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments; exits through argparse on bad input."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.file is not None and args.text is not None:
        parser.error("use either -f/--file or -t/--text, not both")
    if args.file is None and args.text is None:
        parser.error("no text provided, use -f to give a file path or -t to give a text")
    return args


def load_text(path: str) -> str:
    """Read a whole text file into memory."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        text = f.read()
    if not text:
        raise EmptyInputError(f"No text in the file '{path}'")
    return text


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    config = RunConfig(
        num_workers=args.processes,
        top_k=args.ranking_count,
        backend=args.backend,
        verbose=args.verbose,
        show_times=args.show_times,
    )

    try:
        config.validate()
        text = load_text(args.file) if args.file is not None else " ".join(args.text)
        source = f" file '{args.file}'." if args.file is not None else "."
        print(f"\nProcessing text{source}")
        print(f"Using {config.num_workers} thread{pluralize(config.num_workers)}\n")
        result = run_pipeline(text, config)
    except (WordRankError, OSError) as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if config.show_times:
        print(f"Counting words took: {format_duration(result.counting_seconds)}\n")

    print("The most used words:")
    for line in format_ranking(result.ranked, result.frequencies, config.top_k):
        print(line)

    if config.show_times or config.verbose:
        print(f"\nSorting words took: {format_duration(result.ranking_seconds)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
