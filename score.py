#!/usr/bin/env python3
"""
Bigram Perplexity Scoring Script

Load unigram and bigram probability tables and score sentences.

Usage:
    python score.py                            # interactive prompt
    python score.py --sentence "Hello, world!"
    python score.py --file sentences.txt --workers 8
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from bigram import InterpolationWeights, TableLoadError
from bigram.shell import load_model_cli, interactive_shell, score_file_cli


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score sentences with a bigram perplexity model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --unigrams unigrams.txt --bigrams bigrams.txt
  %(prog)s --sentence "The cat sat on the mat."
  %(prog)s --file sentences.txt --workers 8

Table format (one entry per line):
  unigrams:  word probability
  bigrams:   word1 word2 probability
        """
    )

    parser.add_argument(
        '-u', '--unigrams',
        type=str,
        default='unigrams.txt',
        help='Path to the unigram table (default: unigrams.txt)'
    )

    parser.add_argument(
        '-b', '--bigrams',
        type=str,
        default='bigrams.txt',
        help='Path to the bigram table (default: bigrams.txt)'
    )

    parser.add_argument(
        '--bigram-weight',
        type=float,
        default=0.8,
        help='Interpolation weight of the bigram estimate (default: 0.8)'
    )

    parser.add_argument(
        '--unigram-weight',
        type=float,
        default=0.2,
        help='Interpolation weight of the unigram estimate (default: 0.2)'
    )

    parser.add_argument(
        '--floor',
        type=float,
        default=1e-6,
        help='Additive probability floor (default: 1e-6)'
    )

    parser.add_argument(
        '-s', '--sentence',
        type=str,
        default=None,
        help='Score a single sentence and exit'
    )

    parser.add_argument(
        '-f', '--file',
        type=str,
        default=None,
        help='Score every line of a file and exit'
    )

    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=None,
        help='Threads used to score a file (default: automatic)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)]
    )

    try:
        weights = InterpolationWeights(
            bigram=args.bigram_weight,
            unigram=args.unigram_weight,
            floor=args.floor
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        model = load_model_cli(args.unigrams, args.bigrams, weights, console=console)
    except TableLoadError as e:
        console.print(f"[red]✗[/red] Failed to load model: {escape(str(e))}", highlight=False)
        return 1

    if args.sentence is not None:
        console.print(f"perplexity: {model.compute_sentence(args.sentence)}", highlight=False)
    elif args.file:
        try:
            score_file_cli(model, args.file, console=console, max_workers=args.workers)
        except OSError as e:
            console.print(f"[red]✗[/red] Cannot read {escape(args.file)}: {e.strerror}", highlight=False)
            return 1
        except UnicodeDecodeError as e:
            console.print(f"[red]✗[/red] Cannot read {escape(args.file)}: not valid UTF-8 ({e.reason})",
                          highlight=False)
            return 1
    else:
        interactive_shell(model, console=console)

    return 0


if __name__ == '__main__':
    sys.exit(main())
