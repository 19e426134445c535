"""
Probability Table Loading

Reads the line-oriented unigram and bigram files into dictionaries.

Both files share one format, ``<key> <probability>``, where the key of a
bigram file is itself two space-joined words::

    the 0.0514
    of the 0.0087
"""

import logging
import re
from pathlib import Path
from typing import Dict, Tuple, Union

from .errors import NumericParseError, TableIOError


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Decimal or exponent notation, inf, infinity or nan; no underscores or padding
FLOAT_LITERAL_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_line(line: str) -> Tuple[str, float]:
    """
    Split one table line into its key and probability.

    The line is split from the right on the first space so that multi-word
    keys stay intact. A line without any space is read as a bare number
    with the empty string as its key.

    Args:
        line: A single line without its trailing newline

    Returns:
        Tuple of (key, probability)

    Raises:
        ValueError: If the trailing field is not a valid float
    """
    key, _, value = line.rpartition(' ')
    if not FLOAT_LITERAL_PATTERN.fullmatch(value):
        raise ValueError(f"not a float literal: {value!r}")
    return key, float(value)


def load_table(path: PathLike) -> Dict[str, float]:
    """
    Load a probability table from a UTF-8 text file.

    Args:
        path: Path to the unigram or bigram file

    Returns:
        Dictionary mapping each key to its probability. Later duplicates
        overwrite earlier ones.

    Raises:
        TableIOError: If the file cannot be opened, read or decoded
        NumericParseError: If a line's trailing field is not a float
    """
    path = Path(path)
    table: Dict[str, float] = {}
    line_number = 0

    try:
        with open(path, 'r', encoding='utf-8', newline='\n') as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip('\n')
                if line.endswith('\r'):
                    line = line[:-1]
                try:
                    key, prob = parse_line(line)
                except ValueError:
                    raise NumericParseError(
                        path, line_number, line.rpartition(' ')[2]
                    ) from None
                table[key] = prob
    except UnicodeDecodeError as e:
        raise TableIOError(path, f"not valid UTF-8 ({e.reason})", line_number + 1) from e
    except OSError as e:
        raise TableIOError(path, e.strerror or str(e)) from e

    logger.debug("Loaded %d entries from %s", len(table), path)
    return table
