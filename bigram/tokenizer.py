"""
Sentence Tokenization

Lowercases a sentence, splits a fixed set of punctuation marks into
standalone tokens and breaks the rest on ASCII whitespace.
"""

import re
from typing import List


# Each of these characters always becomes a token of its own
PUNCTUATION_PATTERN = re.compile(r"""([,;:.!?¿¡()<>="'`])""")

# Unicode spaces such as NBSP are not separators
ASCII_WHITESPACE_PATTERN = re.compile(r"[ \t\n\r\f]+")


def tokenize(sentence: str) -> List[str]:
    """
    Tokenize a raw sentence.

    Args:
        sentence: Raw input text

    Returns:
        Lowercase tokens in left-to-right order, never empty strings

    Example:
        >>> tokenize("Hello, world!")
        ['hello', ',', 'world', '!']
    """
    spaced = PUNCTUATION_PATTERN.sub(r" \1 ", sentence.lower())
    return [token for token in ASCII_WHITESPACE_PATTERN.split(spaced) if token]
