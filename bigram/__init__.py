"""
Bigram Perplexity Package

Scores how natural a sentence is against pre-computed unigram and bigram
probability tables, using interpolated smoothing and perplexity.
"""

from .model import BigramPerplexityModel
from .interpolation import InterpolationWeights
from .tables import load_table
from .tokenizer import tokenize
from .errors import TableLoadError, TableIOError, NumericParseError

__version__ = "0.1.0"
__all__ = [
    "BigramPerplexityModel", "InterpolationWeights", "load_table", "tokenize",
    "TableLoadError", "TableIOError", "NumericParseError",
]
