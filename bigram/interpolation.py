"""
Interpolated Smoothing

Combines bigram and unigram estimates linearly before taking the base-2
logarithm, with a small additive floor so unseen words still get a finite
score:

    log2(P_bigram * 0.8 + P_unigram * 0.2 + 1e-6)

Table values are used as they are stored; no transformation is applied.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class InterpolationWeights:
    """
    Weights of the bigram/unigram interpolation.

    Attributes:
        bigram: Weight of the bigram estimate
        unigram: Weight of the unigram estimate
        floor: Additive constant that keeps the logarithm defined
    """
    bigram: float = 0.8
    unigram: float = 0.2
    floor: float = 1e-6

    def __post_init__(self):
        if self.bigram < 0 or self.unigram < 0:
            raise ValueError("interpolation weights must be non-negative")
        if not self.floor > 0:
            raise ValueError("floor must be strictly positive")

    def combine(self, bigram_prob: float, unigram_prob: float) -> float:
        """Return the interpolated (linear) probability, floor included."""
        return bigram_prob * self.bigram + unigram_prob * self.unigram + self.floor

    def log_prob(self, bigram_prob: float, unigram_prob: float) -> float:
        """
        Base-2 log of the interpolated probability.

        Tables holding negative values can push the argument to zero or
        below; that yields -inf or nan rather than an exception.
        """
        p = self.combine(bigram_prob, unigram_prob)
        if p > 0:
            return math.log2(p)
        return -math.inf if p == 0 else math.nan


DEFAULT_WEIGHTS = InterpolationWeights()
