"""
Bigram Perplexity Model

This module contains the BigramPerplexityModel class, which scores
sentences against pre-computed unigram and bigram probability tables.
"""

import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor, wait, FIRST_EXCEPTION
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .interpolation import InterpolationWeights, DEFAULT_WEIGHTS
from .tables import PathLike, load_table
from .tokenizer import tokenize


logger = logging.getLogger(__name__)

# Previous-word sentinel for the first token of every sentence
START_TOKEN = "#"


def perplexity_from_log_prob(log_prob_sum: float, num_words: int) -> float:
    """
    Turn a log2 probability sum over N tokens into 2^(-sum / N).

    Returns 0.0 when there are no tokens and inf when the result is too
    large for a float.
    """
    if num_words == 0:
        return 0.0
    try:
        return 2 ** (-log_prob_sum / num_words)
    except OverflowError:
        return math.inf


class BigramPerplexityModel:
    """
    Bigram Perplexity Model

    Holds a unigram and a bigram probability table and computes the
    perplexity of sentences with linear interpolation between the two.
    The tables are frozen at construction, so one model can be shared by
    any number of threads.

    Attributes:
        unigrams: Read-only mapping word -> probability
        bigrams: Read-only mapping "word1 word2" -> probability
        weights: Interpolation weights and floor
    """

    def __init__(self, unigrams: Optional[Mapping[str, float]] = None,
                 bigrams: Optional[Mapping[str, float]] = None,
                 weights: Optional[InterpolationWeights] = None):
        """
        Build a model from in-memory tables.

        Args:
            unigrams: Unigram table (default: empty)
            bigrams: Bigram table (default: empty)
            weights: Interpolation weights (default: 0.8 / 0.2 / 1e-6)
        """
        self.unigrams: Mapping[str, float] = MappingProxyType(dict(unigrams or {}))
        self.bigrams: Mapping[str, float] = MappingProxyType(dict(bigrams or {}))
        self.weights = weights or DEFAULT_WEIGHTS

    @classmethod
    def from_files(cls, unigrams_path: PathLike, bigrams_path: PathLike,
                   weights: Optional[InterpolationWeights] = None) -> 'BigramPerplexityModel':
        """
        Load a model from a unigram file and a bigram file.

        The two files are read concurrently. If either load fails, the
        error is raised and the other table is discarded.

        Args:
            unigrams_path: File with lines ``word probability``
            bigrams_path: File with lines ``word1 word2 probability``
            weights: Interpolation weights

        Returns:
            Fully loaded model

        Raises:
            TableIOError: If a file cannot be read
            NumericParseError: If a probability field is malformed
        """
        start_time = time.perf_counter()
        logger.info("Loading model from files: %s and %s", unigrams_path, bigrams_path)

        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="table-loader")
        try:
            unigram_task = executor.submit(load_table, unigrams_path)
            bigram_task = executor.submit(load_table, bigrams_path)
            wait([unigram_task, bigram_task], return_when=FIRST_EXCEPTION)

            for task in (unigram_task, bigram_task):
                if task.done() and task.exception() is not None:
                    raise task.exception()

            model = cls(unigram_task.result(), bigram_task.result(), weights)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        logger.info("Loaded model in %.2f seconds", time.perf_counter() - start_time)
        return model

    def tokenize(self, sentence: str) -> List[str]:
        """Split a sentence into lowercase tokens."""
        return tokenize(sentence)

    def token_log_prob(self, prev_word: str, word: str) -> float:
        """
        Interpolated log2 probability of ``word`` following ``prev_word``.

        Words missing from either table contribute probability 0.0.
        """
        bigram_prob = self.bigrams.get(f"{prev_word} {word}", 0.0)
        unigram_prob = self.unigrams.get(word, 0.0)
        return self.weights.log_prob(bigram_prob, unigram_prob)

    def sentence_log_prob(self, sentence: str) -> Tuple[float, int]:
        """
        Sum the log2 probabilities of every token of a sentence.

        Args:
            sentence: Raw sentence

        Returns:
            Tuple of (log2 probability sum, number of tokens)
        """
        words = self.tokenize(sentence)
        prev_word = START_TOKEN
        log_prob_sum = 0.0
        for word in words:
            log_prob_sum += self.token_log_prob(prev_word, word)
            prev_word = word
        return log_prob_sum, len(words)

    def compute_sentence(self, sentence: str) -> float:
        """
        Calculate the perplexity of a single sentence.

        Perplexity = 2^(-1/N * sum(log2(P(w_i|w_{i-1}))))

        Args:
            sentence: Raw sentence

        Returns:
            Perplexity score (lower is better), 0.0 for a sentence without
            tokens
        """
        return perplexity_from_log_prob(*self.sentence_log_prob(sentence))

    def sentence_log_probs(self, sentences: Iterable[str],
                           max_workers: Optional[int] = None) -> List[Tuple[float, int]]:
        """
        Compute ``sentence_log_prob`` for many sentences in parallel.

        Args:
            sentences: Raw sentences
            max_workers: Thread pool size (default: executor default)

        Returns:
            One (log2 probability sum, token count) pair per sentence, in
            input order
        """
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self.sentence_log_prob, sentences))

    def score_sentences(self, sentences: Iterable[str],
                        max_workers: Optional[int] = None) -> List[float]:
        """
        Score many sentences in parallel.

        Args:
            sentences: Raw sentences
            max_workers: Thread pool size (default: executor default)

        Returns:
            One perplexity per sentence, in input order
        """
        return [perplexity_from_log_prob(log_prob_sum, num_words)
                for log_prob_sum, num_words in self.sentence_log_probs(sentences, max_workers)]

    def perplexity(self, sentences: Iterable[str]) -> float:
        """
        Calculate corpus-level perplexity over a set of sentences.

        Every token of every sentence is weighted equally; sentences
        without tokens are ignored.

        Args:
            sentences: Raw sentences

        Returns:
            Perplexity score, 0.0 if there are no tokens at all
        """
        total_log_prob = 0.0
        total_words = 0

        for sentence in sentences:
            log_prob_sum, num_words = self.sentence_log_prob(sentence)
            total_log_prob += log_prob_sum
            total_words += num_words

        return perplexity_from_log_prob(total_log_prob, total_words)

    def stats(self) -> Dict:
        """Summary of the loaded tables for display."""
        return {
            'unigrams': len(self.unigrams),
            'bigrams': len(self.bigrams),
            'bigram_weight': self.weights.bigram,
            'unigram_weight': self.weights.unigram,
            'floor': self.weights.floor,
        }
