"""Random word samples split into training and test parts."""

import logging
from typing import Optional, Tuple

import numpy as np

from ..automata.backend import AutomataBackend, DefaultBackend
from ..automata.words import UltimatelyPeriodicWord, validate_words

logger = logging.getLogger(__name__)

WordSample = Tuple[UltimatelyPeriodicWord, ...]


def split_sample(words, train_count: int) -> Tuple[WordSample, WordSample]:
    """
    Positional split: the first *train_count* words train, the rest test.

    Both parts come from one de-duplicated collection, so they are disjoint.
    """
    words = tuple(words)
    return words[:train_count], words[train_count:]


class WordSampleGenerator:
    """Generates train/test pairs of distinct random ultimately periodic words."""

    def __init__(self, backend: Optional[AutomataBackend] = None):
        self.backend = backend if backend is not None else DefaultBackend()

    def generate(self,
                 alphabet_size: int,
                 spoke_len: int,
                 cycle_len: int,
                 train_count: int,
                 test_count: int,
                 rng: Optional[np.random.Generator] = None) -> Tuple[WordSample, WordSample]:
        """
        Draw ``train_count + test_count`` words and split them.

        Spoke lengths range over ``[0, spoke_len]`` and cycle lengths over
        ``[1, cycle_len]``. When the length bounds admit fewer distinct words
        than requested, the sample silently shrinks and the test part absorbs
        the shortfall first.

        Parameters
        ----------
        alphabet_size : int
            Number of symbols
        spoke_len : int
            Maximal spoke length
        cycle_len : int
            Maximal cycle length
        train_count : int
            Requested number of training words
        test_count : int
            Requested number of test words
        rng : Optional[np.random.Generator]
            Source of randomness handed to the sampler

        Returns
        -------
        Tuple[WordSample, WordSample]
            (train, test), disjoint, in sampler delivery order

        Raises
        ------
        ValueError
            If the sampler returns a word with a symbol outside the alphabet
        """
        if rng is None:
            rng = np.random.default_rng()

        requested = train_count + test_count
        words = self.backend.sample_words(alphabet_size, spoke_len, cycle_len, requested, rng=rng)
        errors = validate_words(words, alphabet_size)
        if errors:
            raise ValueError(f"Sampler returned words outside the alphabet: {errors[0]}")
        if len(words) < requested:
            logger.warning("Requested %d words but only %d are distinct "
                           "(alphabet_size=%d, spoke_len=%d, cycle_len=%d)",
                           requested, len(words), alphabet_size, spoke_len, cycle_len)

        train, test = split_sample(words, train_count)
        logger.debug("Word sample: %d train, %d test", len(train), len(test))
        return train, test
