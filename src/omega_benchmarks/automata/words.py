"""Ultimately periodic words and their alphabets.

An ultimately periodic word ``u v^ω`` is stored as a finite *spoke* ``u``
followed by a non-empty *cycle* ``v`` that repeats forever. Symbols are single
characters ``'a'``, ``'b'``, ... so that a spoke or cycle can be written as a
plain string.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple
import string

Symbol = str


def symbols_of_size(alphabet_size: int) -> List[Symbol]:
    """
    Return the first *alphabet_size* lowercase letters.

    Parameters
    ----------
    alphabet_size : int
        Number of symbols, between 1 and 26

    Returns
    -------
    List[str]
        Symbols in alphabetical order

    Examples
    --------
    >>> symbols_of_size(3)
    ['a', 'b', 'c']
    """
    if not 1 <= alphabet_size <= len(string.ascii_lowercase):
        raise ValueError(f"Alphabet size must be in [1, 26], got {alphabet_size}")
    return list(string.ascii_lowercase[:alphabet_size])


def symbol_index(symbol: Symbol) -> int:
    """Position of *symbol* in the alphabet ('a' -> 0)."""
    return ord(symbol) - ord('a')


def _primitive_root(cycle: Tuple[Symbol, ...]) -> Tuple[Symbol, ...]:
    """Shortest block whose repetition yields *cycle*."""
    n = len(cycle)
    for period in range(1, n + 1):
        if n % period == 0 and cycle[:period] * (n // period) == cycle:
            return cycle[:period]
    return cycle


@dataclass(frozen=True)
class UltimatelyPeriodicWord:
    """Infinite word ``spoke cycle cycle cycle ...``.

    Attributes
    ----------
    spoke : Tuple[str, ...]
        Finite prefix, possibly empty
    cycle : Tuple[str, ...]
        Non-empty block repeated forever
    """
    spoke: Tuple[Symbol, ...]
    cycle: Tuple[Symbol, ...]

    def __post_init__(self):
        object.__setattr__(self, 'spoke', tuple(self.spoke))
        object.__setattr__(self, 'cycle', tuple(self.cycle))
        if not self.cycle:
            raise ValueError("Cycle of an ultimately periodic word must be non-empty")

    @classmethod
    def from_strings(cls, spoke: str, cycle: str) -> 'UltimatelyPeriodicWord':
        """Build a word from its string rendering, one character per symbol."""
        return cls(tuple(spoke), tuple(cycle))

    @property
    def spoke_string(self) -> str:
        return ''.join(self.spoke)

    @property
    def cycle_string(self) -> str:
        return ''.join(self.cycle)

    def reduced(self) -> 'UltimatelyPeriodicWord':
        """
        Canonical representation of the same infinite word.

        The cycle is replaced by its primitive root and the spoke is rolled
        into the cycle as far as possible, so two representations denote the
        same infinite word exactly when their reduced forms are equal.

        Examples
        --------
        >>> UltimatelyPeriodicWord(('a', 'b'), ('a', 'b')).reduced()
        UltimatelyPeriodicWord(spoke=(), cycle=('a', 'b'))
        """
        spoke = list(self.spoke)
        cycle = list(_primitive_root(self.cycle))
        while spoke and spoke[-1] == cycle[-1]:
            spoke.pop()
            cycle = [cycle[-1]] + cycle[:-1]
        return UltimatelyPeriodicWord(tuple(spoke), tuple(cycle))

    def symbols(self) -> Iterable[Symbol]:
        """Distinct symbols occurring in the word."""
        return set(self.spoke) | set(self.cycle)

    def __str__(self) -> str:
        return f"{self.spoke_string}({self.cycle_string})^ω"


def validate_words(words: Sequence[UltimatelyPeriodicWord],
                   alphabet_size: int) -> List[str]:
    """
    Check that every word only uses symbols of the declared alphabet.

    Returns
    -------
    List[str]
        One error message per offending word, empty if all words are valid
    """
    alphabet = set(symbols_of_size(alphabet_size))
    errors = []
    for i, word in enumerate(words):
        unknown = set(word.symbols()) - alphabet
        if unknown:
            errors.append(f"Word {i}: Unknown symbols {sorted(unknown)}")
    return errors
