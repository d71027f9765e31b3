"""Default configuration parameters for the benchmark generation scenarios."""

from dataclasses import dataclass
from typing import List, Tuple, Optional

@dataclass
class DefaultConfig:
    """Base configuration structure for a benchmark generation run."""

    # Alphabet and automaton scale
    alphabet_size: int
    automaton_sizes: Tuple[int, ...]
    automata_per_size: int

    # Word sample scale
    train_sizes: Tuple[int, ...]
    test_size: int
    sets_per_size: int

    # Random automaton parameters
    acceptance_lambda: float
    variants: Tuple[str, ...]
    priority_count: Optional[int]

    # Rejection sampling
    max_attempts: Optional[int]


# Reference run: 2 symbols, size-4 automata, 100 train / 1000 test words
REFERENCE_CONFIG = DefaultConfig(
    alphabet_size=2,
    automaton_sizes=(4,),
    automata_per_size=2,

    train_sizes=(100,),
    test_size=1000,
    sets_per_size=2,

    acceptance_lambda=0.95,
    variants=("dba",),
    priority_count=None,

    max_attempts=100_000
)

# Parity variant of the reference run
PARITY_CONFIG = DefaultConfig(
    alphabet_size=2,
    automaton_sizes=(4,),
    automata_per_size=2,

    train_sizes=(100,),
    test_size=1000,
    sets_per_size=2,

    acceptance_lambda=0.95,
    variants=("dba", "dpa"),
    priority_count=3,

    max_attempts=100_000
)

# Research scenario configurations
RESEARCH_CONFIGS = {
    "reference": REFERENCE_CONFIG,
    "parity": PARITY_CONFIG,
    "minimal": DefaultConfig(
        alphabet_size=2,
        automaton_sizes=(2, 3),
        automata_per_size=1,
        train_sizes=(5,),
        test_size=10,
        sets_per_size=1,
        acceptance_lambda=0.5,
        variants=("dba",),
        priority_count=None,
        max_attempts=10_000
    )
}

# Acceptance condition variants
VARIANTS = [
    "dba",  # Büchi: accepting edges seen infinitely often
    "dpa"   # Parity: least priority seen infinitely often is even
]

# Symbols are single characters 'a', 'b', ... so records stay one string per field
MIN_ALPHABET_SIZE = 1
MAX_ALPHABET_SIZE = 26

# Smallest automaton size with defined word length bounds
MIN_AUTOMATON_SIZE = 2
RECOMMENDED_MAX_AUTOMATON_SIZE = 30

def _mobius(n: int) -> int:
    result = 1
    factor = 2
    while factor * factor <= n:
        if n % factor == 0:
            n //= factor
            if n % factor == 0:
                return 0
            result = -result
        factor += 1
    return -result if n > 1 else result

def count_primitive_words(alphabet_size: int, length: int) -> int:
    """Number of words of *length* that are not a power of a shorter word."""
    return sum(_mobius(d) * alphabet_size ** (length // d)
               for d in range(1, length + 1) if length % d == 0)

def count_word_space(alphabet_size: int, max_spoke_len: int, max_cycle_len: int) -> int:
    """
    Number of distinct infinite words a sampler with these length bounds can produce.

    Sampled words are reduced: the cycle is primitive and the spoke is empty
    or ends in a symbol other than the cycle's last one. For a fixed cycle
    there are ``k ** j - k ** (j - 1)`` such spokes of length ``j >= 1``, so
    spokes up to *max_spoke_len* contribute ``k ** max_spoke_len`` in total.

    Examples
    --------
    >>> count_word_space(2, 1, 2)
    8
    """
    cycles = sum(count_primitive_words(alphabet_size, length)
                 for length in range(1, max_cycle_len + 1))
    return alphabet_size ** max_spoke_len * cycles

def validate_config(config: DefaultConfig) -> List[str]:
    """Validate configuration parameters and return list of warnings."""
    # Imported here to keep the config package free of import cycles
    from ..data.planner import derive_word_lengths

    warnings = []

    if config.alphabet_size > 4:
        warnings.append(f"Alphabet size {config.alphabet_size} makes informative automata rare")

    for size in config.automaton_sizes:
        if size > RECOMMENDED_MAX_AUTOMATON_SIZE:
            warnings.append(f"Automaton size {size} may need very many rejection attempts")

    if config.max_attempts is None:
        warnings.append("No attempt ceiling set, infeasible parameters will loop forever")

    if config.acceptance_lambda < 0.05 or config.acceptance_lambda > 0.95:
        warnings.append(
            f"Lambda {config.acceptance_lambda} strongly biases colours, expect many rejections"
        )

    for size in config.automaton_sizes:
        if size < MIN_AUTOMATON_SIZE:
            continue
        spoke_len, cycle_len = derive_word_lengths(size)
        # Exact count only matters for tiny spaces, avoid huge integers otherwise
        if config.alphabet_size ** min(cycle_len, 64) > 10 ** 9:
            continue
        space = count_word_space(config.alphabet_size, spoke_len, cycle_len)
        for train_size in config.train_sizes:
            requested = train_size + config.test_size
            if requested > space:
                warnings.append(
                    f"Size {size}: requesting {requested} words but only {space} distinct words exist, "
                    f"samples will be smaller"
                )

    return warnings
