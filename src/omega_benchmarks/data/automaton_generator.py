"""Rejection sampling of automata with exact size and informative right congruence.

Each attempt samples an oversized random automaton, streamlines it, and keeps
it only if the streamlined size equals the target and its right congruence is
informative. Büchi candidates are checked through their two-priority parity
view (accepting edges become priority 0, the others priority 1); parity
candidates are checked directly. The returned automaton is always the
streamlined candidate itself.
"""

import logging
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Optional

import numpy as np

from ..automata.automaton import AcceptanceVariant, BUCHI_TO_PARITY
from ..automata.backend import AutomataBackend, DefaultBackend
from .planner import derive_generation_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutomatonSpec:
    """Parameters of one automaton generation request.

    Attributes
    ----------
    alphabet_size : int
        Number of symbols
    target_size : int
        Exact number of states of the result
    variant : AcceptanceVariant
        Büchi or parity acceptance
    lambda_ : float
        Continuous Bernoulli parameter for edge colours, in (0, 1)
    priority_count : Optional[int]
        Number of priorities; required for parity, forbidden for Büchi
    generation_size : int
        States of the raw candidates, derived from target_size
    """
    alphabet_size: int
    target_size: int
    variant: AcceptanceVariant
    lambda_: float
    priority_count: Optional[int] = None
    generation_size: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'variant', AcceptanceVariant(self.variant))
        if self.alphabet_size < 1:
            raise ValueError(f"Alphabet size must be positive, got {self.alphabet_size}")
        if not 0.0 < self.lambda_ < 1.0:
            raise ValueError(f"Lambda must lie in (0, 1), got {self.lambda_}")
        if self.variant is AcceptanceVariant.PARITY:
            if self.priority_count is None or self.priority_count < 1:
                raise ValueError("Parity automata need a positive priority_count")
        elif self.priority_count is not None:
            raise ValueError("Büchi automata take no priority_count")
        object.__setattr__(self, 'generation_size', derive_generation_size(self.target_size))


class InfeasibleParameters(RuntimeError):
    """Raised when no acceptable automaton was found within the attempt ceiling."""

    def __init__(self, spec: AutomatonSpec, attempts: int):
        self.spec = spec
        self.attempts = attempts
        super().__init__(
            f"No informative {spec.variant.value} with {spec.target_size} states found "
            f"after {attempts} attempts (alphabet_size={spec.alphabet_size}, "
            f"lambda={spec.lambda_})"
        )


class AutomatonGenerator:
    """Rejection sampler for automata of exact size with informative right congruence."""

    def __init__(self,
                 backend: Optional[AutomataBackend] = None,
                 max_attempts: Optional[int] = 100_000):
        """
        Initialize the generator.

        Parameters
        ----------
        backend : Optional[AutomataBackend]
            Automaton engine, defaults to :class:`DefaultBackend`
        max_attempts : Optional[int]
            Attempt ceiling; None samples until success
        """
        self.backend = backend if backend is not None else DefaultBackend()
        self.max_attempts = max_attempts

    def _is_informative(self, spec: AutomatonSpec, candidate: Any) -> bool:
        if spec.variant is AcceptanceVariant.BUCHI:
            view = self.backend.recolor_as_priorities(candidate, BUCHI_TO_PARITY)
        else:
            view = candidate
        return self.backend.is_informative(view)

    def generate(self, spec: AutomatonSpec, rng: Optional[np.random.Generator] = None) -> Any:
        """
        Sample until a streamlined candidate meets both constraints.

        Parameters
        ----------
        spec : AutomatonSpec
            Generation request
        rng : Optional[np.random.Generator]
            Source of randomness handed to the sampler

        Returns
        -------
        Any
            Streamlined automaton with ``size() == spec.target_size`` and an
            informative right congruence

        Raises
        ------
        InfeasibleParameters
            If max_attempts candidates were rejected
        """
        if rng is None:
            rng = np.random.default_rng()

        wrong_size = 0
        not_informative = 0
        for attempt in count(1):
            if self.max_attempts is not None and attempt > self.max_attempts:
                logger.error("Giving up on %s after %d attempts (%d wrong size, %d not informative)",
                             spec, self.max_attempts, wrong_size, not_informative)
                raise InfeasibleParameters(spec, self.max_attempts)

            raw = self.backend.sample_automaton(
                spec.alphabet_size, spec.generation_size, spec.lambda_, spec.variant,
                spec.priority_count, rng=rng
            )
            candidate = self.backend.streamline(raw)

            if candidate.size() != spec.target_size:
                wrong_size += 1
                continue

            if not self._is_informative(spec, candidate):
                not_informative += 1
                continue

            logger.info("Accepted %s with %d states after %d attempts "
                        "(%d wrong size, %d not informative)",
                        spec.variant.value, spec.target_size, attempt, wrong_size, not_informative)
            return candidate

    def __repr__(self) -> str:
        return f"AutomatonGenerator(backend={self.backend!r}, max_attempts={self.max_attempts})"
