"""Labeled probability vectors."""

import logging
import numbers
from typing import Dict, Generic, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar
from dataclasses import dataclass
import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")

PROBABILITY_TOTAL = 1.0


def _as_probability(value: object) -> float:
    """
    Check that value is a real number and return it as a float.

    Raises:
        TypeError: If value is not a real number (strings included)
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real-valued probability, got {type(value).__name__}")
    return float(value)


def _total(probabilities: Iterable[float]) -> float:
    # Plain left-to-right accumulation; builtin sum() compensates on 3.12+
    total = 0.0
    for p in probabilities:
        total += p
    return total


@dataclass(frozen=True, eq=False)
class ProbabilityVector(Generic[T]):
    """
    Fixed-length distribution over labeled outcomes.

    Labels and probabilities are parallel: ``probabilities[i]`` belongs to
    ``states[i]``. The probabilities sum to exactly 1.0. That is checked once,
    by ``try_new``, using exact float equality, so inputs that only round to
    1.0 (ten draws of 0.1, say) are rejected.

    Attributes:
        states: Outcome labels in input order
        probabilities: Read-only float64 array, same order as states
    """

    states: Tuple[T, ...]
    probabilities: np.ndarray

    @classmethod
    def new_unchecked(cls, pairs: Sequence[Tuple[T, float]]) -> "ProbabilityVector[T]":
        """
        Build from (label, probability) pairs without validation.

        The caller guarantees the probabilities sum to 1.0; nothing here
        checks it.

        Args:
            pairs: (label, probability) pairs

        Returns:
            ProbabilityVector holding the pairs in order
        """
        states = tuple(label for label, _ in pairs)
        probabilities = np.array([p for _, p in pairs], dtype=np.float64)
        probabilities.setflags(write=False)
        return cls(states=states, probabilities=probabilities)

    @classmethod
    def try_new(cls, pairs: Sequence[Tuple[T, float]]) -> Optional["ProbabilityVector[T]"]:
        """
        Build from (label, probability) pairs if they form a distribution.

        Args:
            pairs: (label, probability) pairs

        Returns:
            ProbabilityVector, or None if the probabilities do not sum to
            exactly 1.0

        Raises:
            TypeError: If a probability is not a real number
        """
        pairs = list(pairs)
        total = _total(_as_probability(p) for _, p in pairs)

        if total != PROBABILITY_TOTAL:
            logger.debug(
                "Rejected probability vector of %d entries: sum is %r",
                len(pairs), total,
            )
            return None
        return cls.new_unchecked(pairs)

    def probability_of(self, label: T) -> float:
        """
        Probability attached to label (first match).

        Raises:
            KeyError: If label is not in the vector
        """
        for state, p in zip(self.states, self.probabilities):
            if state == label:
                return float(p)
        raise KeyError(label)

    def as_dict(self) -> Dict[T, float]:
        """Labels mapped to probabilities (labels must be hashable)."""
        return {state: float(p) for state, p in zip(self.states, self.probabilities)}

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self) -> Iterator[Tuple[T, float]]:
        for state, p in zip(self.states, self.probabilities):
            yield state, float(p)

    def __repr__(self) -> str:
        return f"ProbabilityVector(size={len(self)})"
