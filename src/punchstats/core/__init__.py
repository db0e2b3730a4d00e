"""Core abstractions for punch states, transition counts, and distributions."""

from punchstats.core.states import PunchKind, PUNCHES, Combo, to_punch
from punchstats.core.weights import Weight
from punchstats.core.transitions import TransitionGraph
from punchstats.core.probability import ProbabilityVector, PROBABILITY_TOTAL

__all__ = [
    "PunchKind",
    "PUNCHES",
    "Combo",
    "to_punch",
    "Weight",
    "TransitionGraph",
    "ProbabilityVector",
    "PROBABILITY_TOTAL",
]
