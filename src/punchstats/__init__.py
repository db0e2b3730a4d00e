"""
punchstats: transition counts and probability vectors for punch combos.

Tracks how often one punch type follows another, and holds labeled
probability distributions that sum to exactly one.
"""

__version__ = "0.1.0"

from punchstats.core.states import PunchKind, PUNCHES, Combo
from punchstats.core.weights import Weight
from punchstats.core.transitions import TransitionGraph
from punchstats.core.probability import ProbabilityVector

__all__ = [
    "PunchKind",
    "PUNCHES",
    "Combo",
    "Weight",
    "TransitionGraph",
    "ProbabilityVector",
    "__version__",
]
