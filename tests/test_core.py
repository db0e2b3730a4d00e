"""Tests for the public package surface."""

import pytest
from punchstats import (
    PunchKind,
    Combo,
    Weight,
    TransitionGraph,
    ProbabilityVector,
)


def test_probability_vector_from_tuples():
    """Test probability vector creation from (label, probability) pairs."""
    pv = ProbabilityVector.try_new([
        ("north", 0.1),
        ("south", 0.4),
        ("east", 0.3),
        ("west", 0.2),
    ])
    assert pv is not None
    assert len(pv) == 4


def test_probability_vector_rejects_bad_sum():
    """Test that probabilities not summing to one yield no vector."""
    assert ProbabilityVector.try_new([("heads", 0.5), ("tails", 0.4)]) is None


def test_transition_graph_weighted_pairs():
    """Test repeated jab -> cross transitions accumulate weight."""
    graph = TransitionGraph.new()
    for _ in range(5):
        graph.insert(PunchKind.JAB, PunchKind.CROSS)

    assert graph.counts()[(PunchKind.JAB, PunchKind.CROSS)] == 5
    assert graph.weight(PunchKind.JAB, PunchKind.CROSS) == Weight(5)


def test_combo_holds_punches():
    """Test combo keeps punches in order."""
    combo = Combo.new([PunchKind.JAB, PunchKind.CROSS, PunchKind.LEAD_HOOK])
    assert list(combo) == [PunchKind.JAB, PunchKind.CROSS, PunchKind.LEAD_HOOK]


def test_weight_rejects_negative():
    """Test that negative weights raise error."""
    with pytest.raises(ValueError):
        Weight(-1)
