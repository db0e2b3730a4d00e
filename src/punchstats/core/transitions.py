"""Transition frequency graph over punch types."""

import logging
from typing import Dict, Iterator, Optional, Tuple, Union, Any
import numpy as np

from punchstats.core.states import PunchKind, PUNCHES, to_punch
from punchstats.core.weights import Weight

logger = logging.getLogger(__name__)

Edge = Tuple[PunchKind, PunchKind]


class TransitionGraph:
    """
    Complete directed graph of observed punch-to-punch transitions.

    Every ordered pair of punches (self-transitions included) is present from
    construction onwards, so an edge lookup for valid punches never misses.
    Edges are never added or removed; ``insert`` only bumps their weights.

    Attributes:
        states: Punches in declaration order
    """

    def __init__(self):
        """Create the complete graph with every edge at weight 0."""
        self._edges: Dict[Edge, Weight] = {
            (first, next_): Weight(0)
            for first in PUNCHES
            for next_ in PUNCHES
        }
        logger.debug(
            "Created transition graph with %d states and %d edges",
            len(self.states), len(self._edges),
        )

    @property
    def states(self) -> Tuple[PunchKind, ...]:
        """Punches in declaration order (read-only)."""
        return PUNCHES

    @classmethod
    def new(cls) -> "TransitionGraph":
        return cls()

    def _lookup(self, first: PunchKind, next_: PunchKind) -> Weight:
        try:
            return self._edges[(first, next_)]
        except KeyError:
            raise RuntimeError(
                f"Edge ({first.name}, {next_.name}) missing from complete graph"
            ) from None

    def insert(
        self,
        first: Union[PunchKind, int],
        next_: Union[PunchKind, int],
    ) -> Optional[Weight]:
        """
        Record one observed transition first -> next.

        Args:
            first: Punch the transition starts from
            next_: Punch that followed it

        Returns:
            None if this transition had never been seen, otherwise the
            weight it had before this call

        Raises:
            ValueError: If either argument is not a punch
        """
        first, next_ = to_punch(first), to_punch(next_)
        weight = self._lookup(first, next_)
        prior = weight.copy()

        weight.increment_by(1)

        if prior.value == 0:
            logger.debug("First observation of %s -> %s", first.name, next_.name)
            return None
        return prior

    def weight(
        self,
        first: Union[PunchKind, int],
        next_: Union[PunchKind, int],
    ) -> Weight:
        """Current weight of first -> next (a copy)."""
        return self._lookup(to_punch(first), to_punch(next_)).copy()

    def iter_edges(self) -> Iterator[Tuple[Edge, Weight]]:
        """
        Iterate over all edges in declaration order.

        Yields:
            ((first, next), weight) tuples; weights are copies
        """
        for first in self.states:
            for next_ in self.states:
                yield (first, next_), self._lookup(first, next_).copy()

    def counts(self) -> Dict[Edge, int]:
        """All edge weights as plain integers."""
        return {edge: weight.value for edge, weight in self.iter_edges()}

    def total(self) -> int:
        """Total number of recorded transitions."""
        return sum(weight.value for weight in self._edges.values())

    def to_matrix(self) -> np.ndarray:
        """
        Convert to a count matrix.

        Returns:
            (n_states, n_states) integer array; row is the source punch and
            column the target, both in declaration order
        """
        n_states = len(self.states)
        matrix = np.zeros((n_states, n_states), dtype=np.int64)
        for i, first in enumerate(self.states):
            for j, next_ in enumerate(self.states):
                matrix[i, j] = self._lookup(first, next_).value
        return matrix

    def to_networkx(self) -> Any:
        """
        Convert to NetworkX DiGraph (optional, requires networkx).

        Only observed transitions become edges, each with a ``weight``
        attribute holding its count.

        Returns:
            NetworkX DiGraph

        Raises:
            ImportError: If networkx not installed
        """
        try:
            import networkx as nx
        except ImportError:
            raise ImportError(
                "NetworkX required for to_networkx(). Install with: pip install networkx"
            )

        graph = nx.DiGraph()
        graph.add_nodes_from(self.states)
        for (first, next_), weight in self.iter_edges():
            if weight.value > 0:
                graph.add_edge(first, next_, weight=weight.value)
        return graph

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, edge: object) -> bool:
        try:
            return edge in self._edges
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"TransitionGraph(states={len(self.states)}, transitions={self.total()})"
