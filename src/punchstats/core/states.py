"""Punch state space definitions."""

import operator
from enum import IntEnum
from typing import Iterable, Iterator, Tuple, Union, overload
from dataclasses import dataclass, field


class PunchKind(IntEnum):
    """
    Closed set of punch types.

    Each punch carries a one-byte code (1-6) used when a punch has to be
    handed to an external system.

    States:
        JAB (1): Lead straight
        CROSS (2): Rear straight
        LEAD_HOOK (3)
        REAR_HOOK (4)
        LEAD_UPPERCUT (5)
        REAR_UPPERCUT (6)
    """
    JAB = 1
    CROSS = 2
    LEAD_HOOK = 3
    REAR_HOOK = 4
    LEAD_UPPERCUT = 5
    REAR_UPPERCUT = 6

    @property
    def code(self) -> int:
        """Integer code of this punch."""
        return int(self.value)

    def as_int(self) -> int:
        return self.code

    @classmethod
    def n_states(cls) -> int:
        """Number of punch types."""
        return len(cls)


# Declaration order, used wherever pairs or matrices are enumerated
PUNCHES: Tuple[PunchKind, ...] = tuple(PunchKind)


def to_punch(value: Union[PunchKind, int]) -> PunchKind:
    """
    Convert a punch or its integer code to a PunchKind.

    Args:
        value: PunchKind member or integer code 1-6

    Returns:
        PunchKind member

    Raises:
        ValueError: If value is not a known punch code
    """
    if isinstance(value, PunchKind):
        return value
    if isinstance(value, bool):
        raise ValueError(f"{value!r} is not a valid PunchKind")
    try:
        return PunchKind(operator.index(value))
    except (ValueError, TypeError):
        raise ValueError(f"{value!r} is not a valid PunchKind")


@dataclass(frozen=True)
class Combo:
    """
    Ordered sequence of punches.

    Plain data holder; it does not feed any transition graph.

    Attributes:
        punches: Punches in the order they were thrown
    """

    punches: Tuple[PunchKind, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Copy the input into an immutable tuple of PunchKind."""
        object.__setattr__(self, "punches", tuple(to_punch(p) for p in self.punches))

    @classmethod
    def new(cls, punches: Iterable[Union[PunchKind, int]]) -> "Combo":
        """
        Create combo from any sequence of punches.

        Args:
            punches: Punches or punch codes

        Returns:
            Combo owning its own copy of the punches
        """
        return cls(punches=tuple(punches))

    def __len__(self) -> int:
        return len(self.punches)

    def __iter__(self) -> Iterator[PunchKind]:
        return iter(self.punches)

    @overload
    def __getitem__(self, idx: int) -> PunchKind: ...

    @overload
    def __getitem__(self, idx: slice) -> Tuple[PunchKind, ...]: ...

    def __getitem__(self, idx):
        return self.punches[idx]

    def __repr__(self) -> str:
        names = ", ".join(p.name for p in self.punches)
        return f"Combo([{names}])"
