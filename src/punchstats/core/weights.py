"""Edge weight counters."""

import operator
from typing import Union
from dataclasses import dataclass


def _as_count(value: Union["Weight", int]) -> int:
    """
    Extract a non-negative integer from a Weight or raw integer.

    Raises:
        TypeError: If value is not integer-like
        ValueError: If value is negative
    """
    if isinstance(value, Weight):
        return value.value
    if isinstance(value, bool):
        raise TypeError("Weight does not accept bool values")
    try:
        count = operator.index(value)
    except TypeError:
        raise TypeError(f"Expected Weight or int, got {type(value).__name__}")
    if count < 0:
        raise ValueError(f"Weight must be non-negative, got {count}")
    return count


@dataclass(order=True)
class Weight:
    """
    Non-negative occurrence counter attached to a graph edge.

    Weights compare and order by their count. ``add`` (and ``+``) returns a
    new Weight; ``increment_by`` (and ``+=``) updates in place.

    Attributes:
        value: Current count. Checked whenever a Weight is constructed,
            which includes the result of ``add``; assigning it directly
            bypasses the non-negative check.
    """

    value: int = 0

    def __post_init__(self):
        """Validate and normalise the count."""
        self.value = _as_count(self.value)

    @classmethod
    def new(cls, value: int = 0) -> "Weight":
        return cls(value)

    @classmethod
    def from_int(cls, value: int) -> "Weight":
        """Create weight from a raw integer count."""
        return cls(value)

    def as_int(self) -> int:
        return self.value

    def add(self, other: Union["Weight", int]) -> "Weight":
        """
        Sum of this weight and another weight or raw count.

        Args:
            other: Weight or non-negative integer

        Returns:
            New Weight; self is unchanged
        """
        return Weight(self.value + _as_count(other))

    def increment_by(self, amount: Union["Weight", int] = 1) -> None:
        """
        Increase this weight in place.

        Args:
            amount: Weight or non-negative integer (default 1)
        """
        self.value += _as_count(amount)

    def copy(self) -> "Weight":
        return Weight(self.value)

    def __add__(self, other: Union["Weight", int]) -> "Weight":
        try:
            return self.add(other)
        except TypeError:
            return NotImplemented

    def __radd__(self, other: int) -> "Weight":
        return self.__add__(other)

    def __iadd__(self, other: Union["Weight", int]) -> "Weight":
        self.increment_by(other)
        return self

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"Weight({self.value})"
