"""
K-factor policies: a constant K-factor or a table keyed by rating thresholds.
"""

import math
from numbers import Real
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

import numpy as np

from ..config import DEFAULT_K_FACTOR, DEFAULT_TABLE_KEY


class ConstantKFactor:
    """
    A K-factor that is the same for every rating.
    """

    method = "simple"

    def __init__(self, value: float = DEFAULT_K_FACTOR):
        self.value = value

    def lookup(self, rating: Optional[float] = None) -> float:
        """
        Return the K-factor. The rating is ignored.

        Args:
            rating: Rating of the player (unused)

        Returns:
            The constant K-factor
        """
        return self.value

    def __repr__(self) -> str:
        return f"ConstantKFactor({self.value!r})"


class KFactorTable:
    """
    A K-factor table keyed by rating thresholds.

    A rating uses the value of the greatest threshold that is less than or
    equal to it. Ratings below every threshold use the default value, and
    if there is no default the lookup returns None.
    """

    method = "table"

    def __init__(self, entries: Iterable[Tuple[float, float]], default: Optional[float] = None):
        """
        Initialize a KFactorTable.

        Args:
            entries: (threshold, k_factor) pairs, in any order
            default: K-factor for ratings below the lowest threshold

        Raises:
            ValueError: If the same threshold appears more than once
        """
        pairs = sorted((float(threshold), value) for threshold, value in entries)
        thresholds = [threshold for threshold, _ in pairs]
        if len(set(thresholds)) != len(thresholds):
            raise ValueError("K-factor table thresholds must be unique")

        self._thresholds = np.array(thresholds, dtype=float)
        self._values = tuple(value for _, value in pairs)
        self.default = default

    @classmethod
    def from_mapping(cls, table: Mapping[Any, float]) -> "KFactorTable":
        """
        Build a table from a mapping of threshold to K-factor.

        Keys may be numbers, numeric strings, or "default".

        Args:
            table: Mapping such as {"default": 48, 0: 32, 2100: 24}

        Returns:
            A KFactorTable

        Raises:
            ValueError: If a key is neither numeric nor "default"
        """
        entries = []
        default = None
        for key, value in table.items():
            if key == DEFAULT_TABLE_KEY:
                default = value
            else:
                entries.append((_parse_threshold(key), value))
        return cls(entries, default=default)

    @property
    def entries(self) -> Tuple[Tuple[float, float], ...]:
        """(threshold, k_factor) pairs in ascending threshold order."""
        return tuple(zip(self._thresholds.tolist(), self._values))

    def lookup(self, rating: Optional[float] = None) -> Optional[float]:
        """
        Look up the K-factor for a rating.

        Args:
            rating: Rating of the player; None is treated as 0

        Returns:
            The K-factor, or None if no threshold matches and there is no default
        """
        if rating is None:
            rating = 0

        index = -1
        if not math.isnan(rating):
            index = int(np.searchsorted(self._thresholds, rating, side="right")) - 1

        if index < 0:
            return self.default
        return self._values[index]

    def __repr__(self) -> str:
        return f"KFactorTable({list(self.entries)!r}, default={self.default!r})"


KFactorPolicy = Union[ConstantKFactor, KFactorTable]


def _parse_threshold(key: Any) -> float:
    if isinstance(key, Real) and not isinstance(key, bool):
        return float(key)
    if isinstance(key, str):
        try:
            return float(key)
        except ValueError:
            pass
    raise ValueError(f"Invalid K-factor table key: {key!r}")


def make_k_factor_policy(policy: Any = None) -> KFactorPolicy:
    """
    Turn a user-supplied K-factor setting into a policy object.

    Args:
        policy: A number, a threshold mapping, a policy object, or a falsy
            value for the default constant K-factor

    Returns:
        A ConstantKFactor or KFactorTable

    Raises:
        TypeError: If the policy is of an unsupported type
    """
    if not policy:
        return ConstantKFactor(DEFAULT_K_FACTOR)

    if isinstance(policy, (ConstantKFactor, KFactorTable)):
        return policy

    if isinstance(policy, Mapping):
        return KFactorTable.from_mapping(policy)

    if isinstance(policy, Real) and not isinstance(policy, bool):
        return ConstantKFactor(policy)

    raise TypeError(f"Unsupported K-factor policy: {policy!r}")
