"""Numeric capability required of trust scores, and the normalization routine.

A trust score can be any type that adds, divides, multiplies and converts to
``float``: ``int``, ``float``, ``fractions.Fraction`` and ``decimal.Decimal``
all qualify, as does any user type implementing the same operators. No
registration is needed; the check is structural.
"""
from __future__ import annotations

import functools
import logging
import math
import operator
from collections.abc import Hashable, Iterable, Mapping
from enum import Enum
from typing import Any, Protocol, TypeVar, runtime_checkable

from peer_trust.errors import InvalidTrustValueError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class ZeroSumPolicy(str, Enum):
    """How normalization treats a set of scores that sums to exactly zero."""

    IEEE = "ieee"
    UNIFORM = "uniform"


@runtime_checkable
class TrustValue(Protocol):
    """Structural type for raw trust scores.

    In-place accumulation (``+=``) is not listed separately: Python falls
    back to ``__add__`` when a type does not define ``__iadd__``.

    Every score, and the sum of a table, must fit in a ``float``. Single
    values outside that range are rejected by ``ensure_trust_value``; a table
    whose total overflows makes normalization raise ``OverflowError``.
    """

    def __add__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __float__(self) -> float: ...


def is_trust_value(value: object) -> bool:
    """Return True if *value* can be stored as a raw trust score.

    ``bool`` is rejected even though it is an ``int`` subclass.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, TrustValue)


def ensure_trust_value(value: Any, *, name: str = "value") -> Any:
    """Return *value* unchanged, or raise InvalidTrustValueError.

    Parameters
    ----------
    value:
        Candidate trust score.
    name:
        Argument name used in the error message.

    Raises
    ------
    InvalidTrustValueError
        If *value* lacks the required arithmetic, or is too large for
        ``float()``.
    """
    if not is_trust_value(value):
        raise InvalidTrustValueError(value, name)
    try:
        float(value)
    except OverflowError:
        raise InvalidTrustValueError(value, name) from None
    return value


def total_trust(values: Iterable[Any]) -> float:
    """Sum raw scores with the score type's own ``+`` and convert to float.

    Returns 0.0 for an empty iterable.
    """
    values = list(values)
    if not values:
        return 0.0
    return float(functools.reduce(operator.add, values))


def _ieee_divide(numerator: float, denominator: float) -> float:
    """Float division with IEEE-754 results instead of ZeroDivisionError."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def normalize(
    scores: Mapping[K, Any],
    zero_sum_policy: ZeroSumPolicy = ZeroSumPolicy.IEEE,
) -> dict[K, float]:
    """Divide every score by the sum of all scores.

    The result always has exactly the keys of *scores*. An empty mapping
    normalizes to an empty dict.

    Parameters
    ----------
    scores:
        Raw trust scores keyed by peer identifier.
    zero_sum_policy:
        What to do when the scores sum to exactly zero. ``IEEE`` divides
        anyway, giving nan for zero scores and +/-inf otherwise. ``UNIFORM``
        assigns ``1 / len(scores)`` to every peer.

    Returns
    -------
    dict[K, float]
        Freshly built mapping of normalized scores.
    """
    if not scores:
        return {}

    total = total_trust(scores.values())
    if total == 0.0:
        logger.warning(
            "Trust scores for %d peers sum to zero; applying %s policy",
            len(scores),
            ZeroSumPolicy(zero_sum_policy).value,
        )
        if zero_sum_policy == ZeroSumPolicy.UNIFORM:
            share = 1.0 / len(scores)
            return {peer_id: share for peer_id in scores}

    return {
        peer_id: _ieee_divide(float(score), total)
        for peer_id, score in scores.items()
    }
