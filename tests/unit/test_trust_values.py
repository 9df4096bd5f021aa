"""Unit tests for peer_trust.values — score capability checks and normalization."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

import pytest

from peer_trust.errors import InvalidTrustValueError, PeerTrustError
from peer_trust.values import (
    TrustValue,
    ZeroSumPolicy,
    ensure_trust_value,
    is_trust_value,
    normalize,
    total_trust,
)


@dataclass(frozen=True)
class Credits:
    """Minimal user-defined trust unit."""

    amount: int

    def __add__(self, other: "Credits") -> "Credits":
        return Credits(self.amount + other.amount)

    def __truediv__(self, other: "Credits") -> float:
        return self.amount / other.amount

    def __mul__(self, other: "Credits") -> "Credits":
        return Credits(self.amount * other.amount)

    def __float__(self) -> float:
        return float(self.amount)


# ---------------------------------------------------------------------------
# Capability checks
# ---------------------------------------------------------------------------


class TestIsTrustValue:
    @pytest.mark.parametrize("value", [1, 1.5, Fraction(1, 2), Decimal("0.3"), -4])
    def test_builtin_numbers_accepted(self, value: object) -> None:
        assert is_trust_value(value)

    def test_user_defined_type_accepted(self) -> None:
        assert is_trust_value(Credits(3))
        assert isinstance(Credits(3), TrustValue)

    @pytest.mark.parametrize("value", ["1.0", None, [1], {"a": 1}, object()])
    def test_non_numeric_rejected(self, value: object) -> None:
        assert not is_trust_value(value)

    def test_bool_rejected(self) -> None:
        assert not is_trust_value(True)


class TestEnsureTrustValue:
    def test_returns_value_unchanged(self) -> None:
        value = Fraction(2, 7)
        assert ensure_trust_value(value) is value

    def test_raises_invalid_trust_value_error(self) -> None:
        with pytest.raises(InvalidTrustValueError):
            ensure_trust_value("high")

    def test_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            ensure_trust_value(None)

    def test_error_is_peer_trust_error(self) -> None:
        with pytest.raises(PeerTrustError):
            ensure_trust_value(None)

    def test_error_message_uses_argument_name(self) -> None:
        with pytest.raises(InvalidTrustValueError, match="trust_delta"):
            ensure_trust_value("x", name="trust_delta")

    def test_int_too_large_for_float_rejected(self) -> None:
        with pytest.raises(InvalidTrustValueError):
            ensure_trust_value(10**400)

    def test_fraction_too_large_for_float_rejected(self) -> None:
        with pytest.raises(InvalidTrustValueError):
            ensure_trust_value(Fraction(10**400, 3))

    def test_largest_float_sized_int_accepted(self) -> None:
        assert ensure_trust_value(10**308) == 10**308

    def test_error_keeps_value(self) -> None:
        with pytest.raises(InvalidTrustValueError) as exc_info:
            ensure_trust_value("x")
        assert exc_info.value.value == "x"


# ---------------------------------------------------------------------------
# total_trust
# ---------------------------------------------------------------------------


class TestTotalTrust:
    def test_empty_is_zero(self) -> None:
        assert total_trust([]) == 0.0

    def test_sums_floats(self) -> None:
        assert total_trust([1.0, 2.0, 0.5]) == pytest.approx(3.5)

    def test_returns_float_for_ints(self) -> None:
        result = total_trust([1, 2, 3])
        assert isinstance(result, float)
        assert result == pytest.approx(6.0)

    def test_sums_fractions_exactly_before_conversion(self) -> None:
        assert total_trust([Fraction(1, 3)] * 3) == 1.0

    def test_uses_user_type_addition(self) -> None:
        assert total_trust([Credits(2), Credits(5)]) == pytest.approx(7.0)

    def test_accepts_generator(self) -> None:
        assert total_trust(x for x in (1.0, 1.0)) == pytest.approx(2.0)


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


class TestNormalize:
    def test_empty_mapping_gives_empty_dict(self) -> None:
        assert normalize({}) == {}

    def test_two_to_one_split(self) -> None:
        result = normalize({"A": 2.0, "B": 1.0})
        assert result["A"] == pytest.approx(2.0 / 3.0)
        assert result["B"] == pytest.approx(1.0 / 3.0)

    def test_result_sums_to_one_for_positive_scores(self) -> None:
        result = normalize({f"peer-{i}": float(i + 1) for i in range(25)})
        assert sum(result.values()) == pytest.approx(1.0)

    def test_result_has_same_keys(self) -> None:
        scores = {"A": 1, "B": 4, ("host", 9000): 5}
        assert set(normalize(scores)) == set(scores)

    def test_values_are_floats(self) -> None:
        result = normalize({"A": Fraction(1, 2), "B": Fraction(1, 2)})
        assert all(isinstance(v, float) for v in result.values())
        assert result["A"] == pytest.approx(0.5)

    def test_decimal_scores(self) -> None:
        result = normalize({"A": Decimal("1.5"), "B": Decimal("0.5")})
        assert result["A"] == pytest.approx(0.75)

    def test_user_type_scores(self) -> None:
        result = normalize({"A": Credits(1), "B": Credits(3)})
        assert result["B"] == pytest.approx(0.75)

    def test_returns_new_dict(self) -> None:
        scores = {"A": 1.0}
        result = normalize(scores)
        result["A"] = 42.0
        assert scores["A"] == 1.0

    def test_negative_scores_divide_by_signed_sum(self) -> None:
        result = normalize({"A": 3.0, "B": -1.0})
        assert result["A"] == pytest.approx(1.5)
        assert result["B"] == pytest.approx(-0.5)


class TestNormalizeZeroSum:
    def test_single_zero_score_is_nan(self) -> None:
        result = normalize({"X": 0.0})
        assert math.isnan(result["X"])

    def test_all_zero_scores_are_nan(self) -> None:
        result = normalize({"X": 0, "Y": 0})
        assert all(math.isnan(v) for v in result.values())

    def test_cancelling_scores_give_signed_infinity(self) -> None:
        result = normalize({"A": -1.0, "B": 1.0})
        assert result["A"] == -math.inf
        assert result["B"] == math.inf

    def test_mixed_zero_and_cancelling_scores(self) -> None:
        result = normalize({"A": -2.0, "B": 2.0, "C": 0.0})
        assert math.isnan(result["C"])
        assert math.isinf(result["A"])

    def test_uniform_policy_spreads_evenly(self) -> None:
        result = normalize({"X": 0.0, "Y": 0.0, "Z": 0.0}, ZeroSumPolicy.UNIFORM)
        assert result == {
            "X": pytest.approx(1 / 3),
            "Y": pytest.approx(1 / 3),
            "Z": pytest.approx(1 / 3),
        }

    def test_uniform_policy_ignored_when_sum_nonzero(self) -> None:
        result = normalize({"X": 3.0, "Y": 1.0}, ZeroSumPolicy.UNIFORM)
        assert result["X"] == pytest.approx(0.75)

    def test_zero_sum_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="peer_trust.values"):
            normalize({"X": 0.0})
        assert "sum to zero" in caplog.text

    def test_nonzero_sum_does_not_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="peer_trust.values"):
            normalize({"X": 1.0})
        assert caplog.text == ""
