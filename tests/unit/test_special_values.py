"""Tests for NaN and Infinite."""

import copy
import math
import pickle

import pytest

from bignumbers import (
    NAN,
    NEGATIVE_INFINITE,
    POSITIVE_INFINITE,
    Decimal,
    Infinite,
    InvalidInput,
    NaN,
    UnsupportedType,
)

D = Decimal.from_string


class TestNaNSingleton:
    """Tests for NaN identity."""

    def test_single_instance(self):
        assert NaN() is NAN
        assert NaN.get() is NAN

    def test_copy_keeps_identity(self):
        assert copy.copy(NAN) is NAN
        assert copy.deepcopy(NAN) is NAN

    def test_string_forms(self):
        assert str(NAN) == "NaN"
        assert repr(NAN) == "NaN()"
        assert math.isnan(float(NAN))


class TestNaNAbsorption:
    """NaN absorbs every operation."""

    @pytest.mark.parametrize("operation", ["add", "sub", "mul", "div"])
    @pytest.mark.parametrize("text", ["0", "1", "-2.5"])
    def test_nan_on_left(self, operation, text):
        assert getattr(NAN, operation)(D(text)).is_nan()

    @pytest.mark.parametrize("operation", ["add", "sub", "mul", "div"])
    def test_nan_on_right(self, operation):
        assert getattr(D("3"), operation)(NAN).is_nan()

    @pytest.mark.parametrize("operation", ["add", "sub", "mul", "div"])
    def test_nan_with_infinite(self, operation):
        assert getattr(NAN, operation)(POSITIVE_INFINITE) is NAN
        assert getattr(POSITIVE_INFINITE, operation)(NAN) is NAN

    def test_add_one(self):
        assert NAN.add(Decimal.from_integer(1)).is_nan()

    def test_operators(self):
        assert (NAN + 1) is NAN
        assert (1 - NAN) is NAN
        assert (D("2") * NAN) is NAN
        assert -NAN is NAN
        assert abs(NAN) is NAN

    def test_none_operand_rejected(self):
        with pytest.raises(InvalidInput):
            NAN.add(None)


class TestNaNPredicates:
    """Tests for NaN predicates and equality."""

    def test_predicates(self):
        assert NAN.is_nan()
        assert not NAN.is_infinite()
        assert not NAN.is_zero()
        assert not NAN.is_positive()
        assert not NAN.is_negative()

    def test_never_equal(self):
        assert not NAN.equals(D("1"))
        assert not NAN.equals(NAN)
        assert NAN != NAN
        assert D("0") != NAN

    def test_not_ordered(self):
        with pytest.raises(TypeError):
            NAN < D("1")  # noqa: B015

    def test_hashable(self):
        assert hash(NAN) == hash(NaN())


class TestInfiniteSingletons:
    """Tests for Infinite identity."""

    def test_two_instances(self):
        assert Infinite.positive() is POSITIVE_INFINITE
        assert Infinite.negative() is NEGATIVE_INFINITE
        assert Infinite(True) is POSITIVE_INFINITE
        assert POSITIVE_INFINITE is not NEGATIVE_INFINITE

    def test_string_forms(self):
        assert str(POSITIVE_INFINITE) == "INF"
        assert str(NEGATIVE_INFINITE) == "-INF"
        assert repr(NEGATIVE_INFINITE) == "Infinite.negative()"
        assert float(NEGATIVE_INFINITE) == -math.inf

    def test_predicates(self):
        assert POSITIVE_INFINITE.is_infinite()
        assert POSITIVE_INFINITE.is_positive()
        assert not POSITIVE_INFINITE.is_negative()
        assert NEGATIVE_INFINITE.is_negative()
        assert not NEGATIVE_INFINITE.is_nan()
        assert not NEGATIVE_INFINITE.is_zero()


class TestInfiniteArithmetic:
    """Tests for Infinite absorption rules."""

    def test_add_finite(self):
        assert POSITIVE_INFINITE.add(D("-1000")) is POSITIVE_INFINITE
        assert NEGATIVE_INFINITE.add(D("1000")) is NEGATIVE_INFINITE

    def test_add_infinite(self):
        assert POSITIVE_INFINITE.add(POSITIVE_INFINITE) is POSITIVE_INFINITE
        assert POSITIVE_INFINITE.add(NEGATIVE_INFINITE).is_nan()

    def test_sub_finite(self):
        assert POSITIVE_INFINITE.sub(D("5")) is POSITIVE_INFINITE
        assert NEGATIVE_INFINITE.sub(D("-5")) is NEGATIVE_INFINITE

    def test_sub_infinite(self):
        assert POSITIVE_INFINITE.sub(POSITIVE_INFINITE).is_nan()
        assert POSITIVE_INFINITE.sub(NEGATIVE_INFINITE) is POSITIVE_INFINITE
        assert NEGATIVE_INFINITE.sub(POSITIVE_INFINITE) is NEGATIVE_INFINITE

    def test_finite_minus_infinite(self):
        assert Decimal.from_integer(5).sub(POSITIVE_INFINITE) == NEGATIVE_INFINITE
        assert Decimal.from_integer(5).sub(NEGATIVE_INFINITE) == POSITIVE_INFINITE

    def test_mul_signs(self):
        assert POSITIVE_INFINITE.mul(D("2")) is POSITIVE_INFINITE
        assert POSITIVE_INFINITE.mul(D("-2")) is NEGATIVE_INFINITE
        assert NEGATIVE_INFINITE.mul(D("-0.5")) is POSITIVE_INFINITE
        assert NEGATIVE_INFINITE.mul(NEGATIVE_INFINITE) is POSITIVE_INFINITE
        assert POSITIVE_INFINITE.mul(NEGATIVE_INFINITE) is NEGATIVE_INFINITE

    def test_mul_zero_is_nan(self):
        assert POSITIVE_INFINITE.mul(D("0.00")).is_nan()
        assert D("0").mul(NEGATIVE_INFINITE).is_nan()

    def test_div(self):
        assert POSITIVE_INFINITE.div(D("-4")) is NEGATIVE_INFINITE
        assert NEGATIVE_INFINITE.div(D("4")) is NEGATIVE_INFINITE

    def test_div_indefinite_forms(self):
        assert POSITIVE_INFINITE.div(NEGATIVE_INFINITE).is_nan()
        assert POSITIVE_INFINITE.div(D("0")).is_nan()

    def test_finite_divided_by_infinite(self):
        assert Decimal.from_integer(0).div(POSITIVE_INFINITE) == Decimal.from_integer(0)
        assert Decimal.from_integer(7).div(NEGATIVE_INFINITE).is_zero()

    def test_unary(self):
        assert POSITIVE_INFINITE.additive_inverse() is NEGATIVE_INFINITE
        assert -NEGATIVE_INFINITE is POSITIVE_INFINITE
        assert NEGATIVE_INFINITE.abs() is POSITIVE_INFINITE
        assert abs(NEGATIVE_INFINITE) is POSITIVE_INFINITE
        assert NEGATIVE_INFINITE.round(2) is NEGATIVE_INFINITE

    def test_operators(self):
        assert (POSITIVE_INFINITE + 1) is POSITIVE_INFINITE
        assert (1 - POSITIVE_INFINITE) is NEGATIVE_INFINITE
        assert (3 * NEGATIVE_INFINITE) is NEGATIVE_INFINITE
        assert (1 / POSITIVE_INFINITE) == 0


class TestInfiniteComparison:
    """Tests for Infinite equality and ordering."""

    def test_equals(self):
        assert POSITIVE_INFINITE.equals(POSITIVE_INFINITE)
        assert not POSITIVE_INFINITE.equals(NEGATIVE_INFINITE)
        assert not POSITIVE_INFINITE.equals(D("1"))
        assert not NEGATIVE_INFINITE.equals(NAN)

    def test_comp(self):
        assert POSITIVE_INFINITE.comp(D("1e9")) == 1
        assert NEGATIVE_INFINITE.comp(D("-1e9")) == -1
        assert POSITIVE_INFINITE.comp(NEGATIVE_INFINITE) == 1
        assert NEGATIVE_INFINITE.comp(POSITIVE_INFINITE) == -1
        assert NEGATIVE_INFINITE.comp(NEGATIVE_INFINITE) == 0

    def test_comp_nan_raises(self):
        with pytest.raises(UnsupportedType):
            POSITIVE_INFINITE.comp(NAN)

    def test_ordering(self):
        assert NEGATIVE_INFINITE < D("-1e9") < POSITIVE_INFINITE
        assert max([D("1"), POSITIVE_INFINITE, D("2")]) is POSITIVE_INFINITE

    def test_hash_matches_float(self):
        assert hash(POSITIVE_INFINITE) == hash(math.inf)


class TestPickling:
    """Pickling keeps the shared instances intact."""

    def test_infinities_round_trip_to_same_instance(self):
        assert pickle.loads(pickle.dumps(NEGATIVE_INFINITE)) is NEGATIVE_INFINITE
        assert pickle.loads(pickle.dumps(POSITIVE_INFINITE)) is POSITIVE_INFINITE

    def test_round_trip_leaves_signs_unchanged(self):
        pickle.loads(pickle.dumps(NEGATIVE_INFINITE))
        assert POSITIVE_INFINITE.is_positive()
        assert str(POSITIVE_INFINITE) == "INF"
        assert NEGATIVE_INFINITE.is_negative()

    def test_nan_round_trip(self):
        assert pickle.loads(pickle.dumps(NAN)) is NAN

    @pytest.mark.parametrize("protocol", range(pickle.HIGHEST_PROTOCOL + 1))
    def test_all_protocols(self, protocol):
        for value in (NAN, POSITIVE_INFINITE, NEGATIVE_INFINITE):
            assert pickle.loads(pickle.dumps(value, protocol)) is value
        assert POSITIVE_INFINITE.is_positive()
