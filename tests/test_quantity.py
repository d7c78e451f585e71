"""Quantity construction, arithmetic and rescaling."""

from __future__ import annotations

from fractions import Fraction

import hypothesis.strategies as st
import numpy as np
import pytest
from hypothesis import given

from dimscale.coherence import AddPolicy
from dimscale.config import configure
from dimscale.errors import DimensionMismatch, PrecisionLoss, ScaleIncoherence
from dimscale.quantity import Quantity, add, compare, div, isclose, mul, power, rescale, sub
from dimscale.signatures import DimPattern, L, M, Scale, Signature, T, Dim8


MM = Scale.pow10(-3)
KM = Scale.pow10(3)
G = Scale.pow10(-3)


def metres(v) -> Quantity:
	return Quantity(v, L)


def millimetres(v) -> Quantity:
	return Quantity(v, L, MM)


def test_construction_validates() -> None:
	with pytest.raises(TypeError):
		Quantity(1, DimPattern(l=1))
	with pytest.raises(TypeError):
		Quantity("1", L)
	with pytest.raises(TypeError):
		Quantity(True, L)
	with pytest.raises(TypeError):
		Quantity(1, L, 3)


def test_array_values_are_frozen_copies() -> None:
	raw = np.array([1, 2, 3])
	q = Quantity(raw, L)
	raw[0] = 99
	assert q.value.tolist() == [1, 2, 3]
	with pytest.raises(ValueError):
		q.value[0] = 5
	assert Quantity([1.0, 2.0], L).storage == "float"


def test_quantity_is_immutable() -> None:
	q = metres(1)
	with pytest.raises(AttributeError):
		q.value = 2


def test_scenario_smallest_wins_addition() -> None:
	out = add(metres(1), millimetres(1000), policy=AddPolicy.SMALLEST_WINS)
	assert out.scale == MM
	assert out.value == 2000
	out = add(metres(1), millimetres(1), policy=AddPolicy.SMALLEST_WINS)
	assert out.value == 1001
	assert out.signature == Signature(L, MM)


def test_scenario_strict_rejects_mixed_scales() -> None:
	with pytest.raises(ScaleIncoherence):
		metres(1) + millimetres(1)


def test_scenario_compound_signature() -> None:
	kg = Quantity(1, M)
	m = metres(1)
	s = Quantity(1, T)
	energy = kg * m * m / (s * s)
	assert energy.dim == Dim8(m=1, l=2, t=-2)
	assert energy.scale == Scale.IDENTITY


def test_scenario_rescale_float_to_millimetres() -> None:
	assert rescale(metres(1.0), MM).value == 1000.0
	assert metres(1.0).rescale(MM).value == 1000.0


def test_operators_follow_configured_policy() -> None:
	with configure(policy=AddPolicy.LARGEST_WINS):
		out = metres(1) + millimetres(2000)
	assert out.scale == Scale.IDENTITY
	assert out.value == 3
	with configure(policy=AddPolicy.LEFT_HAND_WINS):
		out = millimetres(500) - metres(1)
	assert out.value == -500
	assert out.scale == MM


def test_add_requires_same_dimension() -> None:
	with pytest.raises(DimensionMismatch):
		metres(1) + Quantity(1, T)
	with pytest.raises(DimensionMismatch):
		metres(1) + 1


def test_bare_numbers_act_dimensionless() -> None:
	ratio = metres(6) / metres(3)
	assert ratio.dim.is_dimensionless()
	assert (ratio + 1).value == 3
	assert (2 * metres(3)).value == 6
	assert (metres(3) * 2).dim == L


def test_mixed_scale_products_combine_scales() -> None:
	area = millimetres(3) * metres(2)
	assert area.scale == MM
	assert area.dim == L ** 2
	assert area.value == 6


def test_integer_division_must_be_exact() -> None:
	assert (metres(6) / Quantity(3, T)).value == 2
	with pytest.raises(PrecisionLoss):
		metres(7) / Quantity(2, T)
	assert div(metres(7), Quantity(2, T), lossy=True).value == 3
	assert (metres(7.0) / Quantity(2, T)).value == 3.5
	assert (metres(Fraction(7)) / Quantity(2, T)).value == Fraction(7, 2)


def test_integer_array_division() -> None:
	q = Quantity(np.array([4, 8]), L) / Quantity(2, T)
	assert q.value.tolist() == [2, 4]
	with pytest.raises(PrecisionLoss):
		Quantity(np.array([4, 9]), L) / Quantity(2, T)
	with pytest.raises(ZeroDivisionError):
		Quantity(np.array([4, 8]), L) / Quantity(0, T)
	with pytest.raises(ZeroDivisionError):
		Quantity(np.array([4, 8]), L) / Quantity(np.array([2, 0]), T)
	with pytest.raises(ZeroDivisionError):
		Quantity(4, L) / Quantity(0, T)


def test_powers() -> None:
	sq = millimetres(3) ** 2
	assert sq.value == 9
	assert sq.signature == Signature(L ** 2, Scale.pow10(-6))
	root = power(Quantity(16.0, L ** 2, Scale.pow10(-6)), Fraction(1, 2))
	assert root.value == 4.0
	assert root.signature == Signature(L, MM)
	with pytest.raises(PrecisionLoss):
		Quantity(16, L ** 2) ** Fraction(1, 2)
	assert power(Quantity(16, L ** 2), Fraction(1, 2), lossy=True).value == 4
	with pytest.raises(TypeError):
		metres(2) ** 0.5


def test_negation_and_comparison() -> None:
	assert (-metres(3)).value == -3
	assert metres(1) < metres(2)
	with configure(policy=AddPolicy.SMALLEST_WINS):
		assert metres(1) > millimetres(999)
		assert metres(1) >= millimetres(1000)
	assert compare(millimetres(1), metres(1), "<", policy=AddPolicy.LARGEST_WINS, lossy=True)
	with pytest.raises(ScaleIncoherence):
		metres(1) < millimetres(1)


def test_equality_is_signature_aware() -> None:
	assert metres(1) == metres(1)
	assert metres(1) != millimetres(1)
	assert Quantity(np.array([1, 2]), L) == Quantity(np.array([1, 2]), L)
	with pytest.raises(TypeError):
		hash(metres(1))


def test_sub_and_mul_helpers() -> None:
	assert sub(metres(3), metres(1)).value == 2
	assert mul(metres(3), Quantity(2, T)).dim == L * T


def test_numpy_arrays_defer_to_quantity() -> None:
	out = np.array([1, 2]) * metres(3)
	assert isinstance(out, Quantity)
	assert out.value.tolist() == [3, 6]


def test_kilometre_rescale_of_integers() -> None:
	assert rescale(Quantity(2, L, KM), Scale.IDENTITY).value == 2000
	with pytest.raises(PrecisionLoss):
		rescale(metres(1500), KM)
	assert rescale(metres(1500), KM, lossy=True).value == 1
	with configure(lossy=True):
		assert rescale(metres(1500), KM).value == 1


@given(st.integers(min_value=-10**12, max_value=10**12), st.integers(min_value=-10**12, max_value=10**12))
def test_mixed_scale_sum_is_exact(a: int, b: int) -> None:
	out = add(metres(a), millimetres(b), policy=AddPolicy.SMALLEST_WINS)
	assert out.value == a * 1000 + b
	assert out.scale == MM


def test_isclose_uses_configured_float_tolerance() -> None:
	a, b = metres(1.0), metres(1.0005)
	assert not isclose(a, b)
	assert a.isclose(b, rel_tol=1e-3)
	with configure(float_tolerance=1e-3):
		assert isclose(a, b)
		assert not isclose(a, metres(1.01))
	assert isclose(metres(1.0), metres(1.0 + 1e-15))


def test_isclose_aligns_scales_and_keeps_exact_storage_exact() -> None:
	assert isclose(metres(1.0), millimetres(1000.0), policy=AddPolicy.SMALLEST_WINS)
	assert isclose(metres(1), millimetres(1000), policy=AddPolicy.SMALLEST_WINS)
	assert isclose(Quantity(1, L, KM), millimetres(10**6), policy=AddPolicy.LARGEST_WINS)
	assert not isclose(millimetres(1500), Quantity(1, L, KM), policy=AddPolicy.LARGEST_WINS)
	with configure(float_tolerance=0.5):
		assert isclose(metres(1.0), metres(1.2))
		assert not isclose(metres(1), metres(2))
	assert isclose(Quantity(np.array([1.0, 2.0]), L), Quantity(np.array([1.0, 2.0 + 1e-14]), L))
	with pytest.raises(ScaleIncoherence):
		isclose(metres(1.0), millimetres(1000.0))


scales = st.builds(
	Scale,
	st.integers(min_value=-10, max_value=10),
	st.integers(min_value=-10, max_value=10),
	st.integers(min_value=-10, max_value=10),
	st.integers(min_value=-2, max_value=2),
)
dims = st.builds(
	Dim8,
	m=st.integers(min_value=-3, max_value=3),
	l=st.integers(min_value=-3, max_value=3),
	t=st.integers(min_value=-3, max_value=3),
	a=st.integers(min_value=-3, max_value=3),
)
floats = st.one_of(
	st.just(0.0),
	st.floats(min_value=1e-6, max_value=1e6),
	st.floats(min_value=-1e6, max_value=-1e-6),
)


@given(floats, dims, scales, scales)
def test_float_round_trip_through_any_scale(v: float, dim: Dim8, home: Scale, other: Scale) -> None:
	q = Quantity(v, dim, home)
	back = rescale(rescale(q, other), home)
	assert back.signature == q.signature
	assert isclose(back, q)


@given(st.integers(min_value=-10**6, max_value=10**6), dims, scales, st.integers(min_value=-10**6, max_value=10**6), dims, scales)
def test_products_combine_signatures(a: int, da: Dim8, sa: Scale, b: int, db: Dim8, sb: Scale) -> None:
	q1, q2 = Quantity(a, da, sa), Quantity(b, db, sb)
	out = q1 * q2
	assert out.dim == q1.dim * q2.dim
	assert out.scale == q1.scale * q2.scale
	assert out.value == a * b
	quotient = q1 / Quantity(1, db, sb)
	assert quotient.dim == q1.dim / q2.dim
	assert quotient.scale == q1.scale / q2.scale
