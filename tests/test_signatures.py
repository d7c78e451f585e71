"""Dimension, scale, pattern and signature value types."""

from __future__ import annotations

from fractions import Fraction

import hypothesis.strategies as st
import pytest
from hypothesis import given

from dimscale.errors import DimensionMismatch, NonIntegralExponent, Overflow
from dimscale.signatures import (
	ANY, DIMLESS, DIMENSIONLESS, DIM_EXP_MAX, L, M, T, A,
	Dim8, DimPattern, Scale, Signature, UNITY,
)


small = st.integers(min_value=-8, max_value=8)
dims = st.builds(Dim8, small, small, small, small, small, small, small, small)
scales = st.builds(Scale, small, small, small, st.integers(min_value=-2, max_value=2))


def test_dim_group_laws() -> None:
	force = M * L / (T * T)
	assert force == Dim8(m=1, l=1, t=-2)
	assert (force ** 2).to_tuple() == (2, 2, -4, 0, 0, 0, 0, 0)
	assert (L ** 2) ** Fraction(1, 2) == L
	assert force.pretty() == "M L T^-2"
	assert DIMLESS.pretty() == "1"


def test_dim_add_requires_equal() -> None:
	assert L + L == L
	with pytest.raises(DimensionMismatch):
		L + T
	with pytest.raises(DimensionMismatch):
		M - L


def test_dim_fractional_power_must_be_integral() -> None:
	with pytest.raises(NonIntegralExponent):
		L ** Fraction(1, 2)
	with pytest.raises(TypeError):
		L ** 0.5


def test_dim_bounds() -> None:
	Dim8(l=DIM_EXP_MAX)
	with pytest.raises(Overflow):
		Dim8(l=DIM_EXP_MAX + 1)
	with pytest.raises(Overflow):
		Dim8(l=20) * Dim8(l=20)
	with pytest.raises(TypeError):
		Dim8(l=1.0)


def test_angle_predicates() -> None:
	assert A.is_pure_angle()
	assert (A ** 2).is_pure_angle()
	assert not (A / T).is_pure_angle()
	assert (A / T).without_angle() == Dim8(t=-1)
	assert not DIMLESS.is_pure_angle()


def test_scale_powers_of_ten_and_six_factorize() -> None:
	assert Scale.pow10(3) == Scale(3, 0, 3, 0)
	assert Scale.pow6(2) == Scale(2, 2, 0, 0)
	assert Scale.of(ten=1) * Scale.pow6(1) == Scale.of(two=2, three=1, five=1)
	# 10 · 10 built two ways lands on one vector
	assert Scale.pow10(1) * Scale.pow10(1) == Scale.of(two=2, five=2)
	assert Scale.pow10(-3).log10() == -3
	assert Scale.pow6(1).log10() is None


def test_scale_ratio_and_pretty() -> None:
	assert Scale.pow10(-3).ratio == Fraction(1, 1000)
	assert Scale(0, -2, 1, 0).ratio == Fraction(5, 9)
	assert Scale.pow10(-3).pretty() == "10^-3"
	assert UNITY.pretty() == "1"
	assert Scale(-2, -2, -1, 1).pretty() == "2^-2·3^-2·5^-1·π"


def test_scale_bounds() -> None:
	with pytest.raises(Overflow):
		Scale(p2=65)
	with pytest.raises(Overflow):
		Scale(pi=9)
	with pytest.raises(Overflow):
		Scale.pow10(40) * Scale.pow10(40)


def test_scale_magnitude_orders_multiples() -> None:
	assert Scale.pow10(-3).magnitude() < UNITY.magnitude() < Scale.pow10(3).magnitude()
	assert Scale(0, 0, 0, 1).magnitude() > Scale.pow10(0).magnitude()


@given(scales, scales)
def test_scale_mul_div_inverse(a: Scale, b: Scale) -> None:
	assert (a * b) / b == a
	assert a / a == Scale.IDENTITY


@given(dims, dims)
def test_dim_mul_div_inverse(a: Dim8, b: Dim8) -> None:
	assert (a * b) / b == a


@given(st.integers(min_value=-20, max_value=20), st.integers(min_value=-20, max_value=20))
def test_scale_uniqueness_of_decimal_products(x: int, y: int) -> None:
	assert Scale.pow10(x) * Scale.pow10(y) == Scale.pow10(x + y)
	assert Scale.pow10(x).ratio * Scale.pow10(y).ratio == Scale.pow10(x + y).ratio


def test_pattern_matching_with_wildcards() -> None:
	p = DimPattern(l=1, t=-1, a=ANY)
	assert p.matches(Dim8(l=1, t=-1))
	assert p.matches(Dim8(l=1, t=-1, a=3))
	assert not p.matches(Dim8(l=1, t=-2))
	assert not p.is_concrete()
	assert p.pretty() == "L T^-1 A^*"


def test_pattern_algebra() -> None:
	p = DimPattern(m=ANY, l=1)
	q = DimPattern(l=1, t=-2)
	assert (p * q).to_tuple() == (ANY, 2, -2, 0, 0, 0, 0, 0)
	assert (q / q).to_dim() == DIMLESS
	assert (q ** 2).to_tuple()[2] == -4
	with pytest.raises(ValueError):
		p.to_dim()


def test_pattern_from_dim_frees_axes() -> None:
	p = DimPattern.from_dim(Dim8(l=1), free=("A", "Mass"))
	assert p.a is ANY
	assert p.m is ANY
	assert p.l == 1
	with pytest.raises(ValueError):
		DimPattern.from_dim(Dim8(), free=("Q",))


def test_signature_combines_both_halves() -> None:
	mm = Signature(L, Scale.pow10(-3))
	s = Signature(T)
	speed = mm / s
	assert speed.dim == Dim8(l=1, t=-1)
	assert speed.scale == Scale.pow10(-3)
	assert (mm ** 2).scale == Scale.pow10(-6)
	assert speed.describe() == "[L T^-1] x 10^-3"
	assert DIMENSIONLESS == Signature()
	with pytest.raises(TypeError):
		Signature(L, 3)
