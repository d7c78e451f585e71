"""Erasure to bare numbers and angle folding."""

from __future__ import annotations

import math
from fractions import Fraction

import pytest

from dimscale.catalog import DEGREE, METRE, MINUTE, RADIAN, SECOND, TURN, resolve
from dimscale.errors import DimensionMismatch, PrecisionLoss
from dimscale.quantity import ErasureRule, Quantity, erase, erase_angle
from dimscale.signatures import A, Dim8, L, Scale, T


def test_scenario_metre_over_millimetre() -> None:
	ratio = METRE(1.0) / resolve("mm")(1.0)
	assert erase(ratio) == 1000.0
	assert float(ratio) == 1000.0


def test_integer_ratio_erases_exactly() -> None:
	ratio = METRE(3) / resolve("mm")(1)
	assert erase(ratio) == 3000


def test_pure_angle_erases_to_radians() -> None:
	assert math.isclose(erase(DEGREE(180.0)), math.pi)
	assert math.isclose(erase(TURN(1.0)), 2 * math.pi)
	assert erase(RADIAN(2)) == 2
	with pytest.raises(PrecisionLoss):
		erase(DEGREE(180))
	assert erase(DEGREE(180), lossy=True) == 3


def test_canonical_scale() -> None:
	assert ErasureRule.canonical_scale(Dim8()) == Scale.IDENTITY
	assert ErasureRule.canonical_scale(A ** 2) == Scale.IDENTITY
	with pytest.raises(DimensionMismatch):
		ErasureRule.canonical_scale(L)


def test_compound_angle_folds_pi_and_keeps_residual_scale() -> None:
	# 180 deg/min: π moves into the value, 1/180 stays in the scale
	rate = DEGREE(180.0) / MINUTE(1.0)
	out = erase(rate)
	assert isinstance(out, Quantity)
	assert out.dim == Dim8(t=-1)
	assert out.scale == Scale(-2, -2, -1, 0) / MINUTE.scale
	assert math.isclose(out.value, 180 * math.pi)


def test_erase_angle_is_identity_without_angle() -> None:
	q = Quantity(2.0, L / T)
	assert erase_angle(q) is q


def test_dimensionful_values_do_not_erase() -> None:
	with pytest.raises(DimensionMismatch):
		erase(METRE(1.0))
	with pytest.raises(DimensionMismatch):
		float(SECOND(1.0))
	with pytest.raises(DimensionMismatch):
		float(RADIAN(1.0) / SECOND(1.0))


def test_fraction_storage_with_rational_scale() -> None:
	assert erase(Quantity(Fraction(1, 4), Dim8(), Scale.pow10(2))) == 25
