"""Affine temperature points: conversion and the combination rules."""

from __future__ import annotations

import math
from fractions import Fraction

import pytest

from dimscale.catalog import CELSIUS, FAHRENHEIT, KELVIN, RANKINE, RANKINE_SCALE
from dimscale.errors import AffineCombinationInvalid, PrecisionLoss
from dimscale.quantity import AffineOffset, Quantity, from_linear, to_affine, to_linear
from dimscale.signatures import L, Scale, TH


def test_scenario_fahrenheit_freezing_point_in_kelvin() -> None:
	k = to_linear(FAHRENHEIT(32.0), Scale.IDENTITY)
	assert k.affine is None
	assert k.scale == Scale.IDENTITY
	assert math.isclose(k.value, 273.15)


def test_exact_fahrenheit_with_fraction_storage() -> None:
	k = to_linear(FAHRENHEIT(Fraction(32)), Scale.IDENTITY)
	assert k.value == Fraction("273.15")


def test_celsius_to_kelvin_and_back() -> None:
	k = CELSIUS(Fraction(25)).to_linear()
	assert k.value == Fraction("298.15")
	back = from_linear(k, CELSIUS.affine)
	assert back.value == 25
	assert back.affine == CELSIUS.affine


def test_celsius_to_fahrenheit() -> None:
	f = to_affine(CELSIUS(100.0), FAHRENHEIT.affine, RANKINE_SCALE)
	assert f.affine == FAHRENHEIT.affine
	assert math.isclose(f.value, 212.0)
	c = to_affine(f, CELSIUS.affine, Scale.IDENTITY)
	assert math.isclose(c.value, 100.0)


def test_rescale_keeps_the_physical_point() -> None:
	# 0 °C is 273.15 K; stored in millikelvin the offset is re-expressed there
	q = CELSIUS(Fraction(0)).rescale(Scale.pow10(-3))
	assert q.affine == CELSIUS.affine
	assert q.to_linear(Scale.IDENTITY).value == Fraction("273.15")


def test_integer_storage_needs_integral_offset() -> None:
	with pytest.raises(PrecisionLoss):
		to_linear(CELSIUS(20))
	assert to_linear(CELSIUS(20), lossy=True).value == 293


def test_affine_difference_is_linear() -> None:
	d = CELSIUS(30.0) - CELSIUS(20.0)
	assert d.affine is None
	assert d.dim == TH
	assert d.value == 10.0


def test_affine_plus_linear_stays_affine() -> None:
	warmer = CELSIUS(20.0) + KELVIN(5.0)
	assert warmer.affine == CELSIUS.affine
	assert warmer.value == 25.0
	cooler = CELSIUS(20.0) - KELVIN(5.0)
	assert cooler.affine == CELSIUS.affine
	assert cooler.value == 15.0
	assert (KELVIN(5.0) + CELSIUS(20.0)).affine == CELSIUS.affine


def test_invalid_affine_combinations() -> None:
	with pytest.raises(AffineCombinationInvalid):
		CELSIUS(20.0) + CELSIUS(10.0)
	with pytest.raises(AffineCombinationInvalid):
		KELVIN(300.0) - CELSIUS(10.0)
	with pytest.raises(AffineCombinationInvalid):
		CELSIUS(20.0) - FAHRENHEIT(10.0)
	with pytest.raises(AffineCombinationInvalid):
		CELSIUS(20.0) * 2
	with pytest.raises(AffineCombinationInvalid):
		CELSIUS(20.0) / KELVIN(2.0)
	with pytest.raises(AffineCombinationInvalid):
		CELSIUS(20.0) ** 2
	with pytest.raises(AffineCombinationInvalid):
		-CELSIUS(20.0)


def test_only_temperature_carries_an_offset() -> None:
	with pytest.raises(AffineCombinationInvalid):
		Quantity(1.0, L, affine=AffineOffset(1))
	with pytest.raises(TypeError):
		AffineOffset(1, reference=3)


def test_offset_in_other_scale() -> None:
	off = AffineOffset(Fraction("459.67"), RANKINE_SCALE)
	assert off.offset_in(Scale.IDENTITY) == Fraction("459.67") * Fraction(5, 9)
	assert off.offset_in(RANKINE_SCALE) == Fraction("459.67")


def test_rankine_is_linear() -> None:
	r = RANKINE(Fraction(9))
	assert r.affine is None
	assert r.rescale(Scale.IDENTITY).value == 5
