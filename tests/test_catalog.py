"""Unit catalogue and symbol resolution."""

from __future__ import annotations

import math

import numpy as np
import pytest

from dimscale.catalog import (
	ARCMINUTE, ARCSECOND, CATALOG, DAY, DEGREE, GRADIAN, GRAM, HOUR, INCH, KILOGRAM,
	METRE, MILE, MINUTE, POUND, TURN, UNITS, resolve,
)
from dimscale.catalog.prefixes import KILO, MICRO, PREFIX_SYMBOLS
from dimscale.config import preferences
from dimscale.quantity import rescale
from dimscale.signatures import Dim8, L, Scale


def test_kilogram_is_the_identity_mass_scale() -> None:
	assert KILOGRAM.scale == Scale.IDENTITY
	assert KILOGRAM.symbol == "kg"
	assert GRAM.scale == Scale.pow10(-3)
	assert resolve("kg") == KILOGRAM


def test_time_units_are_exact() -> None:
	assert MINUTE.scale.ratio == 60
	assert HOUR.scale.ratio == 3600
	assert DAY.scale.ratio == 86400
	assert rescale(DAY(1), MINUTE.scale).value == 1440


def test_angle_units_carry_pi() -> None:
	assert DEGREE.scale == Scale(-2, -2, -1, 1)
	assert TURN.scale == Scale(1, 0, 0, 1)
	assert GRADIAN.scale.ratio * 200 == 1
	assert ARCMINUTE.scale.ratio * 10800 == 1
	assert ARCSECOND.scale.ratio * 648000 == 1
	assert rescale(TURN(1), DEGREE.scale).value == 360
	assert rescale(DEGREE(1), ARCSECOND.scale).value == 3600


def test_prefix_stripping() -> None:
	km = resolve("km")
	assert km.scale == Scale.pow10(3)
	assert km.dim == L
	assert resolve("µs").scale == Scale.pow10(-6)
	assert resolve("us").scale == Scale.pow10(-6)
	assert resolve("dam").scale == Scale.pow10(1)
	assert resolve("hPa").scale == Scale.pow10(2)
	assert resolve("mmol").dim == Dim8(n=1)
	assert resolve("kL").scale == Scale.IDENTITY


def test_exact_symbols_win_over_prefixes() -> None:
	assert resolve("min") == MINUTE
	assert resolve("mi") == MILE
	assert resolve("h") == HOUR
	assert resolve("d") == DAY
	assert resolve("cd").dim == Dim8(j=1)
	assert resolve("Pa").scale == Scale.IDENTITY


def test_non_metric_units_take_no_prefix() -> None:
	for sym in ("kin", "kft", "klb", "mdegC", "kmin"):
		with pytest.raises(ValueError):
			resolve(sym)
	with pytest.raises(ValueError):
		resolve("furlong")
	with pytest.raises(ValueError):
		INCH.prefixed(KILO)


def test_non_storage_units_multiply_into_float_storage() -> None:
	q = INCH(1)
	assert q.scale == Scale.pow10(-2)
	assert q.storage == "float"
	assert math.isclose(q.value, 2.54)
	assert math.isclose(rescale(MILE(1), Scale.IDENTITY).value, 1609.344)
	assert math.isclose(POUND(2).value, 0.90718474)
	arr = INCH([1, 2])
	assert np.allclose(arr.value, [2.54, 5.08])


def test_symbols_are_unique() -> None:
	seen = set()
	for u in CATALOG:
		for s in u.symbols:
			assert s not in seen
			seen.add(s)
	assert set(UNITS) == seen


def test_micro_has_ascii_alias() -> None:
	assert PREFIX_SYMBOLS["u"] is MICRO
	assert PREFIX_SYMBOLS["µ"] is MICRO


def test_lift_uses_scope_preferences() -> None:
	with preferences(l=Scale.pow10(-3)):
		q = METRE(2, lift=True)
	assert q.scale == Scale.pow10(-3)
	assert q.value == 2000
	assert METRE(2, lift=False).scale == Scale.IDENTITY
