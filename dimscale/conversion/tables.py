"""
Read-only lookup tables for scale conversion factors.

One entry per supported exponent delta of each basis element:

  • RATIONAL[b][k] = b**k as an exact Fraction, b in (2, 3, 5), |k| <= P_DELTA_MAX
  • FLOAT[b][k]    = nearest float to b**k, b in (2, 3, 5, "pi"), |k| <= *_DELTA_MAX

Deltas span twice the signature bounds because a factor is taken between two
in-bounds scales. Built once at import and never modified afterwards.
"""

from __future__ import annotations
from fractions import Fraction
from types import MappingProxyType
from typing import Dict, Mapping, Union

import sympy as sp

from dimscale.signatures.scale import P_EXP_MAX, P_EXP_MIN, PI_EXP_MAX, PI_EXP_MIN


P_DELTA_MAX = P_EXP_MAX - P_EXP_MIN
PI_DELTA_MAX = PI_EXP_MAX - PI_EXP_MIN

PRIMES = (2, 3, 5)

BasisKey = Union[int, str]


def _rational_table(base: int) -> Mapping[int, Fraction]:
	table: Dict[int, Fraction] = {}
	for k in range(-P_DELTA_MAX, P_DELTA_MAX + 1):
		table[k] = Fraction(base) ** k
	return MappingProxyType(table)


def _float_table_from(rationals: Mapping[int, Fraction]) -> Mapping[int, float]:
	# float(Fraction) rounds once, so every entry is the nearest double
	table: Dict[int, float] = {}
	for k, v in rationals.items():
		table[k] = float(v)
	return MappingProxyType(table)


def _pi_table() -> Mapping[int, float]:
	table: Dict[int, float] = {}
	for k in range(-PI_DELTA_MAX, PI_DELTA_MAX + 1):
		table[k] = float(sp.N(sp.pi ** k, 40))
	return MappingProxyType(table)


RATIONAL: Mapping[int, Mapping[int, Fraction]] = MappingProxyType({
	p: _rational_table(p) for p in PRIMES
})

FLOAT: Mapping[BasisKey, Mapping[int, float]] = MappingProxyType({
	2: _float_table_from(RATIONAL[2]),
	3: _float_table_from(RATIONAL[3]),
	5: _float_table_from(RATIONAL[5]),
	"pi": _pi_table(),
})
