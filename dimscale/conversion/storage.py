"""
Storage classification for quantity values.

A value's storage kind decides how scale factors are applied:

  • "int"      — Python int, numpy integer scalars and integer arrays (exact only)
  • "fraction" — fractions.Fraction (exact for rational factors)
  • "float"    — Python float/complex, numpy floating/complex scalars and arrays

bool and everything else is rejected with TypeError.
"""

from __future__ import annotations
from fractions import Fraction
from typing import Any

import numpy as np

from dimscale.errors import Overflow


INT = "int"
FRACTION = "fraction"
FLOAT = "float"


def storage_kind(value: Any) -> str:
	if isinstance(value, (bool, np.bool_)):
		raise TypeError("bool is not a supported quantity storage type")
	if isinstance(value, np.ndarray):
		kind = value.dtype.kind
		if kind in ("i", "u"):
			return INT
		if kind in ("f", "c"):
			return FLOAT
		raise TypeError(f"Unsupported array dtype for quantity storage: {value.dtype}")
	if isinstance(value, (int, np.integer)):
		return INT
	if isinstance(value, Fraction):
		return FRACTION
	if isinstance(value, (float, complex, np.floating, np.complexfloating)):
		return FLOAT
	raise TypeError(f"Unsupported quantity storage type: {type(value).__name__}")


def is_array(value: Any) -> bool:
	return isinstance(value, np.ndarray)


def is_integral_number(x: Any) -> bool:
	"""True when x is an int, an integer-valued Fraction, or an integer-valued finite float."""
	if isinstance(x, (bool, np.bool_)):
		return False
	if isinstance(x, (int, np.integer)):
		return True
	if isinstance(x, Fraction):
		return x.denominator == 1
	if isinstance(x, (float, np.floating)):
		return bool(np.isfinite(x)) and float(x).is_integer()
	return False


def trunc_div(num: int, den: int) -> tuple[int, int]:
	"""Integer division truncating toward zero; returns (quotient, remainder)."""
	q, r = divmod(abs(num), abs(den))
	if (num < 0) != (den < 0):
		q = -q
	if num < 0:
		r = -r
	return q, r


def restore_int_dtype(values: np.ndarray, like: Any):
	"""Cast exact Python-int results back to the integer type of `like`, checking range."""
	if isinstance(like, np.ndarray):
		dtype = like.dtype
	elif isinstance(like, np.integer):
		dtype = np.dtype(type(like))
	else:
		return values
	info = np.iinfo(dtype)
	flat = np.asarray(values, dtype=object).ravel()
	for v in flat:
		if v < info.min or v > info.max:
			raise Overflow(f"Converted value {v} does not fit storage dtype {dtype}")
	out = np.asarray(values, dtype=object).astype(dtype)
	if isinstance(like, np.ndarray):
		return out
	return dtype.type(out)
