"""
Quantity arithmetic on top of the coherence checker and the conversion engine.

Each operation derives the result signature first, converts operands to it,
then combines values. Bare numbers act as dimensionless, unity-scale
quantities.

Affine rules:
  • affine - affine (same family)  → linear
  • affine ± linear, linear + affine → affine, offset kept in its reference scale
  • linear - affine, affine + affine, cross-family affine - affine → AffineCombinationInvalid
  • mul/div/pow/neg with any affine operand → AffineCombinationInvalid

Integer storage: division must be exact and powers must be non-negative
integers, otherwise PrecisionLoss (unless lossy, which truncates toward zero).
"""

from __future__ import annotations
from fractions import Fraction
from typing import Any, Optional, Union
import operator

import numpy as np

from dimscale.coherence.checker import CoherenceChecker
from dimscale.coherence.policy import AddPolicy
from dimscale.config import get_config
from dimscale.conversion import storage
from dimscale.errors import AffineCombinationInvalid, PrecisionLoss
from dimscale.quantity.quantity import Quantity
from dimscale.quantity.rescale import rescale


PowLike = Union[int, Fraction]

_COMPARATORS = {
	"<": operator.lt,
	"<=": operator.le,
	">": operator.gt,
	">=": operator.ge,
}


def _coerce(x: Any) -> Quantity:
	if isinstance(x, Quantity):
		return x
	return Quantity(x)


def _settings(policy: Optional[AddPolicy], lossy: Optional[bool]):
	cfg = get_config()
	if policy is None:
		policy = cfg.policy
	if lossy is None:
		lossy = cfg.lossy
	return AddPolicy(policy), lossy


def _aligned(a: Quantity, b: Quantity, policy: AddPolicy, lossy: bool):
	"""Derive the add/sub signature and bring both operands to its scale."""
	sig = CoherenceChecker(policy).add(a.signature, b.signature)
	return sig, rescale(a, sig.scale, lossy=lossy), rescale(b, sig.scale, lossy=lossy)


def add(a: Any, b: Any, policy: Optional[AddPolicy] = None, lossy: Optional[bool] = None) -> Quantity:
	a, b = _coerce(a), _coerce(b)
	policy, lossy = _settings(policy, lossy)
	if a.affine is not None and b.affine is not None:
		raise AffineCombinationInvalid("Two affine quantities cannot be added; subtract them or convert to linear.")
	sig, a2, b2 = _aligned(a, b, policy, lossy)
	affine = a.affine if a.affine is not None else b.affine
	return Quantity(a2.value + b2.value, sig.dim, sig.scale, affine)


def sub(a: Any, b: Any, policy: Optional[AddPolicy] = None, lossy: Optional[bool] = None) -> Quantity:
	a, b = _coerce(a), _coerce(b)
	policy, lossy = _settings(policy, lossy)
	if b.affine is not None and a.affine is None:
		raise AffineCombinationInvalid("A linear quantity minus an affine point is undefined.")
	if a.affine is not None and b.affine is not None and a.affine != b.affine:
		raise AffineCombinationInvalid(
			"Affine quantities of different families cannot be subtracted; convert one family first."
		)
	sig, a2, b2 = _aligned(a, b, policy, lossy)
	if b.affine is not None:
		# same family and same scale: the offsets cancel
		return Quantity(a2.value - b2.value, sig.dim, sig.scale)
	return Quantity(a2.value - b2.value, sig.dim, sig.scale, a.affine)


def _reject_affine(op: str, *qs: Quantity) -> None:
	for q in qs:
		if q.affine is not None:
			raise AffineCombinationInvalid(
				f"'{op}' is not defined on affine quantities; convert to the linear representation first."
			)


def mul(a: Any, b: Any) -> Quantity:
	a, b = _coerce(a), _coerce(b)
	_reject_affine("*", a, b)
	sig = CoherenceChecker().mul(a.signature, b.signature)
	return Quantity(a.value * b.value, sig.dim, sig.scale)


def div(a: Any, b: Any, lossy: Optional[bool] = None) -> Quantity:
	a, b = _coerce(a), _coerce(b)
	_reject_affine("/", a, b)
	_, lossy = _settings(None, lossy)
	sig = CoherenceChecker().div(a.signature, b.signature)
	return Quantity(_divide_values(a.value, b.value, lossy), sig.dim, sig.scale)


def _divide_values(x: Any, y: Any, lossy: bool) -> Any:
	if storage.storage_kind(x) != storage.INT or storage.storage_kind(y) != storage.INT:
		return x / y
	if storage.is_array(x) or storage.is_array(y):
		xa, ya = np.broadcast_arrays(np.asarray(x), np.asarray(y))
		if np.any(ya == 0):
			raise ZeroDivisionError("integer division by zero")
		if np.any(np.remainder(xa, ya) != 0):
			if not lossy:
				raise PrecisionLoss("Integer division is not exact; pass lossy=True to truncate.")
			return np.trunc(np.true_divide(xa, ya)).astype(np.result_type(xa, ya))
		return xa // ya
	q, r = storage.trunc_div(int(x), int(y))
	if r != 0 and not lossy:
		raise PrecisionLoss(f"{x} / {y} is not an integer; pass lossy=True to truncate.")
	if isinstance(x, np.integer) or isinstance(y, np.integer):
		return np.result_type(x, y).type(q)
	return q


def power(q: Any, p: PowLike, lossy: Optional[bool] = None) -> Quantity:
	q = _coerce(q)
	_reject_affine("**", q)
	if isinstance(p, bool) or not isinstance(p, (int, Fraction)):
		raise TypeError("Quantity powers must be int or Fraction")
	_, lossy = _settings(None, lossy)
	sig = CoherenceChecker().pow(q.signature, p)
	integral = isinstance(p, int) or p.denominator == 1
	if q.storage == storage.INT:
		if integral and p >= 0:
			value = q.value ** int(p)
		elif not lossy:
			raise PrecisionLoss(f"Integer storage raised to {p} is not exact; pass lossy=True to truncate.")
		else:
			value = _truncate_like(np.power(np.asarray(q.value, dtype=float), float(p)), q.value)
	elif integral:
		value = q.value ** int(p)
	else:
		value = q.value ** float(p)
	return Quantity(value, sig.dim, sig.scale)


def _truncate_like(values: Any, like: Any) -> Any:
	t = np.trunc(values)
	if storage.is_array(like):
		return t.astype(like.dtype)
	if isinstance(like, np.integer):
		return type(like)(t)
	return int(t)


def neg(q: Any) -> Quantity:
	q = _coerce(q)
	_reject_affine("neg", q)
	return Quantity(-q.value, q.dim, q.scale)


def compare(a: Any, b: Any, op: str, policy: Optional[AddPolicy] = None, lossy: Optional[bool] = None):
	"""Ordered comparison under the same coherence rules as addition."""
	a, b = _coerce(a), _coerce(b)
	policy, lossy = _settings(policy, lossy)
	if a.affine != b.affine:
		raise AffineCombinationInvalid("Only quantities of the same affine family can be compared.")
	_, a2, b2 = _aligned(a, b, policy, lossy)
	return _COMPARATORS[op](a2.value, b2.value)


def _as_float(q: Quantity) -> Quantity:
	if storage.is_array(q.value):
		return Quantity(np.asarray(q.value, dtype=float), q.dim, q.scale, q.affine)
	return Quantity(float(q.value), q.dim, q.scale, q.affine)


def isclose(a: Any, b: Any, rel_tol: Optional[float] = None, policy: Optional[AddPolicy] = None) -> bool:
	"""
	Equality up to a relative tolerance after aligning scales as addition does.

	Exact storage (int, Fraction) on both sides compares exactly. Otherwise the
	values must agree within rel_tol, which defaults to the active
	EngineConfig.float_tolerance.
	"""
	a, b = _coerce(a), _coerce(b)
	if a.affine != b.affine:
		return False
	cfg = get_config()
	policy = cfg.policy if policy is None else AddPolicy(policy)
	tol = cfg.float_tolerance if rel_tol is None else rel_tol
	if tol < 0:
		raise ValueError("rel_tol must be non-negative")
	if storage.storage_kind(a.value) != storage.FLOAT and storage.storage_kind(b.value) != storage.FLOAT:
		try:
			_, a2, b2 = _aligned(a, b, policy, False)
		except PrecisionLoss:
			# not representable at the common scale, so the values differ
			return False
		return a2 == b2
	_, a2, b2 = _aligned(_as_float(a), _as_float(b), policy, False)
	x = np.asarray(a2.value, dtype=float)
	y = np.asarray(b2.value, dtype=float)
	return bool(np.all(np.isclose(x, y, rtol=tol, atol=0.0)))
