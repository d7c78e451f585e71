"""
Coherence checker (signature-level typing rules)

Class: CoherenceChecker
-----------------------
Validates and derives result signatures for the arithmetic operators:

  • add/sub : require equal dims (DimensionMismatch); the result scale is
              chosen by the AddPolicy (ScaleIncoherence under STRICT when the
              scales differ).
  • mul/div : always legal; dimension and scale exponents add/subtract.
  • pow     : dimension and scale exponents multiply by p; a rational p must
              leave every exponent integral (NonIntegralExponent).

Progress (totality): check() returns a single signature or a structured error
message and never raises for a QuantityError.

Public API
----------
- CoherenceChecker(policy)
- add / sub / mul / div / pow(...) -> Signature
- check(op, *operands) -> tuple[bool, Signature | None, str]
- resolve_scale(a, b, policy) -> Scale
"""

from __future__ import annotations
from fractions import Fraction
from typing import Optional, Tuple, Union
import logging

from dimscale.coherence.policy import AddPolicy
from dimscale.errors import DimensionMismatch, QuantityError, ScaleIncoherence
from dimscale.signatures.scale import Scale
from dimscale.signatures.signature import Signature


logger = logging.getLogger(__name__)

PowLike = Union[int, Fraction]


def resolve_scale(a: Scale, b: Scale, policy: AddPolicy = AddPolicy.STRICT) -> Scale:
	"""Pick the scale an add/sub result is stored in, or raise ScaleIncoherence."""
	if a == b:
		return a
	if policy is AddPolicy.STRICT:
		raise ScaleIncoherence(
			f"Scales {a.pretty()} and {b.pretty()} differ; rescale one operand explicitly."
		)
	if policy is AddPolicy.LEFT_HAND_WINS:
		chosen = a
	elif policy is AddPolicy.LARGEST_WINS:
		if a.magnitude() >= b.magnitude():
			chosen = a
		else:
			chosen = b
	elif policy is AddPolicy.SMALLEST_WINS:
		if a.magnitude() <= b.magnitude():
			chosen = a
		else:
			chosen = b
	else:
		raise ValueError(f"Unknown add policy: {policy!r}")
	logger.debug("policy %s reconciles %s and %s to %s", policy.value, a.pretty(), b.pretty(), chosen.pretty())
	return chosen


class CoherenceChecker:
	"""Single entry point for signature derivation under an add policy."""

	def __init__(self, policy: AddPolicy = AddPolicy.STRICT) -> None:
		self.policy = AddPolicy(policy)

	def add(self, a: Signature, b: Signature) -> Signature:
		"""
		Typing rule for addition:
		  • Dimensions must be identical.
		  • The result scale is whatever the policy picks.
		"""
		if not a.dim.same(b.dim):
			raise DimensionMismatch(
				f"Add/Sub requires equal dimensions: {a.dim.pretty()} vs {b.dim.pretty()}."
			)
		return Signature(a.dim, resolve_scale(a.scale, b.scale, self.policy))

	def sub(self, a: Signature, b: Signature) -> Signature:
		return self.add(a, b)

	def mul(self, a: Signature, b: Signature) -> Signature:
		return a * b

	def div(self, a: Signature, b: Signature) -> Signature:
		return a / b

	def pow(self, a: Signature, p: PowLike) -> Signature:
		return a ** p

	def check(self, op: str, *operands) -> Tuple[bool, Optional[Signature], str]:
		"""
		Returns (ok, signature, msg) instead of raising on incoherent operands.
		`op` is one of "add", "sub", "mul", "div", "pow".
		"""
		fn = {"add": self.add, "sub": self.sub, "mul": self.mul, "div": self.div, "pow": self.pow}.get(op)
		if fn is None:
			return False, None, f"unknown operation: {op}"
		try:
			sig = fn(*operands)
		except QuantityError as exc:
			return False, None, f"{type(exc).__name__}: {exc}"
		return True, sig, "ok"
