"""
Typed failures raised by the dimension/scale engine.

Every failure is raised by the operation that introduces it (construction or
combination), never deferred to a later use:

  • DimensionMismatch         — incompatible dimensions in add/sub or a cross-dimension conversion
  • ScaleIncoherence          — unequal scales under the strict add policy
  • PrecisionLoss             — non-exact integer-storage conversion without lossy opt-in
  • AffineCombinationInvalid  — multiply/divide/pow or an illegal add/sub on affine quantities
  • Overflow                  — a scale or dimension exponent outside its representable bounds
  • NonIntegralExponent       — a fractional power that would leave a non-integer exponent
"""

from __future__ import annotations


class QuantityError(ValueError):
	"""Base class for every failure raised by dimscale."""


class DimensionMismatch(QuantityError):
	pass


class ScaleIncoherence(QuantityError):
	pass


class PrecisionLoss(QuantityError):
	pass


class AffineCombinationInvalid(QuantityError):
	pass


class Overflow(QuantityError):
	pass


class NonIntegralExponent(QuantityError):
	pass


__all__ = [
	"QuantityError", "DimensionMismatch", "ScaleIncoherence", "PrecisionLoss",
	"AffineCombinationInvalid", "Overflow", "NonIntegralExponent",
]
