"""
Erasure: collapsing a quantity to a bare number at the boundary to plain numerics.

  • dimensionless  → rescaled to unity, then the raw value is returned
  • pure angle A^n → rescaled to radians, then the raw value is returned
  • compound with a nonzero angle axis → only the angle is erased; the π
    component of the scale is folded into the value and the remaining axes
    keep their residual scale (rad/s → 1/s, rad/m · m²/s² → m/s²)
  • anything else → DimensionMismatch
"""

from __future__ import annotations
from typing import Any, Optional, Union

from dimscale.config import get_config
from dimscale.conversion.engine import ENGINE
from dimscale.conversion.factor import ScaleFactor
from dimscale.errors import DimensionMismatch
from dimscale.quantity.quantity import Quantity
from dimscale.signatures.dimension import Dim8
from dimscale.signatures.scale import Scale
from dimscale.signatures.signature import Signature


class ErasureRule:
	"""Decides the canonical scale a signature is rescaled to before erasure."""

	@staticmethod
	def is_erasable(dim: Dim8) -> bool:
		return dim.is_dimensionless() or dim.is_pure_angle()

	@staticmethod
	def canonical_scale(dim: Dim8) -> Scale:
		"""Unity for dimensionless signatures, radian for pure angles (both the identity scale)."""
		if not ErasureRule.is_erasable(dim):
			raise DimensionMismatch(f"Dimension {dim.pretty()} cannot be erased to a bare number.")
		return Scale.IDENTITY

	def erase(self, q: Quantity, lossy: bool = False) -> Union[Any, Quantity]:
		if self.is_erasable(q.dim):
			target = Signature(q.dim, self.canonical_scale(q.dim))
			return ENGINE.apply(q.value, ENGINE.factor(q.signature, target), lossy=lossy)
		if q.dim.a != 0:
			return self.erase_angle(q, lossy=lossy)
		raise DimensionMismatch(f"Dimension {q.dim.pretty()} cannot be erased to a bare number.")

	def erase_angle(self, q: Quantity, lossy: bool = False) -> Quantity:
		"""Drop the angle axis, folding the π part of the scale into the value."""
		if q.dim.a == 0:
			return q
		value = ENGINE.apply(q.value, ScaleFactor(dpi=q.scale.pi), lossy=lossy)
		residual = Scale(q.scale.p2, q.scale.p3, q.scale.p5, 0)
		return Quantity(value, q.dim.without_angle(), residual)


RULE = ErasureRule()


def _lossy(lossy: Optional[bool]) -> bool:
	if lossy is None:
		return get_config().lossy
	return lossy


def erase(q: Quantity, lossy: Optional[bool] = None):
	return RULE.erase(q, lossy=_lossy(lossy))


def erase_angle(q: Quantity, lossy: Optional[bool] = None) -> Quantity:
	return RULE.erase_angle(q, lossy=_lossy(lossy))


def erase_scalar(q: Quantity, lossy: Optional[bool] = None) -> Any:
	"""Like erase(), but only for signatures that collapse to a bare number."""
	if not RULE.is_erasable(q.dim):
		raise DimensionMismatch(f"Dimension {q.dim.pretty()} cannot be erased to a bare number.")
	return RULE.erase(q, lossy=_lossy(lossy))
