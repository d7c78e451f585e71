"""
Quantity: a numeric value tagged with a dimension signature, a scale signature
and, for affine units only, an AffineOffset.

Quantities are immutable. Array values are copied and frozen at construction.
Operators delegate to dimscale.quantity.arithmetic and pick up the active
EngineConfig (add policy, lossy opt-in) at call time.
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Optional, Union

import numpy as np

from dimscale.conversion import storage
from dimscale.errors import AffineCombinationInvalid
from dimscale.quantity.affine import AffineOffset, allows_affine
from dimscale.signatures.dimension import DIMLESS, Dim8
from dimscale.signatures.pattern import DimPattern
from dimscale.signatures.scale import Scale
from dimscale.signatures.signature import Signature


@dataclass(frozen=True, eq=False)
class Quantity:
	value: Any
	dim: Dim8 = DIMLESS
	scale: Scale = Scale.IDENTITY
	affine: Optional[AffineOffset] = None

	# numpy defers binary operators to Quantity instead of broadcasting over it
	__array_ufunc__ = None

	def __post_init__(self) -> None:
		if isinstance(self.dim, DimPattern):
			raise TypeError("A Quantity needs a concrete Dim8; dimension patterns are only valid in generic contexts.")
		if not isinstance(self.dim, Dim8):
			raise TypeError(f"Quantity.dim must be a Dim8, got {type(self.dim).__name__}.")
		if not isinstance(self.scale, Scale):
			raise TypeError(f"Quantity.scale must be a Scale, got {type(self.scale).__name__}.")
		if isinstance(self.value, (list, tuple)):
			object.__setattr__(self, "value", np.asarray(self.value))
		storage.storage_kind(self.value)
		if storage.is_array(self.value):
			frozen = np.array(self.value, copy=True)
			frozen.setflags(write=False)
			object.__setattr__(self, "value", frozen)
		if self.affine is not None:
			if not isinstance(self.affine, AffineOffset):
				raise TypeError("Quantity.affine must be an AffineOffset or None")
			if not allows_affine(self.dim):
				raise AffineCombinationInvalid(
					f"Only the pure temperature dimension may carry an affine offset, not {self.dim.pretty()}."
				)

	@property
	def signature(self) -> Signature:
		return Signature(self.dim, self.scale)

	@property
	def is_affine(self) -> bool:
		return self.affine is not None

	@property
	def storage(self) -> str:
		return storage.storage_kind(self.value)

	def same_signature(self, other: "Quantity") -> bool:
		return self.signature == other.signature and self.affine == other.affine

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Quantity):
			return NotImplemented
		if not self.same_signature(other):
			return False
		if storage.is_array(self.value) or storage.is_array(other.value):
			return bool(np.array_equal(self.value, other.value))
		return bool(self.value == other.value)

	__hash__ = None

	def __repr__(self) -> str:
		tail = ""
		if self.affine is not None:
			tail = f", affine={self.affine.offset}@{self.affine.reference.pretty()}"
		return f"Quantity({self.value!r}, {self.signature.describe()}{tail})"

	def rescale(self, scale: Scale, lossy: Optional[bool] = None) -> "Quantity":
		from dimscale.quantity.rescale import rescale
		return rescale(self, scale, lossy=lossy)

	def to_linear(self, scale: Optional[Scale] = None) -> "Quantity":
		from dimscale.quantity.rescale import to_linear
		return to_linear(self, scale)

	def erase(self, lossy: Optional[bool] = None):
		from dimscale.quantity import erasure
		return erasure.erase(self, lossy=lossy)

	def __float__(self) -> float:
		from dimscale.quantity import erasure
		return float(erasure.erase_scalar(self))

	def __add__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.add(self, other)

	def __radd__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.add(other, self)

	def __sub__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.sub(self, other)

	def __rsub__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.sub(other, self)

	def __mul__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.mul(self, other)

	def __rmul__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.mul(other, self)

	def __truediv__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.div(self, other)

	def __rtruediv__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.div(other, self)

	def __pow__(self, p: Union[int, Fraction]):
		from dimscale.quantity import arithmetic
		return arithmetic.power(self, p)

	def isclose(self, other, rel_tol: Optional[float] = None) -> bool:
		from dimscale.quantity import arithmetic
		return arithmetic.isclose(self, other, rel_tol)

	def __neg__(self):
		from dimscale.quantity import arithmetic
		return arithmetic.neg(self)

	def __lt__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.compare(self, other, "<")

	def __le__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.compare(self, other, "<=")

	def __gt__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.compare(self, other, ">")

	def __ge__(self, other):
		from dimscale.quantity import arithmetic
		return arithmetic.compare(self, other, ">=")
