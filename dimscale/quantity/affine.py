"""
Affine offsets for units whose zero point differs from their linear reference
(celsius, fahrenheit).

An AffineOffset is (offset, reference): `offset` is expressed in units of the
`reference` scale. For a quantity stored at scale s, the linear value in s is

	value + offset * factor(reference -> s)

Only the pure temperature dimension may carry an offset.
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Union

import numpy as np

from dimscale.conversion import storage
from dimscale.conversion.factor import ScaleFactor
from dimscale.errors import PrecisionLoss
from dimscale.signatures.dimension import TH, Dim8
from dimscale.signatures.scale import Scale


Offset = Union[int, float, Fraction]

AFFINE_DIMENSION = TH


@dataclass(frozen=True)
class AffineOffset:
	offset: Offset
	reference: Scale = Scale.IDENTITY

	def __post_init__(self) -> None:
		if storage.is_array(self.offset):
			raise TypeError("AffineOffset.offset must be a scalar")
		storage.storage_kind(self.offset)
		if not isinstance(self.reference, Scale):
			raise TypeError("AffineOffset.reference must be a Scale")

	def offset_in(self, scale: Scale) -> Offset:
		"""The offset re-expressed in units of `scale`."""
		f = ScaleFactor.between(self.reference, scale)
		if f.is_identity:
			return self.offset
		if f.is_exact and not isinstance(self.offset, (float, np.floating)):
			return Fraction(self.offset) * f.ratio
		return float(self.offset) * f.as_float()


def allows_affine(dim: Dim8) -> bool:
	return dim.same(AFFINE_DIMENSION)


def shift(value: Any, amount: Offset, lossy: bool = False) -> Any:
	"""value + amount, keeping the storage kind of `value`."""
	kind = storage.storage_kind(value)
	if kind == storage.INT:
		if storage.is_integral_number(amount):
			return value + int(amount)
		if not lossy:
			raise PrecisionLoss(f"Offset {amount} is not integral; integer storage needs lossy=True.")
		moved = np.trunc(value + float(amount))
		if storage.is_array(value):
			return moved.astype(value.dtype)
		if isinstance(value, np.integer):
			return type(value)(moved)
		return int(moved)
	if kind == storage.FRACTION:
		return value + Fraction(amount)
	return value + float(amount)
