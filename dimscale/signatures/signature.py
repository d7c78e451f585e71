"""
Signature pairs a dimension (Dim8) with a scale (Scale).

Multiplication, division and powers combine both halves axis-wise; they never
need a coherence check. Addition rules live in the coherence checker because
they depend on the active policy.
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from dimscale.signatures.dimension import Dim8, DIMLESS
from dimscale.signatures.scale import Scale


@dataclass(frozen=True)
class Signature:
	dim: Dim8 = DIMLESS
	scale: Scale = Scale.IDENTITY

	def __post_init__(self) -> None:
		if not isinstance(self.dim, Dim8):
			raise TypeError(f"Signature.dim must be a Dim8, got {type(self.dim).__name__}.")
		if not isinstance(self.scale, Scale):
			raise TypeError(f"Signature.scale must be a Scale, got {type(self.scale).__name__}.")

	def __mul__(self, other: "Signature") -> "Signature":
		return Signature(self.dim * other.dim, self.scale * other.scale)

	def __truediv__(self, other: "Signature") -> "Signature":
		return Signature(self.dim / other.dim, self.scale / other.scale)

	def __pow__(self, p: Union[int, Fraction]) -> "Signature":
		return Signature(self.dim ** p, self.scale ** p)

	def with_scale(self, scale: Scale) -> "Signature":
		return Signature(self.dim, scale)

	def describe(self) -> str:
		"""Plain rendering for exception messages: '[M L^2 T^-2] x 10^-3'."""
		return f"[{self.dim.pretty()}] x {self.scale.pretty()}"


DIMENSIONLESS = Signature()
