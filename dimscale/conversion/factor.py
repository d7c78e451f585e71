"""
ScaleFactor: the exact ratio between two scale signatures.

A factor is kept as an exact rational part (powers of 2, 3, 5) plus an
integer exponent of π, never as a float re-derived from earlier floats.

Provides:
  • ScaleFactor.between(src, dst)   — table lookup of the per-basis deltas
  • as_float()                      — at most four table floats multiplied together
  • is_identity, is_exact, is_integral
  • as_sympy()                      — exact symbolic value Rational * pi**k
  • symbolic_equal(expr)            — certificate that the factor equals expr exactly
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction

import sympy as sp

from dimscale.conversion import tables
from dimscale.signatures.scale import Scale


@dataclass(frozen=True)
class ScaleFactor:
	"""Multiply a value stored at `src` by this factor to store it at `dst`."""
	d2: int = 0
	d3: int = 0
	d5: int = 0
	dpi: int = 0

	@classmethod
	def between(cls, src: Scale, dst: Scale) -> "ScaleFactor":
		return cls(src.p2 - dst.p2, src.p3 - dst.p3, src.p5 - dst.p5, src.pi - dst.pi)

	@property
	def is_identity(self) -> bool:
		return self.d2 == 0 and self.d3 == 0 and self.d5 == 0 and self.dpi == 0

	@property
	def is_exact(self) -> bool:
		"""True when the factor is rational (no π component)."""
		return self.dpi == 0

	@property
	def ratio(self) -> Fraction:
		"""Exact rational part, looked up from the tables."""
		return tables.RATIONAL[2][self.d2] * tables.RATIONAL[3][self.d3] * tables.RATIONAL[5][self.d5]

	@property
	def is_integral(self) -> bool:
		return self.is_exact and self.d2 >= 0 and self.d3 >= 0 and self.d5 >= 0

	def as_float(self) -> float:
		out = tables.FLOAT[2][self.d2]
		if self.d3:
			out = out * tables.FLOAT[3][self.d3]
		if self.d5:
			out = out * tables.FLOAT[5][self.d5]
		if self.dpi:
			out = out * tables.FLOAT["pi"][self.dpi]
		return out

	def inverse(self) -> "ScaleFactor":
		return ScaleFactor(-self.d2, -self.d3, -self.d5, -self.dpi)

	def as_sympy(self) -> sp.Expr:
		r = self.ratio
		return sp.Rational(r.numerator, r.denominator) * sp.pi ** self.dpi

	def symbolic_equal(self, expr) -> bool:
		"""
		Return True iff simplify(factor - expr) is exactly zero (symbolic certificate).
		"""
		d = sp.simplify(self.as_sympy() - sp.sympify(expr))
		if d == 0:
			return True
		else:
			return False


IDENTITY_FACTOR = ScaleFactor()
