"""
Class Scale models a scale signature: the exact multiplicative ratio of a
storage unit to the canonical base unit of its dimension, as exponents over
the constant basis (2, 3, 5, π).

Powers of 10 and 6 are accepted at construction and factorized into their
prime components (10 = 2·5, 6 = 2·3), so two independently derived scales
that denote the same physical multiple always carry the same vector.

  • s1 * s2     → exponent-wise addition
  • s1 / s2     → exponent-wise subtraction
  • s ** p      → scale by an int or rational p (must yield integers)
  • log10, ratio, magnitude, pretty

Exponent bounds: P_EXP_MIN..P_EXP_MAX for 2, 3, 5 and PI_EXP_MIN..PI_EXP_MAX
for π. Leaving them raises Overflow.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from fractions import Fraction
from typing import Optional, Tuple, Union
import math

from dimscale.errors import NonIntegralExponent, Overflow


ScaleTuple = Tuple[int, int, int, int]
PowLike = Union[int, Fraction]

P_EXP_MIN = -64
P_EXP_MAX = 64
PI_EXP_MIN = -8
PI_EXP_MAX = 8

BASIS = (2, 3, 5, math.pi)
_LOG_BASIS = tuple(math.log(b) for b in BASIS)


@dataclass(frozen=True)
class Scale:
	"""Immutable scale vector over the basis (2, 3, 5, π)."""
	p2: int = 0
	p3: int = 0
	p5: int = 0
	pi: int = 0

	def __post_init__(self) -> None:
		for f in fields(self):
			v = getattr(self, f.name)
			if isinstance(v, bool) or not isinstance(v, int):
				raise TypeError(f"Scale exponent '{f.name}' must be an int, got {type(v).__name__}.")
			if f.name == "pi":
				lo, hi = PI_EXP_MIN, PI_EXP_MAX
			else:
				lo, hi = P_EXP_MIN, P_EXP_MAX
			if v < lo or v > hi:
				raise Overflow(f"Scale exponent {f.name}={v} outside [{lo}, {hi}].")

	@classmethod
	def of(cls, two: int = 0, three: int = 0, five: int = 0, ten: int = 0, pi: int = 0) -> "Scale":
		"""Build a scale from exponents of 2, 3, 5, 10 and π; 10 is folded into 2 and 5."""
		return cls(two + ten, three, five + ten, pi)

	@classmethod
	def pow10(cls, n: int) -> "Scale":
		return cls(n, 0, n, 0)

	@classmethod
	def pow6(cls, n: int) -> "Scale":
		return cls(n, n, 0, 0)

	@classmethod
	def from_tuple(cls, values) -> "Scale":
		vals = tuple(values)
		if len(vals) != 4:
			raise ValueError(f"Scale tuple needs 4 entries, got {len(vals)}.")
		return cls(*vals)

	def mul(self, other: "Scale") -> "Scale":
		return Scale.from_tuple(x + y for x, y in zip(self.to_tuple(), other.to_tuple()))

	def div(self, other: "Scale") -> "Scale":
		return Scale.from_tuple(x - y for x, y in zip(self.to_tuple(), other.to_tuple()))

	def neg(self) -> "Scale":
		return Scale(-self.p2, -self.p3, -self.p5, -self.pi)

	def scale_by(self, p: PowLike) -> "Scale":
		if isinstance(p, bool) or not isinstance(p, (int, Fraction)):
			raise TypeError("pow expects int or Fraction")
		p = Fraction(p)
		ints = []
		for v in self.to_tuple():
			w = v * p
			if w.denominator != 1:
				raise NonIntegralExponent(f"Power {p} leaves a non-integer exponent on scale {self.pretty()}.")
			ints.append(int(w.numerator))
		return Scale.from_tuple(ints)

	def __mul__(self, other: "Scale") -> "Scale":
		return self.mul(other)

	def __truediv__(self, other: "Scale") -> "Scale":
		return self.div(other)

	def __pow__(self, p: PowLike) -> "Scale":
		return self.scale_by(p)

	def is_identity(self) -> bool:
		return self.to_tuple() == (0, 0, 0, 0)

	def log10(self) -> Optional[int]:
		"""Return n when this scale is exactly 10^n, else None."""
		if self.p2 == self.p5 and self.p3 == 0 and self.pi == 0:
			return self.p2
		return None

	@property
	def ratio(self) -> Fraction:
		"""Exact rational part 2^p2 · 3^p3 · 5^p5 (π excluded)."""
		return Fraction(2) ** self.p2 * Fraction(3) ** self.p3 * Fraction(5) ** self.p5

	def magnitude(self) -> float:
		"""Natural log of the absolute base-unit multiple; orders scales without overflow."""
		total = 0.0
		for e, lb in zip(self.to_tuple(), _LOG_BASIS):
			total += e * lb
		return total

	def to_tuple(self) -> ScaleTuple:
		return (self.p2, self.p3, self.p5, self.pi)

	def pretty(self) -> str:
		p10 = self.log10()
		if p10 is not None:
			if p10 == 0:
				return "1"
			return f"10^{p10}"
		parts = []
		for b, e in zip(("2", "3", "5", "π"), self.to_tuple()):
			if e == 0:
				continue
			if e == 1:
				parts.append(b)
			else:
				parts.append(f"{b}^{e}")
		return "·".join(parts)


Scale.IDENTITY = Scale()
UNITY = Scale.IDENTITY
