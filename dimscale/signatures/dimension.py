"""
Class Dim8 models a dimension signature as an immutable 8-tuple over
(M, L, T, I, Θ, N, J, A): the seven SI base dimensions plus angle.
It supports the group-like arithmetic used by the coherence checker:

  • d1 * d2     → exponent-wise addition
  • d1 / d2     → exponent-wise subtraction
  • d.pow(p)    → scale by an int or rational p (must yield integers)
  • d ** p      → same as d.pow(p)
  • d1 + d2     → require equal dims; returns that same dim (addition typing rule)
  • d1 - d2     → require equal dims; returns that same dim (subtraction typing rule)
  • same, is_dimensionless, is_pure_angle, without_angle, to_tuple, pretty

Every exponent is bounded to [DIM_EXP_MIN, DIM_EXP_MAX]; leaving the bounds at
construction or combination raises Overflow.

The module also exposes base constants:
  DIMLESS, M, L, T, I, TH, N, J, A
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from fractions import Fraction
from typing import Tuple, Union

from dimscale.errors import DimensionMismatch, NonIntegralExponent, Overflow


DimTuple = Tuple[int, int, int, int, int, int, int, int]
PowLike = Union[int, Fraction]

DIM_EXP_MIN = -32
DIM_EXP_MAX = 32

AXES = ("m", "l", "t", "i", "th", "n", "j", "a")
AXIS_SYMBOLS = ("M", "L", "T", "I", "Θ", "N", "J", "A")
AXIS_NAMES = ("Mass", "Length", "Time", "Current", "Temperature", "Amount", "Luminosity", "Angle")


@dataclass(frozen=True)
class Dim8:
	"""Immutable dimension vector as Z^8 over bases (M, L, T, I, Θ, N, J, A)."""
	m: int = 0
	l: int = 0
	t: int = 0
	i: int = 0
	th: int = 0
	n: int = 0
	j: int = 0
	a: int = 0

	def __post_init__(self) -> None:
		for f in fields(self):
			v = getattr(self, f.name)
			if isinstance(v, bool) or not isinstance(v, int):
				raise TypeError(f"Dimension exponent '{f.name}' must be an int, got {type(v).__name__}.")
			if v < DIM_EXP_MIN or v > DIM_EXP_MAX:
				raise Overflow(
					f"Dimension exponent {f.name}={v} outside [{DIM_EXP_MIN}, {DIM_EXP_MAX}]."
				)

	@classmethod
	def from_tuple(cls, values) -> "Dim8":
		vals = tuple(values)
		if len(vals) != len(AXES):
			raise ValueError(f"Dimension tuple needs {len(AXES)} entries, got {len(vals)}.")
		return cls(*vals)

	def add(self, other: "Dim8") -> "Dim8":
		return Dim8.from_tuple(x + y for x, y in zip(self.to_tuple(), other.to_tuple()))

	def sub(self, other: "Dim8") -> "Dim8":
		return Dim8.from_tuple(x - y for x, y in zip(self.to_tuple(), other.to_tuple()))

	def scale_by(self, p: Fraction) -> "Dim8":
		if not isinstance(p, Fraction):
			p = Fraction(p)
		ints = []
		for v in self.to_tuple():
			w = v * p
			if w.denominator != 1:
				raise NonIntegralExponent(
					f"Power {p} leaves a non-integer exponent on dimension {self.pretty()}."
				)
			ints.append(int(w.numerator))
		return Dim8.from_tuple(ints)

	def pow(self, p: PowLike) -> "Dim8":
		if isinstance(p, bool):
			raise TypeError("pow expects int or Fraction")
		if isinstance(p, int):
			return self.scale_by(Fraction(p, 1))
		if isinstance(p, Fraction):
			return self.scale_by(p)
		raise TypeError("pow expects int or Fraction")

	def __mul__(self, other: "Dim8") -> "Dim8":
		return self.add(other)

	def __truediv__(self, other: "Dim8") -> "Dim8":
		return self.sub(other)

	def __pow__(self, p: PowLike) -> "Dim8":
		return self.pow(p)

	def __add__(self, other: "Dim8") -> "Dim8":
		if not self.same(other):
			raise DimensionMismatch(
				f"Dimension mismatch in '+': {self.pretty()} vs {other.pretty()}."
			)
		return self

	def __sub__(self, other: "Dim8") -> "Dim8":
		if not self.same(other):
			raise DimensionMismatch(
				f"Dimension mismatch in '-': {self.pretty()} vs {other.pretty()}."
			)
		return self

	def same(self, other: "Dim8") -> bool:
		return self.to_tuple() == other.to_tuple()

	def is_dimensionless(self) -> bool:
		return self.same(DIMLESS)

	def is_pure_angle(self) -> bool:
		"""True for A^n with n != 0 and every other axis zero."""
		return self.a != 0 and self.without_angle().is_dimensionless()

	def without_angle(self) -> "Dim8":
		return Dim8(self.m, self.l, self.t, self.i, self.th, self.n, self.j, 0)

	def to_tuple(self) -> DimTuple:
		return (self.m, self.l, self.t, self.i, self.th, self.n, self.j, self.a)

	def tuple(self) -> DimTuple:
		return self.to_tuple()

	def pretty(self) -> str:
		parts = []

		for b, e in zip(AXIS_SYMBOLS, self.to_tuple()):
			if e == 0:
				continue
			if e == 1:
				parts.append(b)
			else:
				parts.append(f"{b}^{e}")

		if not parts:
			return "1"
		else:
			return " ".join(parts)



DIMLESS = Dim8()
M = Dim8(m=1)
L = Dim8(l=1)
T = Dim8(t=1)
I = Dim8(i=1)
TH = Dim8(th=1)
N = Dim8(n=1)
J = Dim8(j=1)
A = Dim8(a=1)
