"""
Dimension patterns used as bounds for scale-polymorphic operations.

A DimPattern has the same eight axes as Dim8, but any axis may be the
wildcard ANY ("unbound"). Patterns exist only in generic contexts; a
constructed Quantity always carries a concrete Dim8.

  • p.matches(dim) → True iff every non-wildcard axis equals dim's axis
  • p1 * p2, p1 / p2, p ** n → axis-wise combination; ANY absorbs
  • DimPattern.parse("M * L^2 / T^2", free=("A",)) → sympy-backed parsing
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from fractions import Fraction
from typing import Iterable, Tuple, Union

from dimscale.signatures.dimension import AXES, AXIS_NAMES, AXIS_SYMBOLS, Dim8


class _Unbound:
	"""Wildcard sentinel; matches any concrete exponent."""

	_instance = None

	def __new__(cls):
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def __repr__(self) -> str:
		return "ANY"

	def __reduce__(self):
		return (_Unbound, ())


ANY = _Unbound()

AxisValue = Union[int, _Unbound]


@dataclass(frozen=True)
class DimPattern:
	"""Dimension vector whose axes are integers or the ANY wildcard."""
	m: AxisValue = 0
	l: AxisValue = 0
	t: AxisValue = 0
	i: AxisValue = 0
	th: AxisValue = 0
	n: AxisValue = 0
	j: AxisValue = 0
	a: AxisValue = 0

	def __post_init__(self) -> None:
		for f in fields(self):
			v = getattr(self, f.name)
			if v is ANY:
				continue
			if isinstance(v, bool) or not isinstance(v, int):
				raise TypeError(f"Pattern axis '{f.name}' must be an int or ANY, got {type(v).__name__}.")

	@classmethod
	def from_dim(cls, dim: Dim8, free: Iterable[str] = ()) -> "DimPattern":
		vals = list(dim.to_tuple())
		for name in free:
			vals[_axis_index(name)] = ANY
		return cls(*vals)

	@classmethod
	def parse(cls, expr: str, free: Iterable[str] = ()) -> "DimPattern":
		from dimscale.generic.parsing import parse_pattern
		return parse_pattern(expr, free=free)

	def to_tuple(self) -> Tuple[AxisValue, ...]:
		return (self.m, self.l, self.t, self.i, self.th, self.n, self.j, self.a)

	def is_concrete(self) -> bool:
		return all(v is not ANY for v in self.to_tuple())

	def to_dim(self) -> Dim8:
		if not self.is_concrete():
			raise ValueError(f"Pattern {self.pretty()} has unbound axes.")
		return Dim8.from_tuple(self.to_tuple())

	def matches(self, dim: Dim8) -> bool:
		for want, got in zip(self.to_tuple(), dim.to_tuple()):
			if want is ANY:
				continue
			if want != got:
				return False
		return True

	def _combine(self, other: "DimPattern", sign: int) -> "DimPattern":
		if isinstance(other, Dim8):
			other = DimPattern.from_dim(other)
		vals = []
		for x, y in zip(self.to_tuple(), other.to_tuple()):
			if x is ANY or y is ANY:
				vals.append(ANY)
			else:
				vals.append(x + sign * y)
		return DimPattern(*vals)

	def __mul__(self, other: "DimPattern") -> "DimPattern":
		return self._combine(other, 1)

	def __truediv__(self, other: "DimPattern") -> "DimPattern":
		return self._combine(other, -1)

	def __pow__(self, p: Union[int, Fraction]) -> "DimPattern":
		if isinstance(p, bool) or not isinstance(p, (int, Fraction)):
			raise TypeError("pow expects int or Fraction")
		vals = []
		for v in self.to_tuple():
			if v is ANY:
				vals.append(ANY)
				continue
			w = Fraction(v) * p
			if w.denominator != 1:
				raise ValueError(f"Power {p} leaves a non-integer exponent on pattern {self.pretty()}.")
			vals.append(int(w))
		return DimPattern(*vals)

	def pretty(self) -> str:
		parts = []
		for b, e in zip(AXIS_SYMBOLS, self.to_tuple()):
			if e is ANY:
				parts.append(f"{b}^*")
			elif e == 0:
				continue
			elif e == 1:
				parts.append(b)
			else:
				parts.append(f"{b}^{e}")
		if not parts:
			return "1"
		return " ".join(parts)


def _axis_index(name: str) -> int:
	if name in AXES:
		return AXES.index(name)
	if name in AXIS_SYMBOLS:
		return AXIS_SYMBOLS.index(name)
	if name in AXIS_NAMES:
		return AXIS_NAMES.index(name)
	aliases = {"Th": 4, "Cd": 6}
	if name in aliases:
		return aliases[name]
	raise ValueError(f"Unknown dimension axis: {name}")
