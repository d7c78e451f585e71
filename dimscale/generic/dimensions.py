"""
Named dimensions and scale-generic dimension bounds.

GenericDimension is a disjunction of DimPatterns: a quantity satisfies it when
any pattern matches its Dim8, whatever its scale. The eight atomic generics
(MASS ... ANGLE) and a handful of derived ones are predefined.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple, Union

from dimscale.errors import DimensionMismatch
from dimscale.signatures.dimension import Dim8
from dimscale.signatures.pattern import DimPattern
from dimscale.signatures.signature import Signature


NAMED_DIMENSIONS: Dict[str, Dim8] = {
	"Mass": Dim8(m=1),
	"Length": Dim8(l=1),
	"Time": Dim8(t=1),
	"Current": Dim8(i=1),
	"Temperature": Dim8(th=1),
	"Amount": Dim8(n=1),
	"Luminosity": Dim8(j=1),
	"Angle": Dim8(a=1),
	"Dimensionless": Dim8(),
	"Area": Dim8(l=2),
	"Volume": Dim8(l=3),
	"Velocity": Dim8(l=1, t=-1),
	"Acceleration": Dim8(l=1, t=-2),
	"Frequency": Dim8(t=-1),
	"Force": Dim8(m=1, l=1, t=-2),
	"Energy": Dim8(m=1, l=2, t=-2),
	"Power": Dim8(m=1, l=2, t=-3),
	"Pressure": Dim8(m=1, l=-1, t=-2),
	"Charge": Dim8(t=1, i=1),
	"Voltage": Dim8(m=1, l=2, t=-3, i=-1),
	"Resistance": Dim8(m=1, l=2, t=-3, i=-2),
	"Capacitance": Dim8(m=-1, l=-2, t=4, i=2),
	"Density": Dim8(m=1, l=-3),
	"AngularVelocity": Dim8(t=-1, a=1),
}


Operand = Union["Quantity", Signature, Dim8]


def _dim_of(x) -> Dim8:
	if isinstance(x, Dim8):
		return x
	if isinstance(x, Signature):
		return x.dim
	dim = getattr(x, "dim", None)
	if isinstance(dim, Dim8):
		return dim
	raise TypeError(f"Expected a Quantity, Signature or Dim8, got {type(x).__name__}")


@dataclass(frozen=True)
class GenericDimension:
	"""A scale-generic dimension bound: any of `patterns`, at any scale."""
	name: str
	patterns: Tuple[DimPattern, ...]

	def __post_init__(self) -> None:
		if len(self.patterns) == 0:
			raise ValueError("GenericDimension needs at least one pattern")

	@classmethod
	def define(cls, name: str, *exprs: Union[str, DimPattern, Dim8], free: Iterable[str] = ()) -> "GenericDimension":
		"""Build from dimension expressions, e.g. define("Energy", "M * L^2 / T^2")."""
		free = tuple(free)
		pats = []
		for e in exprs:
			if isinstance(e, DimPattern):
				pats.append(e)
			elif isinstance(e, Dim8):
				pats.append(DimPattern.from_dim(e, free))
			else:
				pats.append(DimPattern.parse(e, free=free))
		return cls(name, tuple(pats))

	def matches(self, x: Operand) -> bool:
		dim = _dim_of(x)
		for p in self.patterns:
			if p.matches(dim):
				return True
		return False

	def require(self, x: Operand, what: str = "argument") -> Dim8:
		dim = _dim_of(x)
		if not self.matches(dim):
			raise DimensionMismatch(f"{what} has dimension {dim.pretty()}, expected {self.pretty()}.")
		return dim

	def pretty(self) -> str:
		alts = " | ".join(p.pretty() for p in self.patterns)
		return f"{self.name} ({alts})"


def _atomic(name: str) -> GenericDimension:
	return GenericDimension(name, (DimPattern.from_dim(NAMED_DIMENSIONS[name]),))


MASS = _atomic("Mass")
LENGTH = _atomic("Length")
TIME = _atomic("Time")
CURRENT = _atomic("Current")
TEMPERATURE = _atomic("Temperature")
AMOUNT = _atomic("Amount")
LUMINOSITY = _atomic("Luminosity")
ANGLE = _atomic("Angle")

DIMENSIONLESS = _atomic("Dimensionless")
AREA = _atomic("Area")
VOLUME = _atomic("Volume")
VELOCITY = _atomic("Velocity")
ACCELERATION = _atomic("Acceleration")
FORCE = _atomic("Force")
ENERGY = _atomic("Energy")
