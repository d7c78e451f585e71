"""
Unit catalogue: named units as (dimension, scale) constructors.

A Unit builds Quantities from raw numbers. Storage units (metre, gram, minute,
degree, ...) only tag the value with their scale, so integer storage stays
exact. Non-storage units (inch, pound, mile, ...) have no exact {2,3,5,π}
scale; their values are multiplied by `conversion_factor` and stored at the
nearest power-of-10 scale. Affine units (celsius, fahrenheit) attach an
AffineOffset.

Lookup by symbol tries an exact match first, then strips one SI prefix for
prefixable (metric) units only: resolve("km"), resolve("µs"), resolve("kPa").

Public API
----------
- Unit(name, symbols, dim, scale, conversion_factor, affine, prefixable)
  unit(value, lift=False) -> Quantity
  unit.prefixed(prefix) -> Unit
- UNITS: dict[str, Unit]
- resolve(symbol) -> Unit
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Any, Dict, Optional, Tuple, Union
import logging

import numpy as np

from dimscale.catalog.prefixes import KILO, PREFIXES, Prefix
from dimscale.quantity.affine import AffineOffset
from dimscale.quantity.quantity import Quantity
from dimscale.quantity.rescale import lift as lift_to_scope
from dimscale.signatures.dimension import DIMLESS, Dim8
from dimscale.signatures.scale import Scale


logger = logging.getLogger(__name__)

Factor = Union[int, float, Fraction]


@dataclass(frozen=True)
class Unit:
	name: str
	symbols: Tuple[str, ...]
	dim: Dim8
	scale: Scale = Scale.IDENTITY
	conversion_factor: Optional[Factor] = None
	affine: Optional[AffineOffset] = None
	prefixable: bool = False

	@property
	def symbol(self) -> str:
		return self.symbols[0]

	def __call__(self, value: Any, lift: bool = False) -> Quantity:
		if self.conversion_factor is not None:
			if isinstance(value, (list, tuple)):
				value = np.asarray(value)
			value = value * self.conversion_factor
		q = Quantity(value, self.dim, self.scale, self.affine)
		if lift:
			q = lift_to_scope(q)
		return q

	def prefixed(self, prefix: Prefix) -> "Unit":
		if not self.prefixable:
			raise ValueError(f"Unit '{self.name}' does not take SI prefixes")
		return replace(
			self,
			name=prefix.name + self.name,
			symbols=tuple(p + s for p in prefix.symbols for s in self.symbols),
			scale=self.scale * prefix.scale,
			prefixable=False,
		)


def _u(name, symbols, dim, scale=Scale.IDENTITY, factor=None, affine=None, prefixable=False) -> Unit:
	return Unit(name, tuple(symbols), dim, scale, factor, affine, prefixable)


# SI base units; the gram is the prefixable mass unit, so the kilogram is the identity scale
GRAM = _u("gram", ["g"], Dim8(m=1), Scale.pow10(-3), prefixable=True)
METRE = _u("metre", ["m"], Dim8(l=1), prefixable=True)
SECOND = _u("second", ["s"], Dim8(t=1), prefixable=True)
AMPERE = _u("ampere", ["A"], Dim8(i=1), prefixable=True)
KELVIN = _u("kelvin", ["K"], Dim8(th=1), prefixable=True)
MOLE = _u("mole", ["mol"], Dim8(n=1), prefixable=True)
CANDELA = _u("candela", ["cd"], Dim8(j=1), prefixable=True)
RADIAN = _u("radian", ["rad"], Dim8(a=1), prefixable=True)
KILOGRAM = GRAM.prefixed(KILO)

# derived SI units
HERTZ = _u("hertz", ["Hz"], Dim8(t=-1), prefixable=True)
NEWTON = _u("newton", ["N"], Dim8(m=1, l=1, t=-2), prefixable=True)
JOULE = _u("joule", ["J"], Dim8(m=1, l=2, t=-2), prefixable=True)
WATT = _u("watt", ["W"], Dim8(m=1, l=2, t=-3), prefixable=True)
PASCAL = _u("pascal", ["Pa"], Dim8(m=1, l=-1, t=-2), prefixable=True)
COULOMB = _u("coulomb", ["C"], Dim8(t=1, i=1), prefixable=True)
VOLT = _u("volt", ["V"], Dim8(m=1, l=2, t=-3, i=-1), prefixable=True)
OHM = _u("ohm", ["Ω", "ohm"], Dim8(m=1, l=2, t=-3, i=-2), prefixable=True)
FARAD = _u("farad", ["F"], Dim8(m=-1, l=-2, t=4, i=2), prefixable=True)
LITRE = _u("litre", ["L", "l"], Dim8(l=3), Scale.pow10(-3), prefixable=True)
BAR = _u("bar", ["bar"], Dim8(m=1, l=-1, t=-2), Scale.pow10(5), prefixable=True)
TONNE = _u("tonne", ["t"], Dim8(m=1), Scale.pow10(3))

# time
MINUTE = _u("minute", ["min"], Dim8(t=1), Scale.of(ten=1) * Scale.pow6(1))
HOUR = _u("hour", ["h"], Dim8(t=1), Scale.of(ten=2) * Scale.pow6(2))
DAY = _u("day", ["d"], Dim8(t=1), Scale.of(two=7, three=3, five=2))

# angles
DEGREE = _u("degree", ["deg", "°"], Dim8(a=1), Scale(-2, -2, -1, 1))
TURN = _u("turn", ["turn", "rev"], Dim8(a=1), Scale(1, 0, 0, 1))
GRADIAN = _u("gradian", ["gon", "grad"], Dim8(a=1), Scale(-3, 0, -2, 1))
ARCMINUTE = _u("arcminute", ["arcmin", "′"], Dim8(a=1), Scale(-4, -3, -2, 1))
ARCSECOND = _u("arcsecond", ["arcsec", "″"], Dim8(a=1), Scale(-6, -4, -3, 1))

# dimensionless
PERCENT = _u("percent", ["%"], DIMLESS, Scale.pow10(-2))
PPM = _u("ppm", ["ppm"], DIMLESS, Scale.pow10(-6))

# temperature
RANKINE_SCALE = Scale(0, -2, 1, 0)
RANKINE = _u("rankine", ["degR", "°R"], Dim8(th=1), RANKINE_SCALE)
CELSIUS = _u("celsius", ["degC", "°C"], Dim8(th=1), affine=AffineOffset(Fraction("273.15")))
FAHRENHEIT = _u(
	"fahrenheit", ["degF", "°F"], Dim8(th=1), RANKINE_SCALE,
	affine=AffineOffset(Fraction("459.67"), RANKINE_SCALE),
)

# imperial and nautical lengths and masses, stored at the nearest power of ten
INCH = _u("inch", ["in"], Dim8(l=1), Scale.pow10(-2), factor=2.54)
FOOT = _u("foot", ["ft"], Dim8(l=1), Scale.pow10(-1), factor=3.048)
YARD = _u("yard", ["yd"], Dim8(l=1), factor=0.9144)
MILE = _u("mile", ["mi"], Dim8(l=1), Scale.pow10(3), factor=1.609344)
NAUTICAL_MILE = _u("nautical_mile", ["nmi"], Dim8(l=1), Scale.pow10(3), factor=1.852)
POUND = _u("pound", ["lb"], Dim8(m=1), factor=0.45359237)
OUNCE = _u("ounce", ["oz"], Dim8(m=1), Scale.pow10(-2), factor=2.8349523125)


CATALOG: Tuple[Unit, ...] = (
	GRAM, METRE, SECOND, AMPERE, KELVIN, MOLE, CANDELA, RADIAN,
	HERTZ, NEWTON, JOULE, WATT, PASCAL, COULOMB, VOLT, OHM, FARAD, LITRE, BAR, TONNE,
	MINUTE, HOUR, DAY,
	DEGREE, TURN, GRADIAN, ARCMINUTE, ARCSECOND,
	PERCENT, PPM,
	RANKINE, CELSIUS, FAHRENHEIT,
	INCH, FOOT, YARD, MILE, NAUTICAL_MILE, POUND, OUNCE,
)


def _index(units) -> Dict[str, Unit]:
	out: Dict[str, Unit] = {}
	for u in units:
		for s in u.symbols:
			if s in out:
				raise ValueError(f"Duplicate unit symbol '{s}' ({out[s].name}, {u.name})")
			out[s] = u
	return out


UNITS: Dict[str, Unit] = _index(CATALOG)

# longest prefix symbols first so "da" wins over "d"
_PREFIX_ORDER = sorted(
	((s, p) for p in PREFIXES for s in p.symbols),
	key=lambda sp_: len(sp_[0]),
	reverse=True,
)


def resolve(symbol: str) -> Unit:
	"""Look a unit symbol up, stripping one SI prefix for prefixable units."""
	if symbol in UNITS:
		return UNITS[symbol]
	for psym, prefix in _PREFIX_ORDER:
		if not symbol.startswith(psym):
			continue
		base = UNITS.get(symbol[len(psym):])
		if base is not None and base.prefixable:
			logger.debug("resolved %s as %s + %s", symbol, prefix.name, base.name)
			return base.prefixed(prefix)
	raise ValueError(f"Unknown unit symbol: {symbol!r}")
