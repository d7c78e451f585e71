from .prefixes import Prefix, PREFIXES, PREFIX_SYMBOLS
from .units import (
	Unit, UNITS, CATALOG, resolve,
	GRAM, KILOGRAM, METRE, SECOND, AMPERE, KELVIN, MOLE, CANDELA, RADIAN,
	HERTZ, NEWTON, JOULE, WATT, PASCAL, COULOMB, VOLT, OHM, FARAD, LITRE, BAR, TONNE,
	MINUTE, HOUR, DAY,
	DEGREE, TURN, GRADIAN, ARCMINUTE, ARCSECOND,
	PERCENT, PPM,
	RANKINE_SCALE, RANKINE, CELSIUS, FAHRENHEIT,
	INCH, FOOT, YARD, MILE, NAUTICAL_MILE, POUND, OUNCE,
)

__all__ = [
	"Prefix", "PREFIXES", "PREFIX_SYMBOLS",
	"Unit", "UNITS", "CATALOG", "resolve",
	"GRAM", "KILOGRAM", "METRE", "SECOND", "AMPERE", "KELVIN", "MOLE", "CANDELA", "RADIAN",
	"HERTZ", "NEWTON", "JOULE", "WATT", "PASCAL", "COULOMB", "VOLT", "OHM", "FARAD", "LITRE", "BAR", "TONNE",
	"MINUTE", "HOUR", "DAY",
	"DEGREE", "TURN", "GRADIAN", "ARCMINUTE", "ARCSECOND",
	"PERCENT", "PPM",
	"RANKINE_SCALE", "RANKINE", "CELSIUS", "FAHRENHEIT",
	"INCH", "FOOT", "YARD", "MILE", "NAUTICAL_MILE", "POUND", "OUNCE",
]
