from .dimensions import (
	NAMED_DIMENSIONS, GenericDimension,
	MASS, LENGTH, TIME, CURRENT, TEMPERATURE, AMOUNT, LUMINOSITY, ANGLE,
	DIMENSIONLESS, AREA, VOLUME, VELOCITY, ACCELERATION, FORCE, ENERGY,
)
from .parsing import parse_dim, parse_pattern
from .inference import SignatureInference
from .resolver import GenericDimensionResolver, as_generic, generic

__all__ = [
	"NAMED_DIMENSIONS", "GenericDimension",
	"MASS", "LENGTH", "TIME", "CURRENT", "TEMPERATURE", "AMOUNT", "LUMINOSITY", "ANGLE",
	"DIMENSIONLESS", "AREA", "VOLUME", "VELOCITY", "ACCELERATION", "FORCE", "ENERGY",
	"parse_dim", "parse_pattern",
	"SignatureInference",
	"GenericDimensionResolver", "as_generic", "generic",
]
