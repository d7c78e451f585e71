"""
Top-level re-exports for dimscale: quantities tagged with a dimension and an
exact scale, checked and converted at every arithmetic step.

Subpackages:
	signatures  — Dim8, Scale, DimPattern, Signature
	conversion  — exact {2,3,5,π} factors and their application to storage
	coherence   — AddPolicy and the signature checker
	quantity    — Quantity, affine offsets, arithmetic, rescale and erasure
	generic     — dimension patterns, generic bounds, signature inference
	catalog     — units and SI prefixes
"""

from .errors import (
	QuantityError, DimensionMismatch, ScaleIncoherence, PrecisionLoss,
	AffineCombinationInvalid, Overflow, NonIntegralExponent,
)
from .signatures import Dim8, Scale, DimPattern, ANY, Signature, DIMLESS, UNITY
from .coherence import AddPolicy, CoherenceChecker
from .conversion import ConversionEngine, ScaleFactor
from .config import (
	EngineConfig, ScopePreferences,
	get_config, set_config, configure,
	get_preferences, set_preferences, preferences,
)
from .quantity import (
	AffineOffset, Quantity,
	rescale, convert, to_linear, from_linear, to_affine, lift,
	isclose,
	erase, erase_angle, ErasureRule,
)
from .generic import GenericDimension, GenericDimensionResolver, SignatureInference, generic
from .catalog import Unit, resolve

__all__ = [
	"QuantityError", "DimensionMismatch", "ScaleIncoherence", "PrecisionLoss",
	"AffineCombinationInvalid", "Overflow", "NonIntegralExponent",
	"Dim8", "Scale", "DimPattern", "ANY", "Signature", "DIMLESS", "UNITY",
	"AddPolicy", "CoherenceChecker",
	"ConversionEngine", "ScaleFactor",
	"EngineConfig", "ScopePreferences",
	"get_config", "set_config", "configure",
	"get_preferences", "set_preferences", "preferences",
	"AffineOffset", "Quantity",
	"rescale", "convert", "to_linear", "from_linear", "to_affine", "lift",
	"isclose",
	"erase", "erase_angle", "ErasureRule",
	"GenericDimension", "GenericDimensionResolver", "SignatureInference", "generic",
	"Unit", "resolve",
]
