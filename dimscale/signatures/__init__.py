from .dimension import Dim8, DIMLESS, M, L, T, I, TH, N, J, A, DIM_EXP_MIN, DIM_EXP_MAX
from .scale import Scale, UNITY, P_EXP_MIN, P_EXP_MAX, PI_EXP_MIN, PI_EXP_MAX
from .pattern import DimPattern, ANY
from .signature import Signature, DIMENSIONLESS

__all__ = [
	"Dim8", "DIMLESS", "M", "L", "T", "I", "TH", "N", "J", "A", "DIM_EXP_MIN", "DIM_EXP_MAX",
	"Scale", "UNITY", "P_EXP_MIN", "P_EXP_MAX", "PI_EXP_MIN", "PI_EXP_MAX",
	"DimPattern", "ANY",
	"Signature", "DIMENSIONLESS",
]
