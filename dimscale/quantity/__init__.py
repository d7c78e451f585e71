from .affine import AffineOffset, AFFINE_DIMENSION
from .quantity import Quantity
from .rescale import rescale, convert, to_linear, from_linear, to_affine, lift
from .arithmetic import add, sub, mul, div, power, neg, compare, isclose
from .erasure import ErasureRule, erase, erase_angle, erase_scalar

__all__ = [
	"AffineOffset", "AFFINE_DIMENSION",
	"Quantity",
	"rescale", "convert", "to_linear", "from_linear", "to_affine", "lift",
	"add", "sub", "mul", "div", "power", "neg", "compare", "isclose",
	"ErasureRule", "erase", "erase_angle", "erase_scalar",
]
