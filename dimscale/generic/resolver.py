"""
Call-time checking of scale-generic operations.

A generic operation is declared over dimension bounds (GenericDimension,
DimPattern, Dim8 or a dimension expression string). At each call the actual
arguments are checked against those bounds; the result signature is whatever
the operation's own arithmetic produces for the actual scales, so one
declaration serves every scale an argument can carry.

    @generic(LENGTH, TIME)
    def speed(d, t):
        return d / t

    speed(m(3), s(2))        # m/s
    speed(km(3), h(2))       # km/h, derived per call

Public API
----------
- as_generic(bound) -> GenericDimension
- GenericDimensionResolver(policy)
  .require(bound, q, what) -> Signature
  .bind(bounds, args) -> dict[str, Signature]
  .derive(expr, bounds, args) -> Signature
- generic(*arg_dims, returns=None, **kw_dims) -> decorator
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Union
import functools
import inspect
import logging

from dimscale.coherence.policy import AddPolicy
from dimscale.generic.dimensions import GenericDimension
from dimscale.generic.inference import SignatureInference
from dimscale.signatures.dimension import Dim8
from dimscale.signatures.pattern import DimPattern
from dimscale.signatures.signature import DIMENSIONLESS, Signature


logger = logging.getLogger(__name__)

Bound = Union[GenericDimension, DimPattern, Dim8, str]


def as_generic(bound: Bound) -> GenericDimension:
	if isinstance(bound, GenericDimension):
		return bound
	if isinstance(bound, DimPattern):
		return GenericDimension(bound.pretty(), (bound,))
	if isinstance(bound, Dim8):
		return GenericDimension(bound.pretty(), (DimPattern.from_dim(bound),))
	if isinstance(bound, str):
		return GenericDimension(bound, (DimPattern.parse(bound),))
	raise TypeError(f"Not a dimension bound: {bound!r}")


def _signature_of(x: Any) -> Signature:
	sig = getattr(x, "signature", None)
	if isinstance(sig, Signature):
		return sig
	if isinstance(x, Signature):
		return x
	# bare numbers enter quantity arithmetic as dimensionless at unity scale
	return DIMENSIONLESS


class GenericDimensionResolver:
	"""Checks actual arguments against generic bounds and derives result signatures."""

	def __init__(self, policy: AddPolicy = AddPolicy.STRICT) -> None:
		self.policy = AddPolicy(policy)

	def require(self, bound: Bound, x: Any, what: str = "argument") -> Signature:
		sig = _signature_of(x)
		as_generic(bound).require(sig, what)
		return sig

	def bind(self, bounds: Dict[str, Bound], args: Dict[str, Any]) -> Dict[str, Signature]:
		out: Dict[str, Signature] = {}
		for name, value in args.items():
			bound = bounds.get(name)
			if bound is None:
				out[name] = _signature_of(value)
			else:
				out[name] = self.require(bound, value, what=f"argument '{name}'")
		return out

	def derive(self, expr: str, bounds: Dict[str, Bound], args: Dict[str, Any]) -> Signature:
		"""Result signature of `expr` for these actual arguments, without computing values."""
		sigs = self.bind(bounds, args)
		result = SignatureInference(sigs, self.policy).infer(expr)
		logger.debug("derived %s for %s", result.describe(), expr)
		return result


def generic(*arg_dims: Optional[Bound], returns: Optional[Bound] = None, **kw_dims: Bound) -> Callable:
	"""
	Declare a function as generic over dimension bounds. Positional bounds
	apply to the leading parameters in order (None leaves one unconstrained);
	keyword bounds apply by parameter name. Violations raise DimensionMismatch
	at the call site.
	The wrapper exposes the normalized bounds by parameter name as
	__generic_bounds__.
	"""
	resolver = GenericDimensionResolver()

	def decorate(fn: Callable) -> Callable:
		params = list(inspect.signature(fn).parameters)
		if len(arg_dims) > len(params):
			raise TypeError(f"{fn.__name__} takes {len(params)} parameters, {len(arg_dims)} bounds given")
		bounds: Dict[str, Bound] = {}
		for name, bound in zip(params, arg_dims):
			if bound is not None:
				bounds[name] = as_generic(bound)
		for name, bound in kw_dims.items():
			if name not in params:
				raise TypeError(f"{fn.__name__} has no parameter '{name}'")
			bounds[name] = as_generic(bound)
		result_bound = as_generic(returns) if returns is not None else None
		fn_sig = inspect.signature(fn)

		@functools.wraps(fn)
		def wrapper(*args, **kwargs):
			bound_args = fn_sig.bind(*args, **kwargs)
			checked = {n: v for n, v in bound_args.arguments.items() if n in bounds}
			resolver.bind(bounds, checked)
			out = fn(*args, **kwargs)
			if result_bound is not None:
				resolver.require(result_bound, out, what=f"result of {fn.__name__}")
			return out

		wrapper.__generic_bounds__ = dict(bounds)
		return wrapper

	return decorate


