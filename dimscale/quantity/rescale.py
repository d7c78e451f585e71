"""
Rescaling quantities between scales of the same dimension.

  • rescale(q, scale)              → q stored at `scale`; affine points stay fixed
  • convert(q, signature)          → rescale after checking the dimension
  • to_linear(q, scale=None)       → drop the affine offset (e.g. °F → °R, then K)
  • from_linear(q, affine)         → attach an affine offset to a linear value
  • to_affine(q, affine, scale)    → re-express a temperature point in another family
  • lift(q, prefs=None)            → rescale to the scope's preferred scale
"""

from __future__ import annotations
from typing import Optional
import logging

from dimscale.config import ScopePreferences, get_config, get_preferences
from dimscale.conversion.engine import ENGINE
from dimscale.conversion.factor import ScaleFactor
from dimscale.errors import DimensionMismatch
from dimscale.quantity.affine import AffineOffset, shift
from dimscale.quantity.quantity import Quantity
from dimscale.signatures.scale import Scale
from dimscale.signatures.signature import Signature


logger = logging.getLogger(__name__)


def _lossy(lossy: Optional[bool]) -> bool:
	if lossy is None:
		return get_config().lossy
	return lossy


def rescale(q: Quantity, scale: Scale, lossy: Optional[bool] = None) -> Quantity:
	if not isinstance(scale, Scale):
		raise TypeError(f"rescale target must be a Scale, got {type(scale).__name__}")
	if q.scale == scale:
		return q
	lossy = _lossy(lossy)
	f = ScaleFactor.between(q.scale, scale)
	if q.affine is None:
		value = ENGINE.apply(q.value, f, lossy=lossy)
	else:
		linear = shift(q.value, q.affine.offset_in(q.scale), lossy=lossy)
		moved = ENGINE.apply(linear, f, lossy=lossy)
		value = shift(moved, -q.affine.offset_in(scale), lossy=lossy)
	logger.debug("rescale %s from %s to %s", q.dim.pretty(), q.scale.pretty(), scale.pretty())
	return Quantity(value, q.dim, scale, q.affine)


def convert(q: Quantity, target: Signature, lossy: Optional[bool] = None) -> Quantity:
	if not q.dim.same(target.dim):
		raise DimensionMismatch(
			f"Cannot convert {q.dim.pretty()} to {target.dim.pretty()}."
		)
	return rescale(q, target.scale, lossy=lossy)


def to_linear(q: Quantity, scale: Optional[Scale] = None, lossy: Optional[bool] = None) -> Quantity:
	"""Linear (offset-free) equivalent of q, optionally rescaled to `scale`."""
	lossy = _lossy(lossy)
	out = q
	if q.affine is not None:
		value = shift(q.value, q.affine.offset_in(q.scale), lossy=lossy)
		out = Quantity(value, q.dim, q.scale)
	if scale is not None:
		out = rescale(out, scale, lossy=lossy)
	return out


def from_linear(q: Quantity, affine: AffineOffset, lossy: Optional[bool] = None) -> Quantity:
	if q.affine is not None:
		raise ValueError("from_linear expects a linear quantity")
	value = shift(q.value, -affine.offset_in(q.scale), lossy=_lossy(lossy))
	return Quantity(value, q.dim, q.scale, affine)


def to_affine(
	q: Quantity,
	affine: Optional[AffineOffset],
	scale: Optional[Scale] = None,
	lossy: Optional[bool] = None,
) -> Quantity:
	"""The same temperature point expressed in another affine family (None for linear)."""
	if scale is None:
		scale = q.scale
	linear = to_linear(q, scale, lossy=lossy)
	if affine is None:
		return linear
	return from_linear(linear, affine, lossy=lossy)


def lift(q: Quantity, prefs: Optional[ScopePreferences] = None, lossy: Optional[bool] = None) -> Quantity:
	if prefs is None:
		prefs = get_preferences()
	return rescale(q, prefs.preferred_scale(q.dim), lossy=lossy)
