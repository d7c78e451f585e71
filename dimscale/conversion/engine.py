"""
ConversionEngine: exact scale conversion between signatures of equal dimension.

  • factor(src, dst)               → ScaleFactor; DimensionMismatch if dimensions differ
  • apply(value, factor, lossy)    → value multiplied by the factor under storage rules
  • convert(value, src, dst, lossy) → factor + apply in one call

Storage rules:
  • int storage must land on an exact integer; otherwise PrecisionLoss, unless
    lossy=True, in which case the result is truncated toward zero. A π
    component is never exact for integers.
  • Fraction storage is multiplied by the exact ratio; a π component needs lossy.
  • float storage receives a single multiplication by the tabled factor.

Module-level functions proxy to a shared, stateless ConversionEngine.
"""

from __future__ import annotations
from fractions import Fraction
from typing import Any
import logging

import numpy as np

from dimscale.conversion import storage
from dimscale.conversion.factor import ScaleFactor
from dimscale.errors import DimensionMismatch, PrecisionLoss
from dimscale.signatures.signature import Signature


logger = logging.getLogger(__name__)


class ConversionEngine:
	"""Stateless; every table it reads is a process-wide constant."""

	def factor(self, src: Signature, dst: Signature) -> ScaleFactor:
		if not src.dim.same(dst.dim):
			raise DimensionMismatch(
				f"Cannot convert between dimensions {src.dim.pretty()} and {dst.dim.pretty()}."
			)
		return ScaleFactor.between(src.scale, dst.scale)

	def convert(self, value: Any, src: Signature, dst: Signature, lossy: bool = False) -> Any:
		f = self.factor(src, dst)
		if not f.is_identity:
			logger.debug("convert %s -> %s (factor %s)", src.describe(), dst.describe(), f.as_sympy())
		return self.apply(value, f, lossy=lossy)

	def apply(self, value: Any, factor: ScaleFactor, lossy: bool = False) -> Any:
		kind = storage.storage_kind(value)
		if factor.is_identity:
			return value
		if kind == storage.INT:
			return self._apply_int(value, factor, lossy)
		if kind == storage.FRACTION:
			return self._apply_fraction(value, factor, lossy)
		return value * factor.as_float()

	def _apply_fraction(self, value: Fraction, factor: ScaleFactor, lossy: bool):
		if factor.is_exact:
			return value * factor.ratio
		if not lossy:
			raise PrecisionLoss(
				f"Factor {factor.as_sympy()} is irrational; Fraction storage needs lossy=True."
			)
		return float(value) * factor.as_float()

	def _apply_int(self, value: Any, factor: ScaleFactor, lossy: bool):
		if not factor.is_exact and not lossy:
			raise PrecisionLoss(
				f"Factor {factor.as_sympy()} is irrational; integer storage needs lossy=True."
			)
		if storage.is_array(value):
			results = []
			for v in value.ravel():
				results.append(self._scale_int(int(v), factor, lossy))
			out = np.empty(len(results), dtype=object)
			out[:] = results
			return storage.restore_int_dtype(out.reshape(value.shape), value)
		result = self._scale_int(int(value), factor, lossy)
		if isinstance(value, np.integer):
			return storage.restore_int_dtype(np.asarray(result, dtype=object), value)
		return result

	def _scale_int(self, v: int, factor: ScaleFactor, lossy: bool) -> int:
		if not factor.is_exact:
			return int(v * factor.as_float())
		r = factor.ratio
		q, rem = storage.trunc_div(v * r.numerator, r.denominator)
		if rem != 0 and not lossy:
			raise PrecisionLoss(
				f"{v} x {r} is not an integer; pass lossy=True to truncate."
			)
		return q


ENGINE = ConversionEngine()


def factor(src: Signature, dst: Signature) -> ScaleFactor:
	return ENGINE.factor(src, dst)


def apply(value: Any, f: ScaleFactor, lossy: bool = False) -> Any:
	return ENGINE.apply(value, f, lossy=lossy)


def convert(value: Any, src: Signature, dst: Signature, lossy: bool = False) -> Any:
	return ENGINE.convert(value, src, dst, lossy=lossy)
