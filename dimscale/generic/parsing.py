"""
Dimension-expression parser for DimPattern.parse.

Accepted grammar (sympy-backed):
  • symbols: axis symbols (M L T I Θ/Th N J/Cd A), axis names (Mass, Length, ...)
	and the named derived dimensions in NAMED_DIMENSIONS (Area, Force, ...)
  • operators: *, /, ** or ^, and '.' as UCUM-style multiplication
  • UCUM exponent suffixes: "L2.T-1" reads as L^2 * T^-1
  • integer literals act as dimensionless coefficients; "1" is dimensionless
  • sums and differences are allowed only between equal dimensions; the
	expression is parsed unevaluated, so "L - L" is L rather than zero

Anything else (functions, float or fractional literals, unknown symbols,
sums of different dimensions) raises ValueError.

Public API
----------
- parse_dim(expr: str) -> Dim8
- parse_pattern(expr: str, free: Iterable[str] = ()) -> DimPattern
"""

from __future__ import annotations
from fractions import Fraction
from typing import Dict, Iterable
import re

import sympy as sp

from dimscale.errors import NonIntegralExponent
from dimscale.generic.dimensions import NAMED_DIMENSIONS
from dimscale.signatures.dimension import AXIS_SYMBOLS, Dim8
from dimscale.signatures.pattern import DimPattern


_UCUM_DOT = re.compile(r"(?<=[\w)])\s*\.\s*(?=[^\W\d]|\()")
_UCUM_SUFFIX = re.compile(r"\b([^\W\d_]+)(-?\d+)\b")


def _symbol_table() -> Dict[str, Dim8]:
	table: Dict[str, Dim8] = {}
	for idx, sym in enumerate(AXIS_SYMBOLS):
		vals = [0] * 8
		vals[idx] = 1
		table[sym] = Dim8.from_tuple(vals)
	table["Th"] = Dim8(th=1)
	table["Cd"] = Dim8(j=1)
	table.update(NAMED_DIMENSIONS)
	return table


_SYMBOLS: Dict[str, Dim8] = _symbol_table()


def _namespace() -> Dict[str, object]:
	return {name: sp.Symbol(name) for name in _SYMBOLS}


def _normalize(expr: str) -> str:
	s = (expr or "").strip()
	if not s:
		raise ValueError("Empty dimension expression")
	s = s.replace("^", "**").replace("·", "*")
	s = _UCUM_DOT.sub("*", s)
	s = _UCUM_SUFFIX.sub(r"\1**(\2)", s)
	return s


def sympify_dim(expr: str) -> sp.Expr:
	s = _normalize(expr)
	try:
		e = sp.sympify(s, locals=_namespace(), convert_xor=True, evaluate=False)
	except (sp.SympifyError, SyntaxError, TypeError) as exc:
		raise ValueError(f"Cannot parse dimension expression {expr!r}: {exc}") from exc
	if not isinstance(e, sp.Basic):
		raise ValueError(f"Cannot parse dimension expression {expr!r}")
	return e


def _infer(e: sp.Basic) -> Dim8:
	if not e.free_symbols:
		# fold numeric subtrees left unevaluated by the parser
		e = e.doit()
	if e.is_Integer:
		if e == 0:
			raise ValueError("Zero is not a dimension")
		return Dim8()

	if e.is_Number or isinstance(e, sp.NumberSymbol):
		raise ValueError(f"Non-integer numeric factor {e} in dimension expression")

	if e.is_Symbol:
		name = str(e)
		if name not in _SYMBOLS:
			raise ValueError(f"Unknown dimension symbol: {name}")
		return _SYMBOLS[name]

	if isinstance(e, sp.Mul):
		d = Dim8()
		for a in e.args:
			d = d.add(_infer(a))
		return d

	if isinstance(e, sp.Pow):
		base, expo = e.as_base_exp()
		if not expo.free_symbols:
			expo = expo.doit()
		if not expo.is_Rational:
			raise ValueError(f"Exponent must be an exact rational, got {expo}")
		db = _infer(base)
		try:
			return db.scale_by(Fraction(int(expo.p), int(expo.q)))
		except NonIntegralExponent as exc:
			raise ValueError(str(exc)) from exc

	if isinstance(e, sp.Add):
		first = None
		for a in e.args:
			da = _infer(a)
			if first is None:
				first = da
			elif not da.same(first):
				raise ValueError("Sum of different dimensions in dimension expression")
		return first

	raise ValueError(f"Out-of-grammar construct in dimension expression: {type(e).__name__}")


def parse_dim(expr: str) -> Dim8:
	return _infer(sympify_dim(expr))


def parse_pattern(expr: str, free: Iterable[str] = ()) -> DimPattern:
	return DimPattern.from_dim(parse_dim(expr), free)
