"""
Signature inference over algebraic expressions.

Class: SignatureInference
-------------------------
Derives the (dimension, scale) signature of an expression over named argument
signatures without evaluating any values:

  • +/− : CoherenceChecker.add under the configured AddPolicy
  • */÷ : dimension and scale exponents add/subtract
  • pow : exact rational exponents only; a symbolic exponent needs a
		  dimensionless base and yields a dimensionless result
  • sin/cos/tan/exp/log : argument must be dimensionless or a pure angle;
		  the result is dimensionless at unity scale
  • sqrt: power 1/2
  • Abs : preserves the argument's signature
  • numeric literals are dimensionless coefficients and leave the scale alone

Public API
----------
- SignatureInference(bindings: dict[str, Signature], policy: AddPolicy)
- sympify_expr(expr_str: str) -> sympy.Expr
- infer(expr: sympy.Expr | str) -> Signature
"""

from __future__ import annotations
from fractions import Fraction
from typing import Dict, Optional

import sympy as sp

from dimscale.coherence.checker import CoherenceChecker
from dimscale.coherence.policy import AddPolicy
from dimscale.errors import DimensionMismatch
from dimscale.signatures.signature import DIMENSIONLESS, Signature


_ERASING_HEADS = (sp.sin, sp.cos, sp.tan, sp.exp, sp.log)


class SignatureInference:
	"""Single entry point for signature inference over argument bindings."""

	def __init__(self, bindings: Optional[Dict[str, Signature]] = None, policy: AddPolicy = AddPolicy.STRICT) -> None:
		self._env: Dict[str, Signature] = dict(bindings or {})
		self.checker = CoherenceChecker(policy)

	def _namespace(self) -> Dict[str, object]:
		ns: Dict[str, object] = {name: sp.Symbol(name) for name in self._env}
		ns.update({
			"sin": sp.sin, "cos": sp.cos, "tan": sp.tan,
			"exp": sp.exp, "log": sp.log, "sqrt": sp.sqrt, "Abs": sp.Abs,
		})
		return ns

	def sympify_expr(self, expr_str: str) -> sp.Expr:
		"""
		Parse without evaluation so sums of like terms stay separate and each
		term's scale is checked by the add policy.
		"""
		s = (expr_str or "").strip().replace("^", "**")
		if not s:
			raise ValueError("Empty expression")
		try:
			expr = sp.sympify(s, locals=self._namespace(), convert_xor=True, evaluate=False)
		except (sp.SympifyError, SyntaxError, TypeError) as exc:
			raise ValueError(f"Cannot parse expression {expr_str!r}: {exc}") from exc

		allowed_heads = set(_ERASING_HEADS) | {sp.Abs}
		for fnode in expr.atoms(sp.Function):
			if fnode.func not in allowed_heads:
				raise ValueError(f"Function not permitted: {fnode.func.__name__}")
		return expr

	def infer(self, expr) -> Signature:
		if isinstance(expr, str):
			expr = self.sympify_expr(expr)
		elif not isinstance(expr, sp.Basic):
			raise TypeError("infer expects a SymPy expression or a string")

		if expr.is_Number or isinstance(expr, sp.NumberSymbol):
			return DIMENSIONLESS

		if expr.is_Symbol:
			name = str(expr)
			if name not in self._env:
				raise ValueError(f"Unbound symbol: {name}")
			return self._env[name]

		if isinstance(expr, sp.Add):
			return self._infer_add(expr)

		if isinstance(expr, sp.Mul):
			return self._infer_mul(expr)

		if isinstance(expr, sp.Pow):
			return self._infer_pow(expr)

		if isinstance(expr, sp.Function):
			return self._infer_function(expr)

		raise ValueError(f"Unsupported expr node: {type(expr).__name__}")

	def _infer_add(self, e: sp.Add) -> Signature:
		"""
		Typing rule for addition/subtraction:
		  • Every term must share one dimension.
		  • Scales are reconciled pairwise, left to right, by the add policy.
		  • Numeric literals are dimensionless at unity scale.
		"""
		sig: Optional[Signature] = None
		for a in e.args:
			sa = self.infer(a)
			if sig is None:
				sig = sa
			else:
				sig = self.checker.add(sig, sa)
		return sig

	def _infer_mul(self, e: sp.Mul) -> Signature:
		sig = DIMENSIONLESS
		for a in e.args:
			sig = self.checker.mul(sig, self.infer(a))
		return sig

	def _infer_pow(self, e: sp.Pow) -> Signature:
		base, expo = e.as_base_exp()
		sb = self.infer(base)

		if not expo.free_symbols:
			expo = expo.doit()
		if expo.is_Number:
			if not expo.is_Rational:
				raise ValueError("Non-exact numeric exponent not supported.")
			p = Fraction(int(expo.p), int(expo.q))
			if p.denominator == 1:
				return self.checker.pow(sb, int(p))
			return self.checker.pow(sb, p)

		if not sb.dim.is_dimensionless():
			raise DimensionMismatch("Symbolic exponent on a dimensionful base.")
		if not self.infer(expo).dim.is_dimensionless():
			raise DimensionMismatch("Exponent must be dimensionless.")
		return DIMENSIONLESS

	def _infer_function(self, e: sp.Function) -> Signature:
		f = e.func
		if len(e.args) != 1:
			raise ValueError(f"{f.__name__} takes exactly one argument.")
		sa = self.infer(e.args[0])
		if f is sp.Abs:
			return sa
		if f in _ERASING_HEADS:
			if not (sa.dim.is_dimensionless() or sa.dim.is_pure_angle()):
				raise DimensionMismatch(
					f"{f.__name__} needs a dimensionless or angle argument, got {sa.dim.pretty()}."
				)
			return DIMENSIONLESS
		raise ValueError(f"Function not permitted: {f.__name__}")
