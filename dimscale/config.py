"""
Engine configuration and scope-level unit preferences.

  • EngineConfig      — add policy, lossy opt-in, float comparison tolerance
  • ScopePreferences  — preferred storage scale per base axis, used to "lift"
                        literals and derived quantities into a scope's units
  • get_config / set_config / configure(...)         — active EngineConfig
  • get_preferences / set_preferences / preferences(...) — active ScopePreferences

Both are bound through context variables, so a scope set in one thread or task
never leaks into another.
"""

from __future__ import annotations
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from typing import Iterator

from dimscale.coherence.policy import AddPolicy
from dimscale.signatures.dimension import AXES, Dim8
from dimscale.signatures.scale import Scale


@dataclass(frozen=True)
class EngineConfig:
	"""
	Defaults for quantity arithmetic.
	"""
	policy: AddPolicy = AddPolicy.STRICT
	lossy: bool = False
	float_tolerance: float = 1e-12

	def __post_init__(self) -> None:
		if not isinstance(self.policy, AddPolicy):
			object.__setattr__(self, "policy", AddPolicy(self.policy))
		if self.float_tolerance < 0:
			raise ValueError("float_tolerance must be non-negative")


@dataclass(frozen=True)
class ScopePreferences:
	"""
	Preferred storage scale for each of the eight base axes.

	The preferred scale of a compound dimension is the axis-wise product
	pref(axis) ** exponent, so preferring grams and millimeters makes a force
	prefer g·mm/s² (10^-6 of a newton).
	"""
	m: Scale = Scale.IDENTITY
	l: Scale = Scale.IDENTITY
	t: Scale = Scale.IDENTITY
	i: Scale = Scale.IDENTITY
	th: Scale = Scale.IDENTITY
	n: Scale = Scale.IDENTITY
	j: Scale = Scale.IDENTITY
	a: Scale = Scale.IDENTITY

	def preferred_scale(self, dim: Dim8) -> Scale:
		out = Scale.IDENTITY
		for axis, exp in zip(AXES, dim.to_tuple()):
			if exp == 0:
				continue
			out = out * (getattr(self, axis) ** exp)
		return out


_config_ctx: ContextVar[EngineConfig] = ContextVar("dimscale_config", default=EngineConfig())
_prefs_ctx: ContextVar[ScopePreferences] = ContextVar("dimscale_preferences", default=ScopePreferences())


def get_config() -> EngineConfig:
	return _config_ctx.get()


def set_config(config: EngineConfig) -> Token:
	"""Bind a config for the current context and return the reset token."""
	return _config_ctx.set(config)


def reset_config(token: Token) -> None:
	_config_ctx.reset(token)


@contextmanager
def configure(**overrides) -> Iterator[EngineConfig]:
	"""Temporarily override fields of the active EngineConfig."""
	cfg = replace(get_config(), **overrides)
	token = _config_ctx.set(cfg)
	try:
		yield cfg
	finally:
		_config_ctx.reset(token)


def get_preferences() -> ScopePreferences:
	return _prefs_ctx.get()


def set_preferences(prefs: ScopePreferences) -> Token:
	return _prefs_ctx.set(prefs)


def reset_preferences(token: Token) -> None:
	_prefs_ctx.reset(token)


@contextmanager
def preferences(**axes: Scale) -> Iterator[ScopePreferences]:
	"""Temporarily prefer the given axis scales, e.g. preferences(m=Scale.pow10(-3))."""
	prefs = replace(get_preferences(), **axes)
	token = _prefs_ctx.set(prefs)
	try:
		yield prefs
	finally:
		_prefs_ctx.reset(token)
