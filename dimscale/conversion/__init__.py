"""
Exact scale conversion.

Public API re-export:
	ConversionEngine, ENGINE — factor/apply/convert over signatures
	ScaleFactor              — exact ratio with a tabled float rendering
	factor, apply, convert   — proxies to ENGINE
"""

from .factor import ScaleFactor, IDENTITY_FACTOR
from .engine import ConversionEngine, ENGINE, factor, apply, convert

__all__ = ["ScaleFactor", "IDENTITY_FACTOR", "ConversionEngine", "ENGINE", "factor", "apply", "convert"]
