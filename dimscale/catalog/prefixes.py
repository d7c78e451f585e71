"""
SI prefixes as power-of-10 scales.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from dimscale.signatures.scale import Scale


@dataclass(frozen=True)
class Prefix:
	name: str
	symbols: Tuple[str, ...]
	exponent: int

	@property
	def scale(self) -> Scale:
		return Scale.pow10(self.exponent)


QUECTO = Prefix("quecto", ("q",), -30)
RONTO = Prefix("ronto", ("r",), -27)
YOCTO = Prefix("yocto", ("y",), -24)
ZEPTO = Prefix("zepto", ("z",), -21)
ATTO = Prefix("atto", ("a",), -18)
FEMTO = Prefix("femto", ("f",), -15)
PICO = Prefix("pico", ("p",), -12)
NANO = Prefix("nano", ("n",), -9)
MICRO = Prefix("micro", ("µ", "μ", "u"), -6)
MILLI = Prefix("milli", ("m",), -3)
CENTI = Prefix("centi", ("c",), -2)
DECI = Prefix("deci", ("d",), -1)
DECA = Prefix("deca", ("da",), 1)
HECTO = Prefix("hecto", ("h",), 2)
KILO = Prefix("kilo", ("k",), 3)
MEGA = Prefix("mega", ("M",), 6)
GIGA = Prefix("giga", ("G",), 9)
TERA = Prefix("tera", ("T",), 12)
PETA = Prefix("peta", ("P",), 15)
EXA = Prefix("exa", ("E",), 18)
ZETTA = Prefix("zetta", ("Z",), 21)
YOTTA = Prefix("yotta", ("Y",), 24)
RONNA = Prefix("ronna", ("R",), 27)
QUETTA = Prefix("quetta", ("Q",), 30)

PREFIXES: Tuple[Prefix, ...] = (
	QUECTO, RONTO, YOCTO, ZEPTO, ATTO, FEMTO, PICO, NANO, MICRO, MILLI, CENTI, DECI,
	DECA, HECTO, KILO, MEGA, GIGA, TERA, PETA, EXA, ZETTA, YOTTA, RONNA, QUETTA,
)


def _by_symbol() -> Dict[str, Prefix]:
	out: Dict[str, Prefix] = {}
	for p in PREFIXES:
		for s in p.symbols:
			out[s] = p
	return out


PREFIX_SYMBOLS: Dict[str, Prefix] = _by_symbol()
