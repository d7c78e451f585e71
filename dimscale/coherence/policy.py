"""
Add-time scale reconciliation policies.

  • STRICT          — equal scales required; the caller converts explicitly first
  • LEFT_HAND_WINS  — result takes the first operand's scale
  • LARGEST_WINS    — result takes the scale with the larger base-unit multiple
  • SMALLEST_WINS   — result takes the scale with the smaller base-unit multiple
"""

from __future__ import annotations
from enum import Enum


class AddPolicy(str, Enum):
	STRICT = "strict"
	LEFT_HAND_WINS = "left_hand_wins"
	LARGEST_WINS = "largest_wins"
	SMALLEST_WINS = "smallest_wins"
