"""Statistical audits for scripturequiz."""

from .position_bias import PositionBiasReport, analyze_position_bias

__all__ = [
    "PositionBiasReport",
    "analyze_position_bias",
]
