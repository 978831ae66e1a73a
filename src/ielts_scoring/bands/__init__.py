"""
Band computation: raw score mapping, subjective reduction and overall
aggregation.
"""

from .mapper import BandMapper
from .subjective import reduce_criteria, round_to_half_band
from .aggregate import aggregate_overall, aggregate_partial, ielts_round

__all__ = [
    "BandMapper",
    "reduce_criteria",
    "round_to_half_band",
    "aggregate_overall",
    "aggregate_partial",
    "ielts_round",
]
