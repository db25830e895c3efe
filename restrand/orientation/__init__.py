"""
Orientation module - orientation resolution and strand normalization
"""

from .resolver import (
    Orientation,
    parse_orientation_token,
    orientation_from_header,
    parse_target_orientation,
)
from .normalizer import Action, RunStats, StrandNormalizer, decide_action, rewrite_header_tag

__all__ = [
    'Orientation',
    'parse_orientation_token',
    'orientation_from_header',
    'parse_target_orientation',
    'Action',
    'RunStats',
    'StrandNormalizer',
    'decide_action',
    'rewrite_header_tag',
]
