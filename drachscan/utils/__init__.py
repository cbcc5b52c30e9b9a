"""
Utility modules for drachscan.
"""

from .sequence import (
    RNA_BASES,
    clamp_range,
    ends_with_any,
    wrap_sequence,
)

__all__ = [
    'RNA_BASES',
    'clamp_range',
    'ends_with_any',
    'wrap_sequence',
]
