"""
Core scan, mask and flank extraction modules for drachscan.
"""

from .masking import (
    DEFAULT_MARGIN,
    DEFAULT_MAX_ATTEMPTS,
    footprint,
    guard_range,
    mask,
    needs_masking,
)
from .models import (
    FlankSide,
    MotifContext,
    MotifOccurrence,
    SequenceRecord,
)
from .neighbors import (
    DEFAULT_FLANK_LENGTH,
    Neighbor,
    extract,
    flanks,
)
from .scanner import (
    DRACH_PATTERN,
    MOTIF_LENGTH,
    matches_motif,
    scan,
    scan_record,
)

__all__ = [
    # Models
    'SequenceRecord',
    'MotifOccurrence',
    'MotifContext',
    'FlankSide',
    # Scanning
    'DRACH_PATTERN',
    'MOTIF_LENGTH',
    'matches_motif',
    'scan',
    'scan_record',
    # Masking
    'DEFAULT_MARGIN',
    'DEFAULT_MAX_ATTEMPTS',
    'footprint',
    'guard_range',
    'mask',
    'needs_masking',
    # Flanks
    'DEFAULT_FLANK_LENGTH',
    'Neighbor',
    'extract',
    'flanks',
]
