"""
drachscan - DRACH motif flank extraction for RNA sequences.
"""

__version__ = "0.1.0"

from .config import ScanConfig
from .core.models import FlankSide, MotifContext, MotifOccurrence, SequenceRecord
from .core.neighbors import Neighbor, extract
from .core.scanner import scan, scan_record
from .exceptions import DrachScanError

__all__ = [
    "ScanConfig",
    "SequenceRecord",
    "MotifOccurrence",
    "MotifContext",
    "FlankSide",
    "Neighbor",
    "scan",
    "scan_record",
    "extract",
    "DrachScanError",
    "__version__",
]
