"""
DRACH motif scanning.

The DRACH consensus ([A/G/U][A/G]AC[A/C/U]) marks candidate m6A sites in RNA.
Matches are collected leftmost-first without overlap, so the search resumes
right after the end of each match.
"""

import logging
import re
from typing import List

from .models import MotifContext, MotifOccurrence, SequenceRecord

logger = logging.getLogger(__name__)


DRACH_PATTERN = re.compile(r'[AGU][AG]AC[ACU]')

# Number of bases in one motif match
MOTIF_LENGTH = 5


def matches_motif(text: str) -> bool:
    """Check if a motif occurs anywhere in text."""
    return DRACH_PATTERN.search(text) is not None


def scan(payload: str) -> List[MotifOccurrence]:
    """Find all non-overlapping DRACH occurrences in a payload.

    Args:
        payload: Uppercase RNA sequence

    Returns:
        Occurrences ordered by start position, indexed from 0. Empty when the
        payload is empty or holds no motif.
    """
    return [
        MotifOccurrence(index=i, start=m.start(), end=m.end(), payload=m.group())
        for i, m in enumerate(DRACH_PATTERN.finditer(payload))
    ]


def scan_record(record: SequenceRecord) -> MotifContext:
    """Scan a record and bundle it with its occurrences."""
    occurrences = tuple(scan(record.payload))
    logger.debug(f"{record.id or '<no id>'}: {len(occurrences)} DRACH motifs "
                 f"in {len(record.payload)} nt")
    return MotifContext(sequence=record, occurrences=occurrences)
