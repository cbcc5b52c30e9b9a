"""
Masking of motif occurrences on a working copy of a payload.

A motif that leaks into another motif's flank is scrubbed by redrawing its own
bases at random until no DRACH match inside its footprint (the span widened by
a margin on each side) touches a redrawn base. Bases outside the occurrence
span are never changed, so a motif sitting entirely in the margin is left for
its own masking pass.
"""

import logging
import random
from typing import List, MutableSequence, Optional, Tuple

from ..exceptions import MaskingError
from ..utils.sequence import RNA_BASES, clamp_range
from .models import MotifOccurrence
from .scanner import DRACH_PATTERN, MOTIF_LENGTH

logger = logging.getLogger(__name__)


DEFAULT_MARGIN = 5
DEFAULT_MAX_ATTEMPTS = 10_000


def footprint(occurrence: MotifOccurrence, length: int,
              margin: int = DEFAULT_MARGIN) -> Tuple[int, int]:
    """Return the occurrence span widened by margin, clamped to [0, length]."""
    return clamp_range(occurrence.start - margin, occurrence.end + margin, length)


def guard_range(occurrence: MotifOccurrence, length: int,
                margin: int = DEFAULT_MARGIN) -> Tuple[int, int]:
    """Return the slice searched for motifs touching the occurrence.

    This is the footprint, widened to at least MOTIF_LENGTH - 1 bases on each
    side so that every window overlapping a redrawn base is checked.
    """
    return footprint(occurrence, length, max(margin, MOTIF_LENGTH - 1))


def _motif_touches(working: MutableSequence[str], fp_start: int, fp_end: int,
                   start: int, end: int) -> bool:
    """Check for a motif inside the footprint that overlaps [start, end)."""
    text = ''.join(working[fp_start:fp_end])
    # Only windows overlapping the redrawn span matter
    first = max(0, start - fp_start - MOTIF_LENGTH + 1)
    last = min(len(text) - MOTIF_LENGTH, end - fp_start - 1)
    for pos in range(first, last + 1):
        if DRACH_PATTERN.match(text, pos):
            return True
    return False


def needs_masking(working: MutableSequence[str], occurrence: MotifOccurrence,
                  margin: int = DEFAULT_MARGIN) -> bool:
    """Check whether the occurrence's bases still take part in a motif."""
    fp_start, fp_end = guard_range(occurrence, len(working), margin)
    start, end = clamp_range(occurrence.start, occurrence.end, len(working))
    return _motif_touches(working, fp_start, fp_end, start, end)


def mask(
    working: List[str],
    occurrence: MotifOccurrence,
    margin: int = DEFAULT_MARGIN,
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> List[str]:
    """
    Scrub one occurrence from a working copy, in place.

    The occurrence's bases are redrawn uniformly from ACGU until no motif in
    the footprint overlaps them. When they already take part in no motif the
    call returns without drawing.

    Args:
        working: Mutable list of bases; modified in place
        occurrence: Occurrence to scrub
        margin: Bases added on each side of the span to form the footprint
        rng: Random generator (defaults to the module-level one)
        max_attempts: Redraws allowed before giving up

    Returns:
        The same working list

    Raises:
        MaskingError: If max_attempts redraws all still produce a motif
    """
    rng = rng or random
    fp_start, fp_end = guard_range(occurrence, len(working), margin)
    start, end = clamp_range(occurrence.start, occurrence.end, len(working))

    attempts = 0
    while _motif_touches(working, fp_start, fp_end, start, end):
        if attempts >= max_attempts:
            raise MaskingError(
                f"Could not mask motif {occurrence.payload} at "
                f"{occurrence.one_based_start}-{occurrence.one_based_end} "
                f"after {max_attempts} attempts"
            )
        for pos in range(start, end):
            working[pos] = rng.choice(RNA_BASES)
        attempts += 1

    if attempts:
        logger.debug(f"Masked motif {occurrence.index + 1} "
                     f"({occurrence.payload}) in {attempts} draw(s)")
    return working
