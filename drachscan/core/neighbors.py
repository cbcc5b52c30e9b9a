"""
Flank extraction around DRACH motif occurrences.

A flank is the stretch of sequence right before (left) or right after (right)
an occurrence. Other occurrences reaching into the flank are masked on a
private copy of the payload first, so the reported context never carries a
second motif. The source record is never modified.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..exceptions import NeighborConstructionError
from .masking import DEFAULT_MARGIN, DEFAULT_MAX_ATTEMPTS, mask
from .models import FlankSide, MotifContext, MotifOccurrence

logger = logging.getLogger(__name__)


DEFAULT_FLANK_LENGTH = 15


@dataclass(frozen=True)
class Neighbor:
    """
    A flank request for one occurrence.

    All four fields are required; an incomplete or inconsistent request raises
    NeighborConstructionError when constructed.
    """
    occurrence: MotifOccurrence
    context: MotifContext
    side: FlankSide
    length: int

    def __post_init__(self):
        missing = [name for name in ('occurrence', 'context', 'side', 'length')
                   if getattr(self, name) is None]
        if missing:
            raise NeighborConstructionError(f"Missing neighbor field(s): {', '.join(missing)}")
        if not isinstance(self.side, FlankSide):
            raise NeighborConstructionError(f"Invalid flank side: {self.side!r}")
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length < 0:
            raise NeighborConstructionError(f"Flank length must be a non-negative integer, got {self.length!r}")
        if self.occurrence not in self.context:
            raise NeighborConstructionError(
                f"Occurrence {self.occurrence.payload} at {self.occurrence.start} "
                f"does not belong to record {self.context.sequence.id!r}"
            )

    def window(self) -> Tuple[int, int]:
        """Clamped half-open bounds of the flank."""
        if self.side is FlankSide.LEFT:
            start, end = self.occurrence.start - self.length, self.occurrence.start
        else:
            start, end = self.occurrence.end, self.occurrence.end + self.length
        return self.context.sequence.clamp_range(start, end)

    def overlapping(self) -> List[MotifOccurrence]:
        """Other occurrences intersecting the window, ordered by start."""
        start, end = self.window()
        others = [o for o in self.context.occurrences
                  if o != self.occurrence and o.overlaps(start, end)]
        return sorted(others, key=lambda o: o.start)

    def text(
        self,
        margin: int = DEFAULT_MARGIN,
        rng: Optional[random.Random] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> str:
        """Render the flank from a masked copy of the payload."""
        start, end = self.window()
        working = list(self.context.sequence.payload)
        others = self.overlapping()
        if others:
            logger.debug(f"Masking {len(others)} motif(s) in {self.side.value} flank "
                         f"of motif {self.occurrence.index + 1}")
        for other in others:
            mask(working, other, margin=margin, rng=rng, max_attempts=max_attempts)
        return ''.join(working[start:end])

    def __str__(self) -> str:
        return self.text()


def extract(
    occurrence: MotifOccurrence,
    context: MotifContext,
    side: FlankSide,
    length: int = DEFAULT_FLANK_LENGTH,
    margin: int = DEFAULT_MARGIN,
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """
    Extract the flank on one side of an occurrence.

    Args:
        occurrence: Occurrence the flank belongs to
        context: Record and all of its occurrences
        side: FlankSide.LEFT or FlankSide.RIGHT
        length: Requested flank length; shorter near sequence edges
        margin: Footprint margin used when masking other occurrences
        rng: Random generator used for masking
        max_attempts: Masking retry cap

    Returns:
        Flank text with other occurrences masked
    """
    neighbor = Neighbor(occurrence=occurrence, context=context, side=side, length=length)
    return neighbor.text(margin=margin, rng=rng, max_attempts=max_attempts)


def flanks(
    occurrence: MotifOccurrence,
    context: MotifContext,
    length: int = DEFAULT_FLANK_LENGTH,
    **kwargs,
) -> Tuple[str, str]:
    """Return the (left, right) flanks of an occurrence."""
    left = extract(occurrence, context, FlankSide.LEFT, length, **kwargs)
    right = extract(occurrence, context, FlankSide.RIGHT, length, **kwargs)
    return left, right
