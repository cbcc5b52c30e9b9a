"""
Data models for DRACH motif scanning.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..utils.sequence import clamp_range


@dataclass
class SequenceRecord:
    """
    One sequence read from a FASTA file.

    Attributes:
        id: Identifier token taken from the header (no whitespace)
        header: Full header line
        payload: Uppercase nucleotide bases, no gaps
        origin: Record this one was derived from, if any
    """
    id: str
    header: str
    payload: str = ""
    origin: Optional['SequenceRecord'] = field(default=None, repr=False)

    def __len__(self) -> int:
        return len(self.payload)

    def clamp_range(self, start: int, end: int) -> Tuple[int, int]:
        """Clamp a half-open range into the payload bounds."""
        return clamp_range(start, end, len(self.payload))

    def derive(self, payload: str, header: Optional[str] = None) -> 'SequenceRecord':
        """Create a new record from this one, keeping a link back to it."""
        return SequenceRecord(
            id=self.id,
            header=self.header if header is None else header,
            payload=payload,
            origin=self,
        )


@dataclass(frozen=True)
class MotifOccurrence:
    """
    A single motif match inside a sequence payload.

    Attributes:
        index: 0-based rank among the occurrences of the same record
        start: 0-based start of the match (inclusive)
        end: 0-based end of the match (exclusive)
        payload: Matched text
    """
    index: int
    start: int
    end: int
    payload: str

    def __post_init__(self):
        if not 0 <= self.start <= self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    @property
    def one_based_start(self) -> int:
        return self.start + 1

    @property
    def one_based_end(self) -> int:
        return self.end

    def overlaps(self, start: int, end: int) -> bool:
        """Check whether this span intersects the half-open range [start, end)."""
        return start < end and self.start < end and start < self.end

    def __str__(self) -> str:
        return f"{self.payload} {self.index + 1} em {self.one_based_start}-{self.one_based_end}"


@dataclass(frozen=True)
class MotifContext:
    """A record together with every motif occurrence found in it."""
    sequence: SequenceRecord
    occurrences: Tuple[MotifOccurrence, ...]

    def __contains__(self, occurrence: MotifOccurrence) -> bool:
        return occurrence in self.occurrences

    def __len__(self) -> int:
        return len(self.occurrences)


class FlankSide(Enum):
    """Side of a motif occurrence a flank is read from."""
    LEFT = "left"
    RIGHT = "right"

    @property
    def label(self) -> str:
        """Label used in verbose output."""
        return "Anterior" if self is FlankSide.LEFT else "Posterior"
