"""
Sequence manipulation utilities.

Provides common helpers for RNA payload handling.
"""

from typing import Iterable, List, Tuple


# Bases drawn from when regenerating masked positions
RNA_BASES = ('A', 'U', 'G', 'C')


def clamp_range(start: int, end: int, length: int) -> Tuple[int, int]:
    """Clamp a half-open range into [0, length].

    The returned start never exceeds the returned end, so slicing with the
    result yields an empty string rather than wrapping around.
    """
    start = min(max(start, 0), length)
    end = min(max(end, 0), length)
    return start, max(start, end)


def wrap_sequence(seq: str, line_width: int = 80) -> List[str]:
    """Split a sequence into lines of at most line_width characters."""
    if line_width <= 0:
        raise ValueError(f"line_width must be positive, got {line_width}")
    return [seq[i:i + line_width] for i in range(0, len(seq), line_width)]


def ends_with_any(value: str, suffixes: Iterable[str]) -> bool:
    """Return True if value ends with any of the given suffixes."""
    return any(value.endswith(suffix) for suffix in suffixes)
