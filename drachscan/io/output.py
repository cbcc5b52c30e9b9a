"""
Output generation for flank extraction results.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

import pandas as pd

from ..core.models import FlankSide, MotifOccurrence
from ..exceptions import OutputError
from ..utils.sequence import ends_with_any
from .fasta import ACCEPTED_FASTA_EXT

logger = logging.getLogger(__name__)


OUTPUT_EXT = '.fasta'
UNNAMED_RECORD = 'unnamed'
SUMMARY_FILENAME = 'motif_summary.tsv'


@dataclass
class FlankResult:
    """Flanks extracted for one motif occurrence."""
    record_id: str
    occurrence: MotifOccurrence
    left: str
    right: str

    def to_dict(self) -> dict:
        """Convert to dictionary for output."""
        return {
            'record_id': self.record_id,
            'index': self.occurrence.index + 1,
            'start': self.occurrence.one_based_start,
            'end': self.occurrence.one_based_end,
            'motif': self.occurrence.payload,
            'left_flank': self.left,
            'right_flank': self.right,
        }


SUMMARY_COLUMNS = ['record_id', 'index', 'start', 'end', 'motif', 'left_flank', 'right_flank']


def format_block(occurrence: MotifOccurrence, left: str, right: str,
                 verbose: bool = False) -> List[str]:
    """
    Format the flanks of one occurrence as output lines.

    Compact mode gives the left flank then the right flank. Verbose mode adds
    the matched text, the 1-based position and side labels, followed by a
    blank separator line.
    """
    if not verbose:
        return [left, right]
    return [
        occurrence.payload,
        f"{occurrence.index + 1} em {occurrence.one_based_start}-{occurrence.one_based_end}",
        f"{FlankSide.LEFT.label}: {left}",
        f"{FlankSide.RIGHT.label}: {right}",
        "",
    ]


def output_path_for(record_id: str, output_dir: Union[str, Path], copy: int = 1) -> Path:
    """Path of the per-record output file.

    Later records sharing an id get a numbered name (<id>_2.fasta, ...).
    """
    name = record_id or UNNAMED_RECORD
    if copy > 1:
        name = f"{name}_{copy}"
    return Path(output_dir) / f"{name}{OUTPUT_EXT}"


def prepare_output_dir(output_dir: Union[str, Path]) -> Path:
    """Create the output directory if needed."""
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Cannot create output directory {output_dir}: {e}") from e
    return output_dir


def write_flanks(results: Iterable[FlankResult], path: Union[str, Path],
                 verbose: bool = False) -> Path:
    """
    Write the flank blocks of one record, replacing any existing file.

    Raises:
        OutputError: If the path has an unexpected extension or is not writable
    """
    path = Path(path)
    if not ends_with_any(path.name, ACCEPTED_FASTA_EXT):
        raise OutputError(f"Filename must end with one of {ACCEPTED_FASTA_EXT}: {path.name}")

    lines = []
    for result in results:
        lines.extend(format_block(result.occurrence, result.left, result.right, verbose))

    try:
        with open(path, 'w') as f:
            for line in lines:
                f.write(f"{line}\n")
    except OSError as e:
        raise OutputError(f"Cannot write {path}: {e}") from e

    logger.info(f"Results written to: {path}")
    return path


def write_summary_tsv(results: List[FlankResult], path: Union[str, Path]) -> Path:
    """Write one row per occurrence to a TSV file."""
    path = Path(path)
    df = pd.DataFrame([r.to_dict() for r in results], columns=SUMMARY_COLUMNS)
    try:
        df.to_csv(path, sep='\t', index=False)
    except OSError as e:
        raise OutputError(f"Cannot write {path}: {e}") from e

    logger.info(f"Wrote {len(df)} occurrences to {path}")
    return path
