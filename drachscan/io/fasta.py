"""
FASTA reading and writing.
"""

import logging
import re
from pathlib import Path
from typing import List, Union

from ..core.models import SequenceRecord
from ..exceptions import InputError, OutputError
from ..utils.sequence import ends_with_any, wrap_sequence

logger = logging.getLogger(__name__)


HEADER_MARKER = '>'
ACCEPTED_FASTA_EXT = ('.fasta', '.fas')

# Identifier: everything after the marker up to the first whitespace
ID_PATTERN = re.compile(r'\S*')


def parse(text: str) -> List[SequenceRecord]:
    """
    Parse multi-record FASTA text.

    A line starting with '>' opens a record; its id is the token after the
    marker up to the first whitespace. Every following line is stripped and
    appended to the payload. Lines before the first header are ignored.

    Args:
        text: FASTA formatted text

    Returns:
        Records in file order, payloads upper-cased
    """
    records = []
    current = None
    chunks: List[str] = []
    orphan_lines = 0

    for line in text.splitlines():
        if line.startswith(HEADER_MARKER):
            if current is not None:
                current.payload = ''.join(chunks).upper()
                records.append(current)
            seq_id = ID_PATTERN.match(line, len(HEADER_MARKER)).group()
            current = SequenceRecord(id=seq_id, header=line)
            chunks = []
            continue

        stripped = line.strip()
        if current is None:
            if stripped:
                orphan_lines += 1
            continue
        chunks.append(stripped)

    if current is not None:
        current.payload = ''.join(chunks).upper()
        records.append(current)

    if orphan_lines:
        logger.debug(f"Ignored {orphan_lines} line(s) before the first FASTA header")

    return records


def load_fasta(path: Union[str, Path]) -> List[SequenceRecord]:
    """Load all records from a FASTA file.

    Raises:
        InputError: If the file does not exist or cannot be read
    """
    path = Path(path)
    if not path.is_file():
        raise InputError(f"File not found: {path}")
    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {path}: {e}") from e

    records = parse(text)
    logger.info(f"Loaded {len(records)} sequence(s) from {path}")
    return records


def to_fasta(record: SequenceRecord, line_width: int = 80) -> str:
    """Render a record as FASTA text, payload wrapped at line_width."""
    header = record.header
    if not header.startswith(HEADER_MARKER):
        header = f"{HEADER_MARKER}{header}"
    return '\n'.join([header] + wrap_sequence(record.payload, line_width))


def save_fasta(record: SequenceRecord, path: Union[str, Path],
               append: bool = False, line_width: int = 80) -> Path:
    """
    Write a record to a FASTA file.

    Raises:
        OutputError: If the path lacks a FASTA extension or cannot be written
    """
    path = Path(path)
    if not ends_with_any(path.name, ACCEPTED_FASTA_EXT):
        raise OutputError(f"Filename must end with one of {ACCEPTED_FASTA_EXT}: {path.name}")

    try:
        with open(path, 'a' if append else 'w') as f:
            f.write(f"{to_fasta(record, line_width)}\n")
    except OSError as e:
        raise OutputError(f"Cannot write {path}: {e}") from e

    return path
