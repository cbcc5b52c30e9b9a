"""
I/O modules for drachscan.
"""

from .fasta import (
    ACCEPTED_FASTA_EXT,
    load_fasta,
    parse,
    save_fasta,
    to_fasta,
)
from .output import (
    FlankResult,
    format_block,
    output_path_for,
    prepare_output_dir,
    write_flanks,
    write_summary_tsv,
)

__all__ = [
    'ACCEPTED_FASTA_EXT',
    'parse',
    'load_fasta',
    'to_fasta',
    'save_fasta',
    'FlankResult',
    'format_block',
    'output_path_for',
    'prepare_output_dir',
    'write_flanks',
    'write_summary_tsv',
]
