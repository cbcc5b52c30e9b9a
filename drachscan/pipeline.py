"""
Main pipeline orchestration for drachscan.

Loads the input FASTA, scans each record for DRACH motifs, extracts the
masked flanks of every occurrence and writes one output file per record.
"""

import logging
import random
from pathlib import Path
from typing import List, Optional, Set

from .config import ScanConfig
from .core.models import FlankSide, SequenceRecord
from .core.neighbors import extract
from .core.scanner import scan_record
from .io.fasta import load_fasta
from .io.output import (
    SUMMARY_FILENAME,
    FlankResult,
    output_path_for,
    prepare_output_dir,
    write_flanks,
    write_summary_tsv,
)

logger = logging.getLogger(__name__)


class FlankPipeline:
    """Main pipeline orchestrator."""

    def __init__(self, config: ScanConfig, rng: Optional[random.Random] = None):
        self.config = config.validate()
        if rng is None and config.seed is not None:
            rng = random.Random(config.seed)
        self.rng = rng

    def _flank(self, occurrence, context, side):
        return extract(
            occurrence,
            context,
            side,
            self.config.flank_length,
            margin=self.config.mask_margin,
            rng=self.rng,
            max_attempts=self.config.max_mask_attempts,
        )

    def process_record(self, record: SequenceRecord) -> List[FlankResult]:
        """Scan one record and extract the flanks of every occurrence."""
        context = scan_record(record)
        results = []
        for occurrence in context.occurrences:
            left = self._flank(occurrence, context, FlankSide.LEFT)
            right = self._flank(occurrence, context, FlankSide.RIGHT)
            results.append(FlankResult(record.id, occurrence, left, right))

        logger.info(f"{record.id or '<no id>'}: {len(results)} DRACH motif(s)")
        return results

    @staticmethod
    def _output_path(record: SequenceRecord, output_dir: Path, written: Set[Path]) -> Path:
        copy = 1
        path = output_path_for(record.id, output_dir)
        while path in written:
            copy += 1
            path = output_path_for(record.id, output_dir, copy)
        if copy > 1:
            logger.warning(f"Duplicate record id {record.id or '<no id>'!r}, "
                           f"writing to {path.name}")
        return path

    def run(self) -> List[FlankResult]:
        """
        Run the pipeline on every record of the input file.

        A failure on any record aborts the run.

        Returns:
            Flank results of all records, in input order
        """
        records = load_fasta(self.config.input_path)
        output_dir = prepare_output_dir(self.config.output_dir)

        all_results = []
        written = set()
        for record in records:
            results = self.process_record(record)
            path = self._output_path(record, output_dir, written)
            write_flanks(results, path, verbose=self.config.verbose)
            written.add(path)
            all_results.extend(results)

        if self.config.write_summary:
            write_summary_tsv(all_results, output_dir / SUMMARY_FILENAME)

        logger.info(f"Processed {len(records)} sequence(s), "
                    f"{len(all_results)} motif(s) in total")
        return all_results
