"""Tests for drachscan.io modules."""

import pandas as pd
import pytest
from drachscan.core.models import MotifOccurrence, SequenceRecord
from drachscan.exceptions import InputError, OutputError
from drachscan.io.fasta import load_fasta, parse, save_fasta, to_fasta
from drachscan.io.output import (
    FlankResult,
    format_block,
    output_path_for,
    prepare_output_dir,
    write_flanks,
    write_summary_tsv,
)


MULTI_RECORD_FASTA = """>id1 desc
AUUAAAGGUU
  UAUACCUUCC

>id2 desc
UUUUGUAUUU
CCCUUAAAUU
"""


class TestParse:
    """Test FASTA parsing."""

    def test_multi_record_round_trip(self):
        """Test two wrapped records are reconstructed."""
        records = parse(MULTI_RECORD_FASTA)
        assert [r.id for r in records] == ["id1", "id2"]
        assert records[0].payload == "AUUAAAGGUUUAUACCUUCC"
        assert records[1].payload == "UUUUGUAUUUCCCUUAAAUU"

    def test_header_kept_whole(self):
        records = parse(MULTI_RECORD_FASTA)
        assert records[0].header == ">id1 desc"

    def test_id_without_description(self):
        records = parse(">NC_045512\nAGUC\n")
        assert records[0].id == "NC_045512"

    def test_id_split_on_tab(self):
        records = parse(">seq7\tsome description\nAGUC\n")
        assert records[0].id == "seq7"

    def test_empty_id(self):
        """Test header with whitespace right after the marker has empty id."""
        records = parse("> description only\nAGUC\n")
        assert records[0].id == ""
        assert records[0].payload == "AGUC"

    def test_lines_before_first_header_ignored(self):
        records = parse("GGACU\nGGACU\n>a\nCCCC\n")
        assert len(records) == 1
        assert records[0].payload == "CCCC"

    def test_lowercase_upper_cased(self):
        assert parse(">a\nggacu\n")[0].payload == "GGACU"

    def test_windows_line_endings(self):
        records = parse(">a x\r\nGGA\r\nCU\r\n")
        assert records[0].payload == "GGACU"
        assert records[0].header == ">a x"

    def test_header_without_payload(self):
        records = parse(">a\n>b\nGG\n")
        assert [(r.id, r.payload) for r in records] == [("a", ""), ("b", "GG")]

    def test_empty_text(self):
        assert parse("") == []


class TestLoadFasta:
    """Test FASTA loading from disk."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "input.fasta"
        path.write_text(MULTI_RECORD_FASTA)
        records = load_fasta(path)
        assert len(records) == 2

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(InputError, match="File not found"):
            load_fasta(tmp_path / "missing.fasta")

    def test_directory_raises(self, tmp_path):
        with pytest.raises(InputError):
            load_fasta(tmp_path)


class TestToFasta:
    """Test FASTA rendering."""

    def test_should_match_format(self):
        record = SequenceRecord("NC_045512", "NC_045512 Sars-Cov-2", "AGUC")
        assert to_fasta(record, 10) == ">NC_045512 Sars-Cov-2\nAGUC"

    def test_should_match_format_breaking_lines(self):
        record = SequenceRecord("NC_045512", "NC_045512 Sars-Cov-2", "AGUC")
        assert to_fasta(record, 2) == ">NC_045512 Sars-Cov-2\nAG\nUC"

    def test_marker_not_doubled(self):
        record = SequenceRecord("a", ">a desc", "AGUC")
        assert to_fasta(record).startswith(">a desc\n")


class TestSaveFasta:
    """Test FASTA writing."""

    def test_should_only_save_fasta(self, tmp_path):
        record = SequenceRecord("", "", "")
        with pytest.raises(OutputError, match="Filename must end with"):
            save_fasta(record, tmp_path / "mock.notfasta")

    def test_should_create_file_if_not_exists(self, tmp_path):
        path = tmp_path / "new.fas"
        save_fasta(SequenceRecord("a", "a", "GGACU"), path)
        assert path.read_text() == ">a\nGGACU\n"

    def test_should_append_if_append_is_true(self, tmp_path):
        path = tmp_path / "out.fasta"
        path.write_text(">x\nCC\n")
        save_fasta(SequenceRecord("a", "a", "GG"), path, append=True)
        assert path.read_text() == ">x\nCC\n>a\nGG\n"

    def test_overwrite_without_append(self, tmp_path):
        path = tmp_path / "out.fasta"
        path.write_text(">x\nCC\n")
        save_fasta(SequenceRecord("a", "a", "GG"), path)
        assert path.read_text() == ">a\nGG\n"


OCCURRENCE = MotifOccurrence(index=0, start=29, end=34, payload="AGACU")


class TestFormatBlock:
    """Test output block formatting."""

    def test_compact(self):
        assert format_block(OCCURRENCE, "LEFT", "RIGHT") == ["LEFT", "RIGHT"]

    def test_verbose(self):
        lines = format_block(OCCURRENCE, "UAAAUUCCAUAAUCA", "AUUCAACCAAGGGUU", verbose=True)
        assert lines == [
            "AGACU",
            "1 em 30-34",
            "Anterior: UAAAUUCCAUAAUCA",
            "Posterior: AUUCAACCAAGGGUU",
            "",
        ]

    def test_empty_flanks_kept(self):
        assert format_block(OCCURRENCE, "", "") == ["", ""]


class TestWriters:
    """Test per-record and summary writers."""

    def test_output_path_for(self, tmp_path):
        assert output_path_for("id1", tmp_path) == tmp_path / "id1.fasta"
        assert output_path_for("", tmp_path) == tmp_path / "unnamed.fasta"
        assert output_path_for("id1", tmp_path, copy=2) == tmp_path / "id1_2.fasta"
        assert output_path_for("", tmp_path, copy=3) == tmp_path / "unnamed_3.fasta"

    def test_prepare_output_dir_creates_nested(self, tmp_path):
        out = prepare_output_dir(tmp_path / "a" / "b")
        assert out.is_dir()

    def test_prepare_output_dir_on_file_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(OutputError):
            prepare_output_dir(blocker / "sub")

    def test_write_flanks_replaces_existing(self, tmp_path):
        path = tmp_path / "id1.fasta"
        path.write_text("stale\n")
        write_flanks([FlankResult("id1", OCCURRENCE, "AAA", "CCC")], path)
        assert path.read_text() == "AAA\nCCC\n"

    def test_write_flanks_rejects_extension(self, tmp_path):
        with pytest.raises(OutputError):
            write_flanks([], tmp_path / "id1.txt")

    def test_write_flanks_no_occurrences(self, tmp_path):
        path = write_flanks([], tmp_path / "empty.fasta")
        assert path.read_text() == ""

    def test_write_summary_tsv(self, tmp_path):
        results = [
            FlankResult("id1", OCCURRENCE, "AAA", "CCC"),
            FlankResult("id2", MotifOccurrence(1, 10, 15, "GGACU"), "", "UU"),
        ]
        path = write_summary_tsv(results, tmp_path / "summary.tsv")
        df = pd.read_csv(path, sep='\t', keep_default_na=False)
        assert list(df.columns) == ['record_id', 'index', 'start', 'end', 'motif',
                                    'left_flank', 'right_flank']
        assert df['start'].tolist() == [30, 11]
        assert df['index'].tolist() == [1, 2]
        assert df['left_flank'].tolist() == ["AAA", ""]

    def test_write_summary_tsv_empty(self, tmp_path):
        path = write_summary_tsv([], tmp_path / "summary.tsv")
        assert path.read_text().startswith("record_id\tindex")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
