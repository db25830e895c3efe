#!/usr/bin/env python3
"""
集成测试 - 命令行端到端行为
"""

import io
import gzip
import sys
import pytest
from restrand.cli import main, build_parser
from restrand.utils.sequence_utils import reverse_complement


# Minimal FASTA with two records; first has a description
FASTA = ">readA some desc\nACGTACGTAC\n>readB\nGGGCCCaaattt\n"

# readA -> '+', readB -> '-'
TSV = "ReadName\torientation\nreadA\t+\nreadB\t-\n"

BAD_TSV = "ReadName\torientation\nreadA\twut\n"


@pytest.fixture
def files(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        if name.endswith(".gz"):
            with gzip.open(path, "wt") as f:
                f.write(text)
        else:
            path.write_text(text)
        return str(path)
    return _write


class TestCommandLine:

    def test_keeps_plus_flips_minus_with_suffix_and_wrap(self, files, capsys):
        long_seq = "A" * 130
        fasta = files("in.fa", f">readA some desc\n{long_seq}\n>readB\n{long_seq}\n")
        tsv = files("map.tsv", TSV)

        assert main(["-f", fasta, "-t", tsv, "--target-orientation", "+", "--flipped-suffix", "/rc"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == ">readA some desc"
        assert [len(l) for l in lines[1:4]] == [60, 60, 10]
        idx = next(i for i, l in enumerate(lines) if l.startswith(">readB"))
        assert lines[idx] == ">readB/rc"
        assert "".join(lines[idx + 1:]) == reverse_complement(long_seq)

    def test_drop_missing_false_passes_through(self, files, capsys):
        fasta = files("in.fa", FASTA)
        tsv = files("map.tsv", "ReadName\torientation\nreadA\t+\n")
        assert main(["-f", fasta, "-t", tsv]) == 0
        out = capsys.readouterr().out
        assert ">readA some desc" in out
        assert ">readB\nGGGCCCaaattt\n" in out

    def test_drop_missing_true_drops(self, files, capsys):
        fasta = files("in.fa", FASTA)
        tsv = files("map.tsv", "ReadName\torientation\nreadA\t+\n")
        assert main(["-f", fasta, "-t", tsv, "--drop-missing"]) == 0
        captured = capsys.readouterr()
        assert ">readA some desc" in captured.out
        assert ">readB" not in captured.out
        assert "missing_in_table=1 (dropped mode)" in captured.err

    def test_gz_fasta_and_gz_table(self, files, capsys):
        fasta = files("in.fa.gz", FASTA)
        tsv = files("map.tsv.gz", TSV)
        assert main(["-f", fasta, "-t", tsv]) == 0
        out = capsys.readouterr().out
        assert ">readA some desc" in out
        assert ">readB\naaatttGGGCCC\n" in out

    def test_stdin_stdout(self, files, capsys, monkeypatch):
        tsv = files("map.tsv", TSV)
        monkeypatch.setattr(sys, "stdin", io.StringIO(FASTA))
        assert main(["-f", "-", "-t", tsv]) == 0
        captured = capsys.readouterr()
        assert captured.out == ">readA some desc\nACGTACGTAC\n>readB\naaatttGGGCCC\n"
        # summary goes to stderr only
        assert "processed=2 flipped=1 missing_in_table=0 (kept mode) | wrap=60 cols" in captured.err
        assert "processed=" not in captured.out

    def test_output_file(self, files, tmp_path, capsys):
        fasta = files("in.fa", FASTA)
        tsv = files("map.tsv", TSV)
        out = tmp_path / "out.fa"
        assert main(["-i", fasta, "-t", tsv, "-o", str(out), "--target-orientation", "-"]) == 0
        assert out.read_text() == ">readA some desc\nGTACGTACGT\n>readB\nGGGCCCaaattt\n"
        assert capsys.readouterr().out == ""

    def test_bad_orientation_errors(self, files, capsys):
        fasta = files("in.fa", FASTA)
        tsv = files("map.tsv", BAD_TSV)
        assert main(["-f", fasta, "-t", tsv]) == 1
        assert "Unrecognized orientation value 'wut'" in capsys.readouterr().err

    def test_invalid_target_orientation(self, files, capsys):
        fasta = files("in.fa", FASTA)
        tsv = files("map.tsv", TSV)
        assert main(["-f", fasta, "-t", tsv, "--target-orientation", "x"]) == 1
        assert "Target orientation must be '+' or '-'" in capsys.readouterr().err

    def test_missing_table(self, files, capsys):
        fasta = files("in.fa", FASTA)
        assert main(["-f", fasta]) == 1
        assert "orientation table is required" in capsys.readouterr().err

    def test_missing_column(self, files, capsys):
        fasta = files("in.fa", FASTA)
        tsv = files("map.tsv", TSV)
        assert main(["-f", fasta, "-t", tsv, "--id-col", "qname"]) == 1
        assert "Column 'qname' not found" in capsys.readouterr().err

    def test_missing_input_file(self, files, tmp_path, capsys):
        tsv = files("map.tsv", TSV)
        assert main(["-f", str(tmp_path / "absent.fa"), "-t", tsv]) == 1
        assert "absent.fa" in capsys.readouterr().err

    def test_invalid_utf8_input(self, tmp_path, files, capsys):
        fasta = tmp_path / "in.fa"
        fasta.write_bytes(b">r1 caf\xe9\nACGT\n")
        tsv = files("map.tsv", TSV)
        assert main(["-f", str(fasta), "-t", tsv]) == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_invalid_utf8_table(self, tmp_path, files, capsys):
        fasta = files("in.fa", FASTA)
        tsv = tmp_path / "map.tsv"
        tsv.write_bytes(b"ReadName\torientation\nread\xe9\t+\n")
        assert main(["-f", fasta, "-t", str(tsv)]) == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_ragged_table(self, files, capsys):
        fasta = files("in.fa", FASTA)
        tsv = files("map.tsv", "ReadName\torientation\nreadA\t-\tjunk\n")
        assert main(["-f", fasta, "-t", tsv]) == 1
        assert "Cannot parse orientation table" in capsys.readouterr().err

    def test_malformed_fastq(self, files, capsys):
        fastq = files("in.fq", "@r1\nACGT\n+\nII\n")
        assert main(["--fastq", "-i", fastq]) == 1
        assert "Length mismatch" in capsys.readouterr().err

    def test_fastq_mode(self, files, capsys):
        fastq = files("in.fq.gz", "@r1 orientation:-\nAAC\n+\nABC\n@r2\nGG\n+\nII\n")
        assert main(["--fastq", "-i", fastq]) == 0
        captured = capsys.readouterr()
        assert captured.out == "@r1 orientation:+\nGTT\n+\nCBA\n@r2\nGG\n+\nII\n"
        assert "processed=2 flipped=1 no_orientation_tag=1" in captured.err

    def test_usage_error_exit_status(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--no-such-option"])
        assert exc_info.value.code == 2

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.input == "-"
        assert args.target_orientation == "+"
        assert args.id_col == "ReadName"
        assert args.orientation_col == "orientation"
        assert args.flipped_suffix == ""
        assert not args.drop_missing
