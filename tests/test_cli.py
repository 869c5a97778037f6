"""
Tests for the command line tool.
"""

import logging

import pytest
from nwdist import cli
from nwdist.table import TableAllocationError


@pytest.fixture
def fasta_pair(tmp_path):
    a = tmp_path / "a.fasta"
    b = tmp_path / "b.fasta"
    a.write_text(">x1\nGATT\nACA\n")
    b.write_text(">x2\nGCAT\nGCU\n")
    return str(a), str(b)


class TestMain:
    """Tests for cli.main."""

    def test_prints_distance(self, fasta_pair, capsys):
        """Default run prints the distance."""
        assert cli.main(list(fasta_pair)) == 0
        assert capsys.readouterr().out.strip().isdigit()

    def test_methods_agree(self, fasta_pair, capsys):
        """All methods print the same distance."""
        outputs = set()
        for method in ["recursive", "iterative", "blocked"]:
            assert cli.main([*fasta_pair, "--method", method, "--block-size", "2"]) == 0
            outputs.add(capsys.readouterr().out)
        assert len(outputs) == 1

    def test_custom_costs(self, fasta_pair, capsys):
        """Cost flags and an alphabet that treats U as ambiguous."""
        # IUPAC does not know U, so it is skipped: GATTACA vs GCATGC
        args = [*fasta_pair, "--substitution-cost", "2", "--unknown-cost", "1",
                "--indel-cost", "2", "--alphabet", "iupac"]
        assert cli.main(args) == 0
        assert capsys.readouterr().out == "8\n"

    def test_identical_files(self, tmp_path, capsys):
        """Identical sequences in differently formatted files."""
        a = tmp_path / "a.fasta"
        b = tmp_path / "b.txt"
        a.write_text(">x1\nACGT\nACGT\n")
        b.write_text("ACGTACGT")
        assert cli.main([str(a), str(b)]) == 0
        assert capsys.readouterr().out == "0\n"

    def test_time_flag(self, fasta_pair, capsys):
        """Timing goes to stderr."""
        assert cli.main([*fasta_pair, "--time"]) == 0
        assert "ms" in capsys.readouterr().err

    def test_logs_skipped_characters(self, fasta_pair, caplog):
        """Skipped character counts are logged."""
        with caplog.at_level(logging.INFO, logger="nwdist.cli"):
            cli.main(list(fasta_pair))
        assert "skipped" in caplog.text

    def test_missing_file(self, tmp_path, fasta_pair):
        """Unreadable files exit with status 1."""
        assert cli.main([fasta_pair[0], str(tmp_path / "missing.fasta")]) == 1

    def test_allocation_failure(self, fasta_pair, monkeypatch):
        """Allocation failures exit with status 1."""
        def fail(self, *args):
            raise TableAllocationError(1, 1)

        monkeypatch.setattr("nwdist.engine.DistanceEngine._prepare", fail)
        assert cli.main(list(fasta_pair)) == 1

    def test_invalid_block_size(self, fasta_pair):
        """Non-positive block sizes are usage errors."""
        with pytest.raises(SystemExit) as excinfo:
            cli.main([*fasta_pair, "--block-size", "0"])
        assert excinfo.value.code == 2

    def test_negative_cost(self, fasta_pair):
        """Negative costs are usage errors."""
        with pytest.raises(SystemExit) as excinfo:
            cli.main([*fasta_pair, "--indel-cost", "-1"])
        assert excinfo.value.code == 2
