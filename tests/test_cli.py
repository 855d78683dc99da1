"""
Tests for the graph-stats command line.

Run with: pytest tests/test_cli.py -v
"""

import gzip
import json
import sys

import pytest
from loguru import logger

from graph_stats.cli import main


@pytest.fixture(autouse=True)
def restore_logger():
    """The CLI reconfigures loguru sinks; reset them after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def chain_file(tmp_path):
    path = tmp_path / "chain.txt"
    path.write_text("0 1\n1 2\n2 3\n3 4\n", encoding="utf-8")
    return path


class TestMain:
    """End-to-end CLI runs."""

    def test_text_report(self, chain_file, capsys):
        exit_code = main([str(chain_file), "--source", "0", "--target", "4"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Shortest Path between nodes 0 and 4: [0, 1, 2, 3, 4]" in out
        assert "Mean Degree: 1.00" in out

    def test_json_report(self, chain_file, capsys):
        exit_code = main([str(chain_file), "--json", "--top", "1"])
        payload = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert payload["node_count"] == 4
        assert len(payload["top_in_degree"]) == 1
        assert payload["shortest_path"] is None

    def test_all_universe(self, chain_file, capsys):
        exit_code = main([str(chain_file), "--json", "--universe", "all"])
        payload = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert payload["node_count"] == 5
        assert payload["mean_degree"] == pytest.approx(0.8)

    def test_malformed_file(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("0 1\nzero 2\n", encoding="utf-8")

        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"0 1\n\xff\xfe 2\n")

        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""

    def test_truncated_gzip(self, tmp_path):
        data = gzip.compress(b"0 1\n" * 1000)
        path = tmp_path / "partial.txt.gz"
        path.write_bytes(data[: len(data) // 2])

        assert main([str(path)]) == 1

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.txt")]) == 1

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")

        assert main([str(path)]) == 1

    def test_source_requires_target(self, chain_file):
        with pytest.raises(SystemExit) as exc_info:
            main([str(chain_file), "--source", "0"])

        assert exc_info.value.code == 2

    def test_top_must_be_positive(self, chain_file):
        with pytest.raises(SystemExit) as exc_info:
            main([str(chain_file), "--top", "0"])

        assert exc_info.value.code == 2
