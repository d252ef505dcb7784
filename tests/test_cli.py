"""Tests for wordrank.cli module."""

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from wordrank.cli import main

BASIC = "this is a basic text is a basic text a basic text text"


@pytest.fixture
def basic_file(tmp_path: Path) -> Path:
    path = tmp_path / "basic.txt"
    path.write_text(BASIC, encoding="utf-8")
    return path


@pytest.fixture
def job_file(tmp_path: Path, basic_file: Path) -> Path:
    """Create a job config with one existing and one relative document."""
    (tmp_path / "texts").mkdir()
    (tmp_path / "texts" / "french.txt").write_text(
        "cul-de-säc?..Maître d'hôtel childrens' Maître child's¾something'", encoding="utf-8"
    )
    path = tmp_path / "job.yml"
    path.write_text(
        f"""
parameters:
  top: 2
documents:
  basic: {basic_file}
  french:
    path: texts/french.txt
    top: 1
"""
    )
    return path


class TestCLIBasic:
    """Basic CLI tests."""

    def test_ranks_single_file(self, basic_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test default output of one word per line."""
        with patch("sys.argv", ["wordrank", str(basic_file), "-n", "6"]):
            assert main() == 0

        assert capsys.readouterr().out.splitlines() == ["text", "basic", "a", "is", "this"]

    def test_counts_output(self, basic_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --counts prints tab-separated counts."""
        with patch("sys.argv", ["wordrank", str(basic_file), "-n", "2", "--counts"]):
            assert main() == 0

        assert capsys.readouterr().out.splitlines() == ["text\t4", "basic\t3"]

    def test_reads_stdin_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that no sources means standard input."""
        with patch("sys.argv", ["wordrank", "-n", "1"]), patch("sys.stdin", io.StringIO(BASIC)):
            assert main() == 0

        assert capsys.readouterr().out.splitlines() == ["text"]

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_non_positive_top_is_usage_error(self, basic_file: Path, value: str) -> None:
        """Test that -n must be positive."""
        with patch("sys.argv", ["wordrank", str(basic_file), "-n", value]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("value", ["0", "-2"])
    def test_non_positive_max_workers_is_usage_error(self, basic_file: Path, value: str) -> None:
        """Test that --max-workers must be positive."""
        argv = ["wordrank", str(basic_file), str(basic_file), "--parallel", "--max-workers", value]
        with patch("sys.argv", argv):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 2

    def test_missing_file_returns_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that an unreadable document gives exit code 1."""
        with patch("sys.argv", ["wordrank", str(tmp_path / "missing.txt")]):
            assert main() == 1

        assert "[FAILED]" in capsys.readouterr().err


class TestCLIConfig:
    """CLI tests using a job config."""

    def test_missing_config_returns_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a missing config file returns error code."""
        with patch("sys.argv", ["wordrank", "--config", "nonexistent.yml"]):
            assert main() == 1

        assert "Config file not found" in capsys.readouterr().err

    def test_invalid_config_returns_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a config without documents returns error code."""
        path = tmp_path / "job.yml"
        path.write_text("parameters:\n  top: 3\n")

        with patch("sys.argv", ["wordrank", "--config", str(path)]):
            assert main() == 1

        assert "Error:" in capsys.readouterr().err

    def test_multiple_documents_get_headers(
        self, job_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test per-document headers and per-document top."""
        with patch("sys.argv", ["wordrank", "--config", str(job_file)]):
            assert main() == 0

        assert capsys.readouterr().out.splitlines() == [
            "== basic ==",
            "text",
            "basic",
            "",
            "== french ==",
            "Maître",
        ]

    def test_set_overrides_top(self, job_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that --set changes the job-level top only."""
        with patch("sys.argv", ["wordrank", "--config", str(job_file), "--set", "top=1"]):
            assert main() == 0

        out = capsys.readouterr().out.splitlines()
        assert out[:2] == ["== basic ==", "text"]

    def test_invalid_set_returns_error(self, job_file: Path) -> None:
        """Test that a bad --set value returns error code."""
        with patch("sys.argv", ["wordrank", "--config", str(job_file), "--set", "top=zero"]):
            assert main() == 1

    def test_unknown_set_key_returns_error(
        self, job_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that --set only accepts known parameters."""
        with patch("sys.argv", ["wordrank", "--config", str(job_file), "--set", "ratio=0.5"]):
            assert main() == 1

        assert "Unknown parameter: ratio" in capsys.readouterr().err

    def test_zero_max_workers_in_config_returns_error(
        self, tmp_path: Path, basic_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that execution.max_workers: 0 is reported, not raised."""
        path = tmp_path / "workers.yml"
        path.write_text(f"documents:\n  basic: {basic_file}\nexecution:\n  max_workers: 0\n")

        with patch("sys.argv", ["wordrank", "--config", str(path), "--parallel"]):
            assert main() == 1

        assert "max_workers" in capsys.readouterr().err

    def test_json_output(self, job_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --json output in parallel mode."""
        with patch("sys.argv", ["wordrank", "--config", str(job_file), "--json", "--parallel"]):
            assert main() == 0

        data = json.loads(capsys.readouterr().out)
        assert [d["name"] for d in data] == ["basic", "french"]
        assert data[0]["words"] == [{"word": "text", "count": 4}, {"word": "basic", "count": 3}]
        assert data[1]["words"] == [{"word": "Maître", "count": 2}]
        assert data[1]["unique_words"] == 6

    def test_extra_sources_are_appended(
        self, job_file: Path, basic_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that positional sources join the configured documents."""
        with patch(
            "sys.argv", ["wordrank", "--config", str(job_file), str(basic_file), "--json"]
        ):
            assert main() == 0

        data = json.loads(capsys.readouterr().out)
        assert [d["name"] for d in data] == ["basic", "french", str(basic_file)]
