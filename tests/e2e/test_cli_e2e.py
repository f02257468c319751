"""End-to-end tests for the orgast command-line interface.

This module runs the CLI as a subprocess, the way it is used from a shell,
and checks the output of every subcommand.
"""

import json
import logging
import subprocess
import sys
from pathlib import Path

import pytest
from utils import SAMPLE_ORG, cleanup_test_dir, create_test_temp_dir


@pytest.mark.e2e
@pytest.mark.cli
class TestCLIEndToEnd:
    """End-to-end tests for the orgast subcommands."""

    def setup_method(self):
        """Create a temporary directory holding a sample document."""
        self.temp_dir = create_test_temp_dir()
        self.org_file = self.temp_dir / "notes.org"
        self.org_file.write_text(SAMPLE_ORG, encoding="utf-8")

    def teardown_method(self):
        """Remove the temporary directory."""
        cleanup_test_dir(self.temp_dir)

    def _run_cli(self, args: list[str], input_text: str | None = None) -> subprocess.CompletedProcess:
        """Run the CLI as a subprocess.

        Parameters
        ----------
        args : list[str]
            Command line arguments to pass to the CLI
        input_text : str, optional
            Text sent to standard input

        Returns
        -------
        subprocess.CompletedProcess
            Result of the subprocess execution

        """
        cmd = [sys.executable, "-m", "orgast", "--no-config"] + args
        return subprocess.run(cmd, cwd=self.temp_dir, input=input_text, capture_output=True, text=True)

    def test_parse_prints_json(self):
        """Test that parse prints a versioned JSON AST."""
        result = self._run_cli(["parse", str(self.org_file)])

        assert result.returncode == 0
        payload = json.loads(result.stdout)
        assert payload["schema_version"] == 1
        assert payload["type"] == "org-data"
        assert payload["keywords"]["TITLE"] == "Project Notes"
        assert payload["children"][0]["todo_keyword"] == "TODO"

    def test_parse_without_positions(self):
        """Test --no-positions removes position data."""
        result = self._run_cli(["parse", str(self.org_file), "--no-positions", "--indent", "0"])

        assert result.returncode == 0
        assert '"position"' not in result.stdout
        assert len(result.stdout.strip().splitlines()) == 1

    def test_parse_custom_keywords(self):
        """Test --todo and --done."""
        self.org_file.write_text("* NEXT Call\n* WAITING Reply\n", encoding="utf-8")

        result = self._run_cli(["parse", str(self.org_file), "--todo", "NEXT", "--done", "WAITING"])

        assert result.returncode == 0
        headlines = json.loads(result.stdout)["children"]
        assert [(h["todo_keyword"], h["todo_type"]) for h in headlines] == [("NEXT", "todo"), ("WAITING", "done")]

    def test_parse_to_file(self):
        """Test writing the JSON to --out."""
        out = self.temp_dir / "ast.json"

        result = self._run_cli(["parse", str(self.org_file), "--out", str(out)])

        assert result.returncode == 0
        assert result.stdout == ""
        assert json.loads(out.read_text(encoding="utf-8"))["type"] == "org-data"

    def test_serialize_round_trip(self):
        """Test that serialize output parses back to the same text."""
        first = self._run_cli(["serialize", str(self.org_file)])
        assert first.returncode == 0
        assert first.stdout.startswith("#+TITLE: Project Notes\n")

        again = self.temp_dir / "again.org"
        again.write_text(first.stdout, encoding="utf-8")
        second = self._run_cli(["serialize", str(again)])
        assert second.stdout == first.stdout

    def test_serialize_stdin(self):
        """Test reading the document from standard input."""
        result = self._run_cli(["serialize", "-", "--no-trailing-newline"], input_text="* TODO Task\nBody\n")

        assert result.returncode == 0
        assert result.stdout == "* TODO Task\nBody"

    def test_outline(self):
        """Test the headline tree output."""
        result = self._run_cli(["outline", str(self.org_file)])

        assert result.returncode == 0
        assert "Project Notes" in result.stdout
        assert "Write the report" in result.stdout
        assert "Collect data" in result.stdout

    def test_locate(self):
        """Test listing the nodes at a position."""
        self.org_file.write_text("* A\nbody *b*\n", encoding="utf-8")

        result = self._run_cli(["locate", str(self.org_file), "2:7"])

        assert result.returncode == 0
        lines = [line.strip() for line in result.stdout.splitlines()]
        assert lines[0].startswith("org-data")
        assert any(line.startswith("bold") for line in lines)
        assert lines[-1].startswith("plain-text 2:7-2:8")

    def test_config_file(self):
        """Test that options are read from a configuration file."""
        config = self.temp_dir / "orgast.yaml"
        config.write_text("parser:\n  todo_keywords: NEXT\n", encoding="utf-8")
        self.org_file.write_text("* NEXT Call\n", encoding="utf-8")

        cmd = [sys.executable, "-m", "orgast", "--config", str(config), "parse", str(self.org_file)]
        result = subprocess.run(cmd, cwd=self.temp_dir, capture_output=True, text=True)

        assert result.returncode == 0
        assert json.loads(result.stdout)["children"][0]["todo_keyword"] == "NEXT"

    def test_version(self):
        """Test --version."""
        result = self._run_cli(["--version"])

        assert result.returncode == 0
        assert result.stdout.startswith("orgast ")


@pytest.mark.e2e
@pytest.mark.cli
class TestMainInProcess:
    """Tests calling main() directly."""

    def test_parse(self, sample_org_file: Path, capsys):
        """Test that main returns 0 and prints JSON."""
        from orgast.cli import main

        assert main(["--no-config", "parse", str(sample_org_file)]) == 0
        assert json.loads(capsys.readouterr().out)["type"] == "org-data"

    def test_no_extract_metadata(self, sample_org_file: Path, capsys):
        """Test that --no-extract-metadata leaves document metadata empty."""
        from orgast.cli import main

        assert main(["--no-config", "parse", str(sample_org_file), "--no-extract-metadata"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document["metadata"] == {}
        assert document["keywords"]["TITLE"] == "Project Notes"

    def test_serialize_to_file(self, sample_org_file: Path, temp_dir: Path):
        """Test serialize --out."""
        from orgast.cli import main

        out = temp_dir / "out.org"
        assert main(["--no-config", "serialize", str(sample_org_file), "-o", str(out)]) == 0
        assert out.read_text(encoding="utf-8").startswith("#+TITLE: Project Notes")

    def test_debug_logging(self, sample_org_file: Path, temp_dir: Path):
        """Test --log-file with debug logging."""
        from orgast.cli import main

        log_file = temp_dir / "orgast.log"
        args = ["--no-config", "--log-level", "debug", "--log-file", str(log_file), "outline", str(sample_org_file)]
        try:
            assert main(args) == 0
            assert "headlines" in log_file.read_text(encoding="utf-8")
        finally:
            root = logging.getLogger()
            for handler in list(root.handlers):
                handler.close()
                root.removeHandler(handler)
            root.setLevel(logging.WARNING)
