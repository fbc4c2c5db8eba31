"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate correctness deeply - just that commands work.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_cli_command(args: list[str], timeout: int = 30) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        args: Arguments after 'python -m tutor_insights.cli.main'
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    result = subprocess.run(
        [sys.executable, "-m", "tutor_insights.cli.main", *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=timeout,
        env={**os.environ, "COLUMNS": "200", "PYTHONIOENCODING": "utf-8"},
    )

    return result.returncode, result.stdout, result.stderr


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self):
        code, stdout, stderr = run_cli_command(["--help"])

        assert code == 0, f"Help failed: {stderr}"
        assert "classify" in stdout
        assert "analyze" in stdout

    def test_analyze_help(self):
        code, stdout, stderr = run_cli_command(["analyze", "--help"])

        assert code == 0, f"Analyze help failed: {stderr}"


class TestCLICommands:

    def test_classify(self):
        code, stdout, stderr = run_cli_command(
            ["classify", "Explain Shor's algorithm", "--theme", "quantum-computing"]
        )

        assert code == 0, f"Classify failed: {stderr}"
        assert "Quantum Algorithms" in stdout
        assert "intermediate" in stdout

    def test_themes(self):
        code, stdout, stderr = run_cli_command(["themes"])

        assert code == 0, f"Themes failed: {stderr}"
        assert "quantum-computing" in stdout

    def test_analyze_json(self, sample_export):
        code, stdout, stderr = run_cli_command(["analyze", str(sample_export), "--json"])

        assert code == 0, f"Analyze failed: {stderr}"
        data = json.loads(stdout)
        assert data["summary"]["total_questions"] == 4
        assert [i["concept"] for i in data["insights"]] == [
            "Calculus",
            "Linear Algebra",
            "Quantum Algorithms",
            "Statistics",
        ]

    def test_analyze_table(self, sample_export):
        code, stdout, stderr = run_cli_command(["analyze", str(sample_export)])

        assert code == 0, f"Analyze failed: {stderr}"
        assert "Topic Insights" in stdout

    def test_analyze_missing_file(self, tmp_path):
        code, stdout, stderr = run_cli_command(["analyze", str(tmp_path / "nope.json")])

        assert code == 1
        assert "not found" in stdout


class TestAPILauncher:
    """Root launcher must import its settings from any working directory."""

    def test_launcher_imports_outside_project_root(self, tmp_path):
        launcher = PROJECT_ROOT / "main.py"
        env = {k: v for k, v in os.environ.items() if k != "PYTHONPATH"}

        result = subprocess.run(
            [sys.executable, "-c", f"import runpy; runpy.run_path({str(launcher)!r})"],
            cwd=tmp_path,
            capture_output=True,
            text=True,
            timeout=30,
            env=env,
        )

        assert result.returncode == 0, f"Launcher import failed: {result.stderr}"
