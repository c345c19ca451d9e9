"""Tests for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from honestdocs.cli import _setup_logging, app


runner = CliRunner()


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("honestdocs.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode sets INFO level."""
        with patch("honestdocs.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO


class TestBuildCommand:
    """Tests for the build command."""

    def test_build_writes_outputs(self, tmp_path: Path) -> None:
        """Writes the three files and exits 0."""
        docs = tmp_path / "docs"
        (docs / "concepts").mkdir(parents=True)
        (docs / "introduction.md").write_text("---\ntitle: Intro\n---\nWelcome")
        (docs / "concepts" / "routing.md").write_text("Routes")
        out = tmp_path / "public"

        result = runner.invoke(app, ["--docs-dir", str(docs), "--output-dir", str(out)])

        assert result.exit_code == 0
        assert (out / "llms.txt").exists()
        assert "Routes" in (out / "llms-full.txt").read_text()
        assert "Routes" not in (out / "llms-small.txt").read_text()

    def test_build_verbose(self, tmp_path: Path) -> None:
        """Verbose flag is accepted."""
        docs = tmp_path / "docs"
        docs.mkdir()
        (docs / "a.md").write_text("A")

        result = runner.invoke(
            app, ["--docs-dir", str(docs), "--output-dir", str(tmp_path / "out"), "-v"]
        )
        assert result.exit_code == 0

    def test_build_missing_docs_dir(self, tmp_path: Path) -> None:
        """Missing docs directory exits non-zero with a message."""
        result = runner.invoke(
            app, ["--docs-dir", str(tmp_path / "missing"), "--output-dir", str(tmp_path / "out")]
        )

        assert result.exit_code == 1
        assert "Docs directory not found" in result.stdout
        assert not (tmp_path / "out").exists()

    @patch("honestdocs.cli.DocsAggregator")
    def test_build_defaults(self, mock_aggregator_class: MagicMock) -> None:
        """With no arguments the default config is used relative to cwd."""
        mock_aggregator = MagicMock()
        mock_aggregator.run.return_value.artifacts = []
        mock_aggregator_class.return_value = mock_aggregator

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        config = mock_aggregator_class.call_args[0][0]
        assert config.docs_dir == Path("docs")
        assert config.output_dir == Path("public")
        assert mock_aggregator_class.call_args[1]["base_dir"] == Path.cwd()
        mock_aggregator.run.assert_called_once()
