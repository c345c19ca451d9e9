"""Command line interface for the LLM docs builder."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from honestdocs.bundle.aggregator import DocsAggregator
from honestdocs.config import AppConfig
from honestdocs.utils.files import FilesystemError


console = Console()
app = typer.Typer(help="Build llms.txt bundles from the HonestJS documentation")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def build(
    docs_dir: Optional[Path] = typer.Option(None, "--docs-dir", help="Markdown source directory"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Directory for generated files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Write llms.txt, llms-full.txt and llms-small.txt."""
    _setup_logging(verbose)
    config = AppConfig(
        docs_dir=docs_dir if docs_dir is not None else AppConfig().docs_dir,
        output_dir=output_dir if output_dir is not None else AppConfig().output_dir,
    )

    aggregator = DocsAggregator(config, base_dir=Path.cwd())
    console.print(f"Reading docs from [bold]{aggregator.docs_dir}[/bold]...")
    try:
        stats = aggregator.run()
    except FilesystemError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Output")
    table.add_column("Documents")
    table.add_column("Bytes")
    for artifact in stats.artifacts:
        table.add_row(str(artifact.path), str(artifact.documents), str(artifact.size))

    console.print(table)
