"""Inspect command for CLI."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003

import typer
from rich.console import Console
from rich.table import Table

from rankcache.cli.formatting import format_token
from rankcache.cli.main import (
    CACHE_DIR_OPTION,
    NO_CACHE_OPTION,
    app,
    exit_with_error,
    resolve_cli_config,
)
from rankcache.core.exceptions import RankcacheError


@app.command()
def inspect(
    source: str = typer.Argument(
        help="Local path or http(s):// URL, or a resource path with --embedded-dir."
    ),
    embedded_dir: Path | None = typer.Option(
        None,
        "--embedded-dir",
        help="Read SOURCE from this resource directory instead of the cache.",
    ),
    top: int = typer.Option(
        0,
        "--top",
        "-n",
        min=0,
        help="Also list the N lowest-ranked tokens.",
    ),
    cache_dir: Path | None = CACHE_DIR_OPTION,
    no_cache: bool = NO_CACHE_OPTION,
) -> None:
    """Load a rank table and summarize it."""
    from rankcache.adapters.resources import DirectoryResources
    from rankcache.core.services import RankLoader, load_from_embedded

    try:
        if embedded_dir is not None:
            ranks = load_from_embedded(DirectoryResources(embedded_dir), source)
        else:
            config = resolve_cli_config(cache_dir, no_cache)
            ranks = RankLoader.from_config(config).load(source)
    except RankcacheError as e:
        exit_with_error(e)

    # Build Rich summary table
    summary = Table(title=source, show_header=False)
    summary.add_column("Field")
    summary.add_column("Value")
    summary.add_row("Entries", str(len(ranks)))
    if ranks:
        values = ranks.values()
        summary.add_row("Min rank", str(min(values)))
        summary.add_row("Max rank", str(max(values)))
        summary.add_row("Longest token", f"{max(len(t) for t in ranks)} bytes")

    console = Console(force_terminal=True)
    console.print(summary)

    if top and ranks:
        tokens = Table()
        tokens.add_column("Rank", justify="right")
        tokens.add_column("Token")
        for token, rank in sorted(ranks.items(), key=lambda item: item[1])[:top]:
            tokens.add_row(str(rank), format_token(token))
        console.print(tokens)
