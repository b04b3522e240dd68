"""CLI commands for rankcache."""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, NoReturn

import typer

from rankcache.core.exceptions import RankcacheError


if TYPE_CHECKING:
    from rankcache.core.models import CacheConfig


app = typer.Typer(
    name="rankcache",
    help="Fetch, cache and inspect BPE rank files.",
    no_args_is_help=True,
)


@app.callback()
def _configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log cache hits, misses and writes to stderr.",
    ),
) -> None:
    """Fetch, cache and inspect BPE rank files."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def resolve_cli_config(cache_dir: Path | None, no_cache: bool) -> CacheConfig:
    """Build the cache config from CLI options, falling back to the environment."""
    from rankcache.core.models import CacheConfig

    if no_cache:
        return CacheConfig.disabled()
    if cache_dir is not None:
        return CacheConfig(directory=cache_dir)
    return CacheConfig.from_env()


def exit_with_error(error: RankcacheError) -> NoReturn:
    """Print a library error and its recovery hint, then exit 1."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    raise typer.Exit(1)


CACHE_DIR_OPTION = typer.Option(
    None,
    "--cache-dir",
    help="Cache directory (overrides TIKTOKEN_CACHE_DIR / DATA_GYM_CACHE_DIR).",
)
NO_CACHE_OPTION = typer.Option(
    False,
    "--no-cache",
    help="Bypass the cache entirely.",
)


@app.command()
def fetch(
    source: str = typer.Argument(help="Local path or http(s):// URL of the rank file."),
    cache_dir: Path | None = CACHE_DIR_OPTION,
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Do not show a download progress bar.",
    ),
) -> None:
    """Download a rank file into the cache and print its cache path."""
    from rankcache.adapters.cache import FileCache
    from rankcache.adapters.sources import create_reader
    from rankcache.progress import RichProgressReporter

    config = resolve_cli_config(cache_dir, no_cache=False)
    if not config.enabled:
        typer.echo("Caching is disabled; nothing to fetch.", err=True)
        raise typer.Exit(1)

    try:
        if quiet:
            cache = FileCache(config, create_reader())
            contents = cache.get_or_fetch(source)
        else:
            with RichProgressReporter(transient=True) as progress:
                cache = FileCache(config, create_reader(progress=progress))
                contents = cache.get_or_fetch(source)
    except RankcacheError as e:
        exit_with_error(e)

    typer.echo(str(cache.path_for(source)))
    if not quiet:
        typer.echo(f"{len(contents)} bytes", err=True)


@app.command()
def key(
    source: str = typer.Argument(help="Local path or http(s):// URL of the rank file."),
    cache_dir: Path | None = CACHE_DIR_OPTION,
) -> None:
    """Show the cache key and cache path for a source."""
    from rankcache.core.models import cache_key

    config = resolve_cli_config(cache_dir, no_cache=False)
    typer.echo(f"Key: {cache_key(source)}")
    if config.directory is None:
        typer.echo("Path: (caching disabled)")
        return
    path = config.directory / cache_key(source)
    state = "cached" if path.exists() else "missing"
    typer.echo(f"Path: {path}")
    typer.echo(f"Status: {state}")


@app.command()
def info(
    cache_dir: Path | None = CACHE_DIR_OPTION,
) -> None:
    """Show the cache directory and its size."""
    from rankcache.adapters.cache import FileCache
    from rankcache.adapters.sources import create_reader
    from rankcache.cli.formatting import format_size

    config = resolve_cli_config(cache_dir, no_cache=False)
    if config.directory is None:
        typer.echo("Cache directory: (caching disabled)")
        return

    stats = FileCache(config, create_reader()).statistics()
    typer.echo(f"Cache directory: {config.directory}")
    typer.echo(f"  Files: {stats['file_count']}")
    typer.echo(f"  Size: {format_size(stats['total_size'])}")


def main() -> None:
    """Entry point for the CLI."""
    app()
