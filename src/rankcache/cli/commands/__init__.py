"""CLI subcommands registered on the shared Typer app."""
