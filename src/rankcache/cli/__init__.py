"""CLI for rankcache."""

# Import commands to register them with the app
# These imports have side effects (registering commands with @app.command())
from rankcache.cli.commands import inspect as _inspect_module  # noqa: F401
from rankcache.cli.main import app, main


__all__ = ["app", "main"]
