"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from rich.text import Text


def format_size(size_bytes: int) -> str:
    """Format size in bytes to human-readable format."""
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} TB"


def format_token(token: bytes) -> Text:
    """Render token bytes for display.

    Tokens that decode as UTF-8 are shown as text; anything else is shown
    as its Python bytes literal, dimmed.
    """
    try:
        return Text(repr(token.decode("utf-8")))
    except UnicodeDecodeError:
        return Text(repr(token), style="dim")
