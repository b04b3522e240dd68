"""Rank-table text format.

A rank table is newline-delimited text, one ``<base64-token> <rank>`` record
per line. Tokens use the standard base64 alphabet; ranks are decimal
non-negative integers.
"""

from __future__ import annotations

import base64
from pathlib import Path
from typing import TYPE_CHECKING

from rankcache.core.exceptions import ParseError


if TYPE_CHECKING:
    from collections.abc import Mapping

    from rankcache.core.models import RankTable


def parse_rank_table(data: bytes) -> RankTable:
    """Parse rank-table bytes into a token -> rank mapping.

    Empty lines are skipped. Only the first two space-separated fields of a
    line are read; anything after the second field is ignored. When a token
    appears on several lines, the last line wins.

    Args:
        data: Raw file contents.

    Returns:
        Mapping from decoded token bytes to rank.

    Raises:
        ParseError: If the payload is not UTF-8, a line has fewer than two
            fields, a token is not valid base64, or a rank is not a
            non-negative decimal integer.

    Example:
        >>> parse_rank_table(b"AAA= 0\\nQUJD 1\\n")
        {b'\\x00\\x00': 0, b'ABC': 1}
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError("Rank table is not valid UTF-8", cause=e) from e

    ranks: RankTable = {}
    for line_number, line in enumerate(text.split("\n"), 1):
        if not line:
            continue

        parts = line.split(" ")
        if len(parts) < 2:
            raise ParseError(
                f"Expected '<token> <rank>' on line {line_number}: {line!r}",
                line_number=line_number,
                line=line,
            )

        try:
            token = base64.b64decode(parts[0], validate=True)
        except ValueError as e:
            raise ParseError(
                f"Invalid base64 token on line {line_number}: {parts[0]!r}",
                line_number=line_number,
                line=line,
                cause=e,
            ) from e

        # int() would also accept signs, underscores and surrounding whitespace
        if not (parts[1].isascii() and parts[1].isdigit()):
            raise ParseError(
                f"Invalid rank on line {line_number}: {parts[1]!r}",
                line_number=line_number,
                line=line,
            )

        ranks[token] = int(parts[1])

    return ranks


def dump_rank_table(ranks: Mapping[bytes, int]) -> bytes:
    """Serialize a rank table, ordered by rank.

    Args:
        ranks: Mapping from token bytes to rank.

    Returns:
        UTF-8 bytes in the format read by parse_rank_table(), one record per
        line with a trailing newline.
    """
    lines = [
        f"{base64.b64encode(token).decode('ascii')} {rank}\n"
        for token, rank in sorted(ranks.items(), key=lambda item: item[1])
    ]
    return "".join(lines).encode("utf-8")


def write_rank_table(ranks: Mapping[bytes, int], path: Path | str) -> None:
    """Write a rank table to a file.

    Args:
        ranks: Mapping from token bytes to rank.
        path: Destination file. Parent directories must exist.
    """
    Path(path).write_bytes(dump_rank_table(ranks))
