"""Pipe table classifier mixin."""

from __future__ import annotations

from collections.abc import Sequence

from pluma.lexer import patterns
from pluma.tokens import Alignment, TableToken


def split_row(line: str) -> list[str]:
    """Split a row on ``|`` and trim each cell.

    The first and last segments are always dropped, so rows are expected to
    start and end with a pipe. A row without its trailing pipe loses its last
    cell.
    """
    return [cell.strip() for cell in line.split("|")[1:-1]]


def is_separator_row(line: str) -> bool:
    """Every cell of the row looks like ``---``, ``:--``, ``--:`` or ``:-:``."""
    if "|" not in line:
        return False
    return all(
        patterns.TABLE_SEPARATOR_CELL.match(cell.strip())
        for cell in line.split("|")[1:-1]
    )


def column_alignment(cell: str) -> Alignment:
    """Alignment for one separator cell."""
    cell = cell.strip()
    if cell.startswith(":") and cell.endswith(":"):
        return "center"
    if cell.endswith(":") and not cell.startswith(":"):
        return "right"
    return "left"


class TableClassifierMixin:
    """Mixin providing pipe table classification."""

    def _is_table_candidate(self, line: str) -> bool:
        """Line contains a pipe and is not a fence, quote or list line."""
        return (
            "|" in line
            and patterns.FENCE_PREFIX.match(line) is None
            and not line.startswith(">")
            and patterns.UNORDERED_PREFIX.match(line) is None
            and patterns.ORDERED_PREFIX.match(line) is None
        )

    def _try_classify_table(
        self, lines: Sequence[str], start: int
    ) -> tuple[TableToken, int] | None:
        """Try to capture a table starting at ``lines[start]``.

        Confirmed only when the next line is a separator row. Body rows are
        the following contiguous non-blank lines containing ``|``; capture
        stops at the first line that is blank, has no pipe, or yields no cells.

        Args:
            lines: All source lines
            start: Index of the header line

        Returns:
            (token, lines_consumed) if a table was found, None otherwise.
        """
        if start + 1 >= len(lines):
            return None
        header_line = lines[start]
        separator_line = lines[start + 1]
        if not is_separator_row(separator_line):
            return None

        rows: list[tuple[str, ...]] = []
        end = start + 2
        while end < len(lines):
            line = lines[end]
            if not line.strip() or "|" not in line:
                break
            cells = split_row(line)
            if not cells:
                break
            rows.append(tuple(cells))
            end += 1

        token = TableToken(
            raw="\n".join(lines[start:end]),
            headers=tuple(split_row(header_line)),
            rows=tuple(rows),
            alignments=tuple(column_alignment(c) for c in separator_line.split("|")[1:-1]),
        )
        return token, end - start
