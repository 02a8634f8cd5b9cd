"""Details and admonition classifier mixin.

Both container kinds capture their inner lines verbatim; the AST generator
later runs the captured text through a fresh tokenize + generate cycle.
The two kinds close differently:

- details (``=== summary`` ... ``===``) tracks depth, so details blocks nest
- admonition (``:::kind`` ... ``:::``) closes at the first bare ``:::``
"""

from __future__ import annotations

from collections.abc import Sequence

from pluma.lexer import patterns
from pluma.tokens import AdmonitionToken, DetailsToken
from pluma.utils.logger import get_logger

logger = get_logger(__name__)


def _details_summary(line: str) -> str | None:
    """Summary text of a details opener, or None if line is not an opener."""
    match = patterns.DETAILS_OPEN.match(line)
    if match is None:
        return None
    summary = match.group(1).strip()
    return summary or None


class ContainerClassifierMixin:
    """Mixin providing details/admonition block capture."""

    def _try_classify_details(
        self, lines: Sequence[str], start: int
    ) -> tuple[DetailsToken, int] | None:
        """Capture a details block opened at ``lines[start]``.

        Inner lines that are themselves openers raise the depth; bare ``===``
        lowers it. The block ends when depth returns to zero, or at end of
        input.

        Returns:
            (token, lines_consumed) if line opens a details block, None otherwise.
        """
        summary = _details_summary(lines[start])
        if summary is None:
            return None

        inner: list[str] = []
        depth = 1
        end = start + 1
        closed = False
        while end < len(lines):
            line = lines[end]
            end += 1
            if _details_summary(line) is not None:
                depth += 1
            elif patterns.DETAILS_CLOSE.match(line):
                depth -= 1
                if depth == 0:
                    closed = True
                    break
            inner.append(line)

        if not closed:
            logger.debug("details block %r runs to end of input", summary)

        token = DetailsToken(
            raw="\n".join(lines[start:end]),
            summary=summary,
            inner_text="\n".join(inner).strip(),
        )
        return token, end - start

    def _try_classify_admonition(
        self, lines: Sequence[str], start: int
    ) -> tuple[AdmonitionToken, int] | None:
        """Capture an admonition block opened at ``lines[start]``.

        No depth tracking: the first line that is exactly ``:::`` closes the
        block, even when the body itself opened another ``:::kind``.

        Returns:
            (token, lines_consumed) if line opens an admonition, None otherwise.
        """
        match = patterns.ADMONITION_OPEN.match(lines[start])
        if match is None:
            return None

        end = start + 1
        while end < len(lines) and patterns.ADMONITION_CLOSE.match(lines[end]) is None:
            end += 1
        inner = lines[start + 1 : end]
        if end < len(lines):
            end += 1  # closing :::
        else:
            logger.debug("admonition block %r runs to end of input", match.group(1))

        token = AdmonitionToken(
            raw="\n".join(lines[start:end]),
            kind=match.group(1),
            subtype=match.group(2),
            inner_text="\n".join(inner).strip(),
        )
        return token, end - start
