"""Blockquote classifier mixin."""

from __future__ import annotations

from pluma.lexer import patterns
from pluma.tokens import BlockquoteToken


class QuoteClassifierMixin:
    """Mixin providing blockquote classification."""

    def _try_classify_blockquote(self, line: str) -> BlockquoteToken | None:
        """``>`` followed by whitespace; marker and whitespace are stripped.

        A bare ``>`` or ``>text`` is not a blockquote.
        """
        if patterns.BLOCKQUOTE.match(line) is None:
            return None
        return BlockquoteToken(raw=line, content=patterns.BLOCKQUOTE_MARKER.sub("", line, count=1))
