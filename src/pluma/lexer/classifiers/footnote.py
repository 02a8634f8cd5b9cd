"""Footnote definition classifier mixin."""

from __future__ import annotations

from pluma.lexer import patterns


class FootnoteClassifierMixin:
    """Mixin providing footnote definition classification.

    Footnote definitions never become tokens: they are removed from the
    stream and recorded in the lexer's footnote table.
    """

    def _try_classify_footnote_def(self, line: str) -> tuple[str, str] | None:
        """Try to classify line as footnote definition.

        Format: [^identifier]: content

        Returns:
            (identifier, content) if valid, None otherwise.
        """
        match = patterns.FOOTNOTE_DEF.match(line)
        if match is None:
            return None
        return match.group(1), match.group(2)
