"""Heading classifier mixin."""

from __future__ import annotations

from pluma.lexer import patterns
from pluma.tokens import HeadingToken


class HeadingClassifierMixin:
    """Mixin providing heading classification."""

    def _try_classify_heading(self, line: str) -> HeadingToken | None:
        """Try to classify line as a heading.

        One to six ``#`` followed by required whitespace and text.
        Seven or more ``#`` never match and fall through to paragraph.

        Returns:
            HeadingToken if valid heading, None otherwise.
        """
        match = patterns.HEADING.match(line)
        if match is None:
            return None
        return HeadingToken(raw=line, level=len(match.group(1)), content=match.group(2))
