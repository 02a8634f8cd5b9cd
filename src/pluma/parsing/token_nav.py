"""Token cursor for the Pluma AST generator.

Provides mixin for token stream navigation: the generator walks the flat
token sequence with an explicit index, advancing by one token by default
and by a variable count when a grouping rule consumes several tokens.
"""

from __future__ import annotations

from collections.abc import Sequence

from pluma.tokens import LineToken


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[LineToken]
        - _pos: int

    """

    _tokens: Sequence[LineToken]
    _pos: int

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._pos >= len(self._tokens)

    @property
    def _current(self) -> LineToken | None:
        """Token under the cursor, or None at end of stream."""
        return self._peek(0)

    def _peek(self, offset: int = 1) -> LineToken | None:
        """Peek at token at offset from current position."""
        pos = self._pos + offset
        if 0 <= pos < len(self._tokens):
            return self._tokens[pos]
        return None

    def _advance(self, count: int = 1) -> LineToken | None:
        """Move the cursor forward and return the new current token."""
        self._pos += count
        return self._current
