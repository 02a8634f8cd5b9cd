"""List item classifier mixin."""

from __future__ import annotations

from pluma.lexer import patterns
from pluma.tokens import ListItemToken


class ListClassifierMixin:
    """Mixin providing list item classification.

    Each item is classified on its own; the nesting between items is
    resolved by the AST generator from ``level``.
    """

    # Set by the Lexer class
    _indent_width: int

    def _nesting_level(self, line: str) -> int:
        """Leading whitespace characters divided by the indent width."""
        match = patterns.LEADING_WHITESPACE.match(line)
        indent = len(match.group(0)) if match else 0
        return indent // self._indent_width

    def _try_classify_list_item(self, line: str) -> ListItemToken | None:
        """Try to classify line as an unordered or ordered list item.

        Unordered: ``-`` or ``*``, whitespace, optional ``[ ]``/``[x]``/``[X]``
        checkbox, then text. Ordered: digits, ``.``, whitespace, text.

        Returns:
            ListItemToken if valid item, None otherwise.
        """
        match = patterns.UNORDERED_ITEM.match(line)
        if match is not None:
            box = match.group(1)
            return ListItemToken(
                raw=line,
                ordered=False,
                level=self._nesting_level(line),
                content=match.group(2),
                checked=None if box is None else box.lower() == "x",
            )

        match = patterns.ORDERED_ITEM.match(line)
        if match is not None:
            return ListItemToken(
                raw=line,
                ordered=True,
                level=self._nesting_level(line),
                content=match.group(1),
            )

        return None
