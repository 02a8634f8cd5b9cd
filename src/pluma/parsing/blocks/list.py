"""List parsing for Pluma AST generator.

Builds a list tree from a run of flat ``list_item`` tokens using their
``(ordered, level)`` pairs.

Nesting Rules:
- Items sharing the run's starting level and kind become siblings.
- An item one or more levels deeper than the item before it starts a
  nested list owned by that previous item.
- A shallower item, a change of list kind at the same level, a deeper item
  with no item to attach to, or any non-list token ends the current list.

Malformed indentation never raises; it only ends lists earlier.
"""

from __future__ import annotations

from pluma.nodes import List, ListItem
from pluma.tokens import ListItemToken


class ListParsingMixin:
    """Mixin for list tree construction.

    Required Host Methods:
        - _current -> LineToken | None
        - _advance(count) -> LineToken | None
        - _parse_inline(text) -> str

    """

    def _parse_list(self, first: ListItemToken) -> List:
        """Parse the list whose first item is the current token.

        Cursor ends on the first token that does not belong to this list.
        """
        level = first.level
        ordered = first.ordered
        items: list[ListItem] = []

        token = first
        while isinstance(token, ListItemToken):
            if token.level != level or token.ordered != ordered:
                break

            content = self._parse_inline(token.content)
            checked = token.checked
            token = self._advance()

            sublist = None
            if isinstance(token, ListItemToken) and token.level > level:
                sublist = self._parse_list(token)
                token = self._current

            items.append(ListItem(content=content, checked=checked, sublist=sublist))

        return List(items=tuple(items), ordered=ordered)
