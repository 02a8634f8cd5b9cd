"""Container block parsing for Pluma AST generator.

Details and admonition blocks hold raw inner text captured by the lexer.
That text is run through the whole pipeline again (fresh lexer, fresh
generator), so containers can hold any block content, including further
containers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from pluma.nodes import Admonition, Details
from pluma.tokens import AdmonitionToken, DetailsToken

if TYPE_CHECKING:
    from pluma.nodes import Block


class ContainerParsingMixin:
    """Mixin for details/admonition blocks.

    Required Host Attributes:
        - _footnotes: Mapping[str, str]

    Required Host Methods:
        - _parse_inline(text) -> str

    """

    _footnotes: Mapping[str, str]

    def _parse_nested_content(self, text: str) -> tuple[Block, ...]:
        """Tokenize and generate ``text`` as an independent block sequence.

        The outer footnote table is used for resolving references; footnote
        definitions written inside a container only apply to that container's
        own tokenize call and are not added to the outer table.
        """
        from pluma.lexer import tokenize
        from pluma.parser import ASTGenerator

        tokens, _inner_footnotes = tokenize(text)
        return ASTGenerator(tokens, self._footnotes).generate()

    def _parse_admonition(self, token: AdmonitionToken) -> Admonition:
        return Admonition(
            kind=token.kind,
            subtype=token.subtype,
            children=self._parse_nested_content(token.inner_text),
        )

    def _parse_details(self, token: DetailsToken) -> Details:
        return Details(
            summary=self._parse_inline(token.summary),
            children=self._parse_nested_content(token.inner_text),
        )
