"""Definition list parsing for Pluma AST generator."""

from __future__ import annotations

from pluma.nodes import (
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Paragraph,
)
from pluma.tokens import BlankToken, DefinitionToken, ParagraphToken


class DefinitionParsingMixin:
    """Mixin for paragraph / definition list decisions.

    Required Host Methods:
        - _peek(offset) -> LineToken | None
        - _advance(count) -> LineToken | None
        - _parse_inline(text) -> str

    """

    def _parse_paragraph_or_definitions(
        self, token: ParagraphToken
    ) -> Paragraph | DefinitionList:
        """Parse a paragraph, grouping any definitions that follow it.

        Definitions may follow the term directly or after exactly one blank
        line. Without at least one definition the paragraph stays a paragraph.

        Cursor starts on the paragraph and ends after the last consumed token.
        """
        term = self._parse_inline(token.content)

        offset = 1
        if isinstance(self._peek(offset), BlankToken) and isinstance(
            self._peek(offset + 1), DefinitionToken
        ):
            offset += 1

        descriptions: list[DefinitionDescription] = []
        following = self._peek(offset)
        while isinstance(following, DefinitionToken):
            descriptions.append(
                DefinitionDescription(content=self._parse_inline(following.content))
            )
            offset += 1
            following = self._peek(offset)

        if not descriptions:
            self._advance()
            return Paragraph(content=term)

        self._advance(offset)
        return DefinitionList(children=(DefinitionTerm(content=term), *descriptions))
