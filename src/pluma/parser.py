"""Single-pass AST generator.

Consumes the flat token sequence from the lexer and builds typed AST nodes.
One forward walk with an explicit cursor; grouping rules (code fences,
lists, definition lists) advance it by more than one token.

Architecture:
The generator uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token cursor
- `InlineParsingMixin`: Inline compilation of leaf text
- `BlockParsingMixin`: Code fences, lists, definition lists, containers

Thread Safety:
ASTGenerator instances are single-use. The footnote table is passed in
explicitly and only read. The resulting AST is immutable.

"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pluma.nodes import (
    Block,
    BlockQuote,
    CaptionedImage,
    Heading,
    Paragraph,
    Table,
    ThematicBreak,
)
from pluma.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from pluma.tokens import (
    AdmonitionToken,
    BlankToken,
    BlockquoteToken,
    CaptionedImageToken,
    CodeFenceToken,
    DefinitionToken,
    DetailsToken,
    HeadingToken,
    HorizontalRuleToken,
    LineToken,
    ListItemToken,
    ParagraphToken,
    TableToken,
)
from pluma.utils.logger import get_logger

logger = get_logger(__name__)


class ASTGenerator(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Build an AST from a token sequence.

    Usage:
        >>> from pluma.lexer import tokenize
        >>> tokens, footnotes = tokenize("- a\\n  - b")
        >>> ASTGenerator(tokens, footnotes).generate()
        (List(items=(ListItem(content='a', ...),), ordered=False),)

    """

    __slots__ = ("_tokens", "_pos", "_footnotes")

    def __init__(
        self,
        tokens: Sequence[LineToken],
        footnotes: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize generator.

        Args:
            tokens: Token sequence from the lexer
            footnotes: Footnote table from the lexer (read-only)
        """
        self._tokens = tokens
        self._pos = 0
        self._footnotes: Mapping[str, str] = footnotes if footnotes is not None else {}

    def generate(self) -> tuple[Block, ...]:
        """Walk the whole token sequence.

        Returns:
            Top-level block nodes in source order
        """
        blocks: list[Block] = []
        while not self._at_end():
            block = self._parse_block()
            if block is not None:
                blocks.append(block)
        return tuple(blocks)

    def _parse_block(self) -> Block | None:
        """Parse the block at the cursor and move past everything it used."""
        token = self._current
        match token:
            case CodeFenceToken():
                return self._parse_code_block(token)
            case ListItemToken():
                return self._parse_list(token)
            case ParagraphToken():
                return self._parse_paragraph_or_definitions(token)
            case BlankToken():
                self._advance()
                return None

        self._advance()
        match token:
            case HeadingToken():
                return Heading(level=token.level, content=self._parse_inline(token.content))
            case BlockquoteToken():
                return BlockQuote(content=self._parse_inline(token.content))
            case HorizontalRuleToken():
                return ThematicBreak()
            case TableToken():
                return Table(
                    headers=tuple(self._parse_inline(cell) for cell in token.headers),
                    rows=tuple(
                        tuple(self._parse_inline(cell) for cell in row) for row in token.rows
                    ),
                    alignments=token.alignments,
                )
            case CaptionedImageToken():
                return CaptionedImage(alt=token.alt, url=token.url)
            case AdmonitionToken():
                return self._parse_admonition(token)
            case DetailsToken():
                return self._parse_details(token)
            case DefinitionToken():
                logger.debug("definition without a term: %r", token.raw)
                return Paragraph(content=self._parse_inline(token.raw))
        return None


def generate(
    tokens: Sequence[LineToken],
    footnotes: Mapping[str, str] | None = None,
) -> tuple[Block, ...]:
    """Build the AST for a token sequence.

    Never fails: any token sequence produces a (possibly empty) node tuple.

    Args:
        tokens: Token sequence from :func:`pluma.lexer.tokenize`
        footnotes: Footnote table from the same tokenize call

    Returns:
        Top-level block nodes
    """
    return ASTGenerator(tokens, footnotes).generate()
