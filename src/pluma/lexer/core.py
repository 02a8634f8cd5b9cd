"""Line-classifying lexer.

Splits the source on newlines and classifies each line by first-match
precedence. Most rules consume exactly one line; tables, details blocks and
admonitions consume a run of lines and emit a single token for it.

The lexer performs no nesting: list hierarchy, definition grouping and code
fence pairing are all left to the AST generator.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; configuration is read from a ContextVar.

"""

from __future__ import annotations

from collections.abc import Iterator

from pluma.config import get_parse_config
from pluma.lexer.classifiers import (
    ContainerClassifierMixin,
    DefinitionClassifierMixin,
    FenceClassifierMixin,
    FootnoteClassifierMixin,
    HeadingClassifierMixin,
    ImageClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    TableClassifierMixin,
    ThematicClassifierMixin,
)
from pluma.tokens import BlankToken, Footnotes, LineToken, ParagraphToken
from pluma.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    FootnoteClassifierMixin,
    TableClassifierMixin,
    HeadingClassifierMixin,
    FenceClassifierMixin,
    ContainerClassifierMixin,
    ImageClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
    DefinitionClassifierMixin,
):
    """Classify Markdown source lines into a flat token stream.

    Precedence, first match wins:

    1. ``//`` comment (dropped)
    2. ``[^id]: text`` footnote definition (recorded, no token)
    3. blank line
    4. pipe table (needs a separator row on the next line)
    5. heading
    6. code fence
    7. ``=== summary`` details block
    8. ``:::kind [subtype]`` admonition block
    9. ``-![alt](url)`` captioned image
    10. unordered / ordered list item
    11. ``>`` blockquote
    12. horizontal rule
    13. ``: text`` definition
    14. paragraph

    Usage:
        >>> lexer = Lexer("# Title\\n[^1]: Note")
        >>> tokens = list(lexer.tokenize())
        >>> tokens[0].content, lexer.footnotes
        ('Title', {'1': 'Note'})

    """

    __slots__ = (
        "_lines",
        "_pos",
        "_footnotes",
        "_indent_width",
        "_strip_comments",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
        """
        config = get_parse_config()
        self._lines: list[str] = source.split("\n")
        self._pos = 0
        self._footnotes: Footnotes = {}
        self._indent_width = config.indent_width
        self._strip_comments = config.strip_comments

    @property
    def footnotes(self) -> Footnotes:
        """Footnote definitions collected so far (complete once tokenize() is exhausted)."""
        return self._footnotes

    def tokenize(self) -> Iterator[LineToken]:
        """Tokenize source into token stream.

        Yields:
            Token objects in source order
        """
        lines = self._lines
        while self._pos < len(lines):
            token, consumed = self._classify(self._pos)
            self._pos += consumed
            if token is not None:
                yield token

    def _classify(self, index: int) -> tuple[LineToken | None, int]:
        """Classify the line at ``index``.

        Returns:
            (token or None, number of lines consumed)
        """
        lines = self._lines
        line = lines[index]

        if self._strip_comments and line.lstrip().startswith("//"):
            return None, 1

        footnote = self._try_classify_footnote_def(line)
        if footnote is not None:
            identifier, text = footnote
            self._footnotes[identifier] = text
            return None, 1

        if not line.strip():
            return BlankToken(raw=line), 1

        if self._is_table_candidate(line):
            table = self._try_classify_table(lines, index)
            if table is not None:
                logger.debug("table at line %d spans %d lines", index + 1, table[1])
                return table

        token: LineToken | None = self._try_classify_heading(line)
        if token is None:
            token = self._try_classify_code_fence(line)
        if token is not None:
            return token, 1

        container = self._try_classify_details(lines, index) or self._try_classify_admonition(
            lines, index
        )
        if container is not None:
            logger.debug(
                "%s block at line %d spans %d lines",
                container[0].type.value,
                index + 1,
                container[1],
            )
            return container

        token = (
            self._try_classify_captioned_image(line)
            or self._try_classify_list_item(line)
            or self._try_classify_blockquote(line)
            or self._try_classify_horizontal_rule(line)
            or self._try_classify_definition(line)
        )
        if token is not None:
            return token, 1

        return ParagraphToken(raw=line, content=line), 1


def tokenize(text: str) -> tuple[tuple[LineToken, ...], Footnotes]:
    """Tokenize Markdown text.

    Never fails: any input produces a token sequence.

    Args:
        text: Markdown source text

    Returns:
        (tokens, footnotes) where footnotes maps footnote id to definition
        text. A later definition of the same id overwrites an earlier one.
    """
    lexer = Lexer(text)
    tokens = tuple(lexer.tokenize())
    return tokens, lexer.footnotes
