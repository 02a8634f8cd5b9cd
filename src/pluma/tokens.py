"""Token kinds produced by the Pluma lexer.

The lexer classifies each source line (or a multi-line block) into exactly
one token. Tokens form a flat, source-ordered sequence; nesting is resolved
later by the AST generator.

Every token kind is its own frozen dataclass carrying only the fields that
make sense for that kind. All of them keep ``raw``: the originating source
line, or the newline-joined lines of a multi-line capture (tables, details,
admonitions), so code fences can reproduce their content verbatim.

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Literal, TypeAlias

Alignment: TypeAlias = Literal["left", "center", "right"]


class TokenType(Enum):
    """Token record tags.

    Values are the tag strings used in the token JSON dump.

    """

    BLANK = "blank"
    HEADING = "heading"
    CODE_FENCE = "code_fence"
    LIST_ITEM = "list_item"
    TABLE = "table"
    BLOCKQUOTE = "blockquote"
    HORIZONTAL_RULE = "horizontal_rule"
    DETAILS = "details"
    ADMONITION = "admonition"
    IMAGE_CAPTIONED = "image_captioned"
    DEFINITION = "definition"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all tokens.

    Attributes:
        raw: Source text this token was classified from

    """

    type: ClassVar[TokenType]

    raw: str


@dataclass(frozen=True, slots=True)
class BlankToken(Token):
    """Empty or whitespace-only line."""

    type: ClassVar[TokenType] = TokenType.BLANK


@dataclass(frozen=True, slots=True)
class HeadingToken(Token):
    """ATX heading.

    Markdown: ## Title

    """

    type: ClassVar[TokenType] = TokenType.HEADING

    level: int
    content: str


@dataclass(frozen=True, slots=True)
class CodeFenceToken(Token):
    """Opening or closing code fence line.

    Markdown: ```` ```python ````

    Whether a fence opens or closes a block is decided by the AST generator,
    which compares ``fence_length`` against the currently open fence.

    """

    type: ClassVar[TokenType] = TokenType.CODE_FENCE

    fence_length: int
    info: str = ""


@dataclass(frozen=True, slots=True)
class ListItemToken(Token):
    """Single list item line.

    Markdown: ``  - [x] done`` or ``1. first``

    ``level`` is the nesting level derived from leading indentation;
    ``checked`` is None unless a ``[ ]``/``[x]`` checkbox is present.

    """

    type: ClassVar[TokenType] = TokenType.LIST_ITEM

    ordered: bool
    level: int
    content: str
    checked: bool | None = None


@dataclass(frozen=True, slots=True)
class TableToken(Token):
    """Pipe table: header row, separator row and body rows in one token."""

    type: ClassVar[TokenType] = TokenType.TABLE

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    alignments: tuple[Alignment, ...]


@dataclass(frozen=True, slots=True)
class BlockquoteToken(Token):
    """Blockquote line with the ``>`` marker stripped."""

    type: ClassVar[TokenType] = TokenType.BLOCKQUOTE

    content: str


@dataclass(frozen=True, slots=True)
class HorizontalRuleToken(Token):
    """Thematic break: ``---``, ``***`` or ``___``."""

    type: ClassVar[TokenType] = TokenType.HORIZONTAL_RULE


@dataclass(frozen=True, slots=True)
class DetailsToken(Token):
    """Collapsible block captured from ``=== summary`` up to its matching ``===``."""

    type: ClassVar[TokenType] = TokenType.DETAILS

    summary: str
    inner_text: str


@dataclass(frozen=True, slots=True)
class AdmonitionToken(Token):
    """Call-out block captured from ``:::kind [subtype]`` up to the first ``:::``."""

    type: ClassVar[TokenType] = TokenType.ADMONITION

    kind: str
    subtype: str | None
    inner_text: str


@dataclass(frozen=True, slots=True)
class CaptionedImageToken(Token):
    """Figure line: ``-![alt](url)``."""

    type: ClassVar[TokenType] = TokenType.IMAGE_CAPTIONED

    alt: str
    url: str


@dataclass(frozen=True, slots=True)
class DefinitionToken(Token):
    """Definition line ``: text``; grouped with its term by the AST generator."""

    type: ClassVar[TokenType] = TokenType.DEFINITION

    content: str


@dataclass(frozen=True, slots=True)
class ParagraphToken(Token):
    """Any line no other rule claimed."""

    type: ClassVar[TokenType] = TokenType.PARAGRAPH

    content: str


# PEP 695 type alias for every concrete token kind
LineToken: TypeAlias = (
    BlankToken
    | HeadingToken
    | CodeFenceToken
    | ListItemToken
    | TableToken
    | BlockquoteToken
    | HorizontalRuleToken
    | DetailsToken
    | AdmonitionToken
    | CaptionedImageToken
    | DefinitionToken
    | ParagraphToken
)

# Footnote id -> definition text, filled by the lexer
Footnotes: TypeAlias = dict[str, str]
