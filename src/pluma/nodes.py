"""Typed AST nodes for Pluma.

All AST nodes are frozen dataclasses with slots for:
- Immutability: built once per generate() call, never mutated afterwards
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: the renderer dispatches with ``match`` on node class

Leaf nodes store their text as an already compiled inline HTML fragment
(``content``); inline markup is never re-applied at render time. Container
nodes own their children as tuples, so a node is never shared between
parents.

Node Hierarchy:
Node (base)
├── Heading
├── Paragraph
├── BlockQuote
├── CodeBlock
├── ThematicBreak
├── List
├── ListItem
├── Table
├── DefinitionList
├── DefinitionTerm
├── DefinitionDescription
├── Admonition
├── Details
└── CaptionedImage

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from pluma.tokens import Alignment


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Heading.

    Markdown: ## Title
    HTML: <h2>Title</h2>

    """

    level: int
    content: str


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph (one source line).

    HTML: <p>text</p>

    """

    content: str


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote line.

    Markdown: > quoted text
    HTML: <blockquote>quoted text</blockquote>

    """

    content: str


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    ``code`` is the verbatim (unescaped) block text; escaping happens in the
    renderer. ``info`` is kept for inspection and is not rendered.

    """

    code: str
    info: str = ""


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Horizontal rule.

    Markdown: --- or *** or ___
    HTML: <hr />

    """


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item, optionally owning one nested list.

    HTML: <li>content<ul>...</ul></li>

    """

    content: str
    checked: bool | None = None
    sublist: List | None = None


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    HTML: <ul>/<ol> with <li> children

    """

    items: tuple[ListItem, ...]
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table with compiled header and body cells.

    Markdown:
        | A | B |
        |---|:-:|
        | 1 | 2 |

    """

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    alignments: tuple[Alignment, ...]


@dataclass(frozen=True, slots=True)
class DefinitionTerm(Node):
    """Term of a definition list (<dt>)."""

    content: str


@dataclass(frozen=True, slots=True)
class DefinitionDescription(Node):
    """Description of a definition list (<dd>)."""

    content: str


@dataclass(frozen=True, slots=True)
class DefinitionList(Node):
    """Definition list: one term followed by its descriptions.

    Markdown:
        term
        : first definition
        : second definition

    """

    children: tuple[DefinitionTerm | DefinitionDescription, ...]


@dataclass(frozen=True, slots=True)
class Admonition(Node):
    """Call-out container.

    Markdown:
        :::warning danger
        Body with **blocks**
        :::

    HTML: <aside class="admonition warning danger">...</aside>

    """

    kind: str
    subtype: str | None
    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class Details(Node):
    """Collapsible container.

    Markdown:
        === Summary
        Body
        ===

    HTML: <details><summary>Summary</summary>...</details>

    """

    summary: str
    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class CaptionedImage(Node):
    """Image with caption.

    Markdown: -![alt](url)
    HTML: <figure><img ... /><figcaption>alt</figcaption></figure>

    """

    alt: str
    url: str


# PEP 695 type alias for nodes that may appear in a block sequence
Block: TypeAlias = (
    Heading
    | Paragraph
    | BlockQuote
    | CodeBlock
    | ThematicBreak
    | List
    | Table
    | DefinitionList
    | Admonition
    | Details
    | CaptionedImage
)
