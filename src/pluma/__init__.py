"""
Pluma: a small Markdown-to-HTML converter.

Three explicit stages, each usable on its own:

    tokenize(text)               -> (tokens, footnotes)
    generate(tokens, footnotes)  -> AST nodes
    serialize(nodes, footnotes)  -> HTML fragment

Beyond the usual headings, lists, tables, code fences and emphasis, the
syntax covers task-list checkboxes, ruby annotations ``{base}(reading)``,
definition lists, footnotes, captioned images, and two container blocks:
collapsible ``=== summary`` details and ``:::kind`` admonitions.

Quick Start:
    >>> from pluma import convert
    >>> convert("# Hello **World**")
    '<h1>Hello <strong>World</strong></h1>'

    >>> # Or step by step
    >>> from pluma import tokenize, generate, serialize
    >>> tokens, footnotes = tokenize("Text[^1]\\n\\n[^1]: Note")
    >>> nodes = generate(tokens, footnotes)
    >>> html = serialize(nodes, footnotes)

No stage raises for any input string; malformed syntax degrades to
paragraphs or literal text.
"""

from pluma.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from pluma.errors import OutputWriteError, PlumaError, SourceReadError
from pluma.lexer import Lexer, tokenize
from pluma.nodes import (
    Admonition,
    Block,
    BlockQuote,
    CaptionedImage,
    CodeBlock,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Details,
    Heading,
    List,
    ListItem,
    Node,
    Paragraph,
    Table,
    ThematicBreak,
)
from pluma.parser import ASTGenerator, generate
from pluma.parsing.inline import compile_inline
from pluma.renderers.html import DocumentOptions, HtmlRenderer, serialize, serialize_document
from pluma.serialization import from_dict, from_json, to_dict, to_json
from pluma.tokens import Footnotes, LineToken, Token, TokenType

__version__ = "0.1.0"


def convert(
    text: str,
    *,
    document: bool = False,
    options: DocumentOptions | None = None,
) -> str:
    """Run the whole pipeline on ``text``.

    Args:
        text: Markdown source text
        document: Wrap the result in a complete HTML document
        options: Document options (only used when ``document`` is true)

    Returns:
        HTML fragment, or a full document

    Example:
        >>> convert("- [x] done")
        '<ul><li>☑ done</li></ul>'

    """
    tokens, footnotes = tokenize(text)
    nodes = generate(tokens, footnotes)
    if document:
        return serialize_document(nodes, footnotes, options)
    return serialize(nodes, footnotes)


class Markdown:
    """Converter bound to one parse configuration.

    Usage:
        >>> md = Markdown(ParseConfig(indent_width=4))
        >>> md("- a\\n    - b")
        '<ul><li>a<ul><li>b</li></ul></li></ul>'

        >>> # Access the intermediate stages
        >>> tokens, footnotes = md.tokenize("# Heading")
        >>> md.generate(tokens, footnotes)[0].level
        1

    Thread Safety:
        The config is applied through a ContextVar only for the duration of
        each tokenize() and generate() call. Instances are immutable and may be shared.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(self, config: ParseConfig | None = None) -> None:
        """Initialize converter.

        Args:
            config: Parse configuration (uses the defaults if None)
        """
        self._config = config or ParseConfig()
        self._renderer = HtmlRenderer()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, text: str) -> str:
        """Convert Markdown to an HTML fragment."""
        tokens, footnotes = self.tokenize(text)
        return self.serialize(self.generate(tokens, footnotes), footnotes)

    def tokenize(self, text: str) -> tuple[tuple[LineToken, ...], Footnotes]:
        with parse_config_context(self._config):
            return tokenize(text)

    def generate(
        self, tokens: tuple[LineToken, ...], footnotes: Footnotes | None = None
    ) -> tuple[Block, ...]:
        # Container bodies are re-tokenized during generation
        with parse_config_context(self._config):
            return generate(tokens, footnotes)

    def serialize(self, nodes: tuple[Block, ...], footnotes: Footnotes | None = None) -> str:
        return self._renderer.render(nodes, footnotes)

    def serialize_document(
        self,
        nodes: tuple[Block, ...],
        footnotes: Footnotes | None = None,
        options: DocumentOptions | None = None,
    ) -> str:
        return self._renderer.render_document(nodes, footnotes, options)


__all__ = [
    # Pipeline
    "tokenize",
    "generate",
    "serialize",
    "serialize_document",
    "convert",
    "compile_inline",
    "Markdown",
    "Lexer",
    "ASTGenerator",
    "HtmlRenderer",
    "DocumentOptions",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Tokens
    "Token",
    "TokenType",
    "LineToken",
    "Footnotes",
    # Nodes
    "Node",
    "Block",
    "Heading",
    "Paragraph",
    "BlockQuote",
    "CodeBlock",
    "ThematicBreak",
    "List",
    "ListItem",
    "Table",
    "DefinitionList",
    "DefinitionTerm",
    "DefinitionDescription",
    "Admonition",
    "Details",
    "CaptionedImage",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "PlumaError",
    "SourceReadError",
    "OutputWriteError",
    # Version
    "__version__",
]
