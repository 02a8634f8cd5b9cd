"""Block parsing subsystem for Pluma AST generator.

Provides mixins for the block rules that consume more than one token or
recurse:
- code: fence pairing with length-sensitive closing
- list: list tree construction from indentation levels
- definition: term + ``: definition`` grouping
- container: details/admonition recursion

"""

from pluma.parsing.blocks.code import CodeBlockParsingMixin
from pluma.parsing.blocks.container import ContainerParsingMixin
from pluma.parsing.blocks.definition import DefinitionParsingMixin
from pluma.parsing.blocks.list import ListParsingMixin


class BlockParsingMixin(
    CodeBlockParsingMixin,
    ListParsingMixin,
    DefinitionParsingMixin,
    ContainerParsingMixin,
):
    """Combined block parsing mixin.

    Required Host Attributes:
        - _tokens: Sequence[LineToken]
        - _pos: int
        - _footnotes: Mapping[str, str]

    Required Host Methods:
        - _peek(offset) -> LineToken | None
        - _advance(count) -> LineToken | None
        - _parse_inline(text) -> str

    """


__all__ = [
    "BlockParsingMixin",
    "CodeBlockParsingMixin",
    "ContainerParsingMixin",
    "DefinitionParsingMixin",
    "ListParsingMixin",
]
