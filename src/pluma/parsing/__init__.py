"""Parsing subsystem for the Pluma AST generator.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token cursor (peek, advance)
- `InlineParsingMixin`: Fixed-order inline compilation
- `BlockParsingMixin`: Multi-token block rules (code, lists, definitions, containers)

"""

from pluma.parsing.blocks import BlockParsingMixin
from pluma.parsing.inline import InlineParsingMixin, compile_inline
from pluma.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "InlineParsingMixin",
    "BlockParsingMixin",
    "compile_inline",
]
