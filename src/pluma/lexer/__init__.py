"""Line-classifying lexer for Pluma.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (mixin composition + cursor)
├── patterns.py          # Compiled line patterns
└── classifiers/         # Block-kind classification mixins
    ├── footnote.py      # [^id]: text
    ├── table.py         # Pipe tables
    ├── heading.py       # # Heading
    ├── fence.py         # ``` fences
    ├── container.py     # === details / :::admonition
    ├── definition.py    # -![alt](url) and ": definition"
    ├── list.py          # - item / 1. item
    ├── quote.py         # > quote
    └── thematic.py      # --- / *** / ___

Usage:
    >>> from pluma.lexer import tokenize
    >>> tokens, footnotes = tokenize("# Hello\\n\\nWorld")
    >>> [t.type.value for t in tokens]
    ['heading', 'blank', 'paragraph']

"""

from pluma.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
