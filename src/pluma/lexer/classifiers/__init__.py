"""Line classifiers for the Pluma lexer.

Each classifier is a mixin that decides whether a line (or, for tables and
containers, a run of lines starting at a given index) matches one block
kind. Classifiers never move the lexer's cursor; the Lexer commits.
"""

from pluma.lexer.classifiers.container import ContainerClassifierMixin
from pluma.lexer.classifiers.definition import (
    DefinitionClassifierMixin,
    ImageClassifierMixin,
)
from pluma.lexer.classifiers.fence import FenceClassifierMixin
from pluma.lexer.classifiers.footnote import FootnoteClassifierMixin
from pluma.lexer.classifiers.heading import HeadingClassifierMixin
from pluma.lexer.classifiers.list import ListClassifierMixin
from pluma.lexer.classifiers.quote import QuoteClassifierMixin
from pluma.lexer.classifiers.table import TableClassifierMixin
from pluma.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "ContainerClassifierMixin",
    "DefinitionClassifierMixin",
    "FenceClassifierMixin",
    "FootnoteClassifierMixin",
    "HeadingClassifierMixin",
    "ImageClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "TableClassifierMixin",
    "ThematicClassifierMixin",
]
