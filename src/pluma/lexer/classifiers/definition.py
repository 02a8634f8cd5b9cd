"""Definition line and captioned image classifier mixin."""

from __future__ import annotations

from pluma.lexer import patterns
from pluma.tokens import CaptionedImageToken, DefinitionToken


class DefinitionClassifierMixin:
    """Mixin providing definition-line classification."""

    def _try_classify_definition(self, line: str) -> DefinitionToken | None:
        """``:`` followed by whitespace and text.

        Grouping with the preceding term happens in the AST generator.
        """
        match = patterns.DEFINITION.match(line)
        if match is None:
            return None
        return DefinitionToken(raw=line, content=match.group(1))


class ImageClassifierMixin:
    """Mixin providing captioned image classification."""

    def _try_classify_captioned_image(self, line: str) -> CaptionedImageToken | None:
        """The whole line must be ``-![alt](url)``."""
        match = patterns.CAPTIONED_IMAGE.match(line)
        if match is None:
            return None
        return CaptionedImageToken(raw=line, alt=match.group(1), url=match.group(2))
