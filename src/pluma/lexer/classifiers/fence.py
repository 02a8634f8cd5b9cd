"""Code fence classifier mixin."""

from __future__ import annotations

from pluma.lexer import patterns
from pluma.tokens import CodeFenceToken


class FenceClassifierMixin:
    """Mixin providing code fence classification."""

    def _try_classify_code_fence(self, line: str) -> CodeFenceToken | None:
        """Try to classify line as a code fence.

        Three or more leading backticks. The exact backtick count is kept so
        the AST generator can match closers against openers; whatever follows
        the backticks is the info string.

        Returns:
            CodeFenceToken if line starts with a fence, None otherwise.
        """
        match = patterns.CODE_FENCE.match(line)
        if match is None:
            return None
        return CodeFenceToken(
            raw=line,
            fence_length=len(match.group(1)),
            info=match.group(2).strip(),
        )
