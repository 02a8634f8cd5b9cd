"""Code block parsing for Pluma AST generator.

Pairs code fences: everything between an opening fence and the next fence
that is at least as long is taken verbatim from the tokens' raw text,
whatever kind the lexer gave those lines.
"""

from __future__ import annotations

from pluma.nodes import CodeBlock
from pluma.tokens import CodeFenceToken
from pluma.utils.logger import get_logger

logger = get_logger(__name__)


class CodeBlockParsingMixin:
    """Mixin for fenced code blocks.

    Required Host Methods:
        - _advance(count) -> LineToken | None
        - _current -> LineToken | None

    """

    def _parse_code_block(self, opener: CodeFenceToken) -> CodeBlock:
        """Parse from an opening fence through its closing fence.

        A fence shorter than the opener is ordinary content, which lets a
        four-backtick block contain a three-backtick example. A block left
        open at end of input keeps what it accumulated.

        Cursor starts on the opener and ends after the closer.
        """
        lines: list[str] = []
        token = self._advance()
        while token is not None:
            if isinstance(token, CodeFenceToken) and token.fence_length >= opener.fence_length:
                self._advance()
                break
            lines.append(token.raw)
            token = self._advance()
        else:
            logger.debug("code fence %r is not closed before end of input", opener.raw)

        return CodeBlock(code="\n".join(lines).strip(), info=opener.info)
