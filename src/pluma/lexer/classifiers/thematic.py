"""Horizontal rule classifier mixin."""

from __future__ import annotations

from pluma.lexer import patterns
from pluma.tokens import HorizontalRuleToken


class ThematicClassifierMixin:
    """Mixin providing horizontal rule classification."""

    def _try_classify_horizontal_rule(self, line: str) -> HorizontalRuleToken | None:
        """Three or more of the same ``-``, ``*`` or ``_`` and nothing else."""
        if patterns.HORIZONTAL_RULE.match(line) is None:
            return None
        return HorizontalRuleToken(raw=line)
