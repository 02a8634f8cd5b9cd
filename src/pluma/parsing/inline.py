"""Inline compilation for Pluma.

Turns the text of a leaf block into an HTML fragment by applying a fixed
sequence of regex rewrites. Order matters:

1. backslash escapes are swapped for indexed placeholders first, so an
   escaped character can never be picked up by any later rule
2. footnote references ``[^id]`` are swapped for placeholders before the
   link rule sees their brackets
3. ruby, emphasis (triple, double, single), strikethrough, code spans,
   images, links
4. footnote placeholders are resolved (or restored to ``[^id]``)
5. escape placeholders are restored last

The result is stored on the AST node and never re-processed.

Thread Safety:
compile_inline is a pure function of (text, footnotes).

"""

from __future__ import annotations

import re
from collections.abc import Mapping

# Placeholder delimiters are Unicode specials-block code points
# that do not occur in ordinary text.
_OPEN = "\ufff0"
_CLOSE = "\ufff1"

_ESCAPE = re.compile(r"\\(.)")
_FOOTNOTE_REF = re.compile(r"\[\^([^\]]+)\]")
_ESCAPE_PLACEHOLDER = re.compile(_OPEN + r"ESCAPE(\d+)" + _CLOSE)
_FOOTNOTE_PLACEHOLDER = re.compile(_OPEN + r"FOOTNOTE(\d+)" + _CLOSE)

# (pattern, replacement) in application order
_MARKUP_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    # Ruby/furigana: {base}(reading)
    (re.compile(r"\{([^}]+)\}\(([^)]+)\)"), r"<ruby>\1<rt>\2</rt></ruby>"),
    # Bold + italic
    (re.compile(r"\*\*\*(.+?)\*\*\*"), r"<strong><em>\1</em></strong>"),
    (re.compile(r"___(.+?)___"), r"<strong><em>\1</em></strong>"),
    # Bold
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"__(.+?)__"), r"<strong>\1</strong>"),
    # Italic
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"_(.+?)_"), r"<em>\1</em>"),
    # Strikethrough
    (re.compile(r"~~(.+?)~~"), r"<del>\1</del>"),
    # Code span
    (re.compile(r"`([^`]+)`"), r"<code>\1</code>"),
    # Image, before links so "![" is not read as a link
    (re.compile(r"!\[([^\]]*)\]\(([^)]+)\)"), r'<img src="\2" alt="\1" />'),
    # Link
    (re.compile(r"\[(.+?)\]\((.+?)\)"), r'<a href="\2">\1</a>'),
)


def footnote_ref_html(identifier: str) -> str:
    """Superscript link from a citation to its footnote entry."""
    return (
        f'<sup><a href="#footnote-{identifier}" id="ref-{identifier}">'
        f"[{identifier}]</a></sup>"
    )


def compile_inline(text: str, footnotes: Mapping[str, str] | None = None) -> str:
    """Compile inline Markdown in ``text`` to an HTML fragment.

    Args:
        text: Raw inline text of one leaf block
        footnotes: Known footnote ids; references to other ids are left as
            their literal ``[^id]`` text

    Returns:
        HTML fragment
    """
    footnotes = footnotes or {}

    escaped: list[str] = []

    def _hide_escape(match: re.Match[str]) -> str:
        escaped.append(match.group(1))
        return f"{_OPEN}ESCAPE{len(escaped) - 1}{_CLOSE}"

    references: list[str] = []

    def _hide_reference(match: re.Match[str]) -> str:
        references.append(match.group(1))
        return f"{_OPEN}FOOTNOTE{len(references) - 1}{_CLOSE}"

    result = _ESCAPE.sub(_hide_escape, text)
    result = _FOOTNOTE_REF.sub(_hide_reference, result)

    for pattern, replacement in _MARKUP_RULES:
        result = pattern.sub(replacement, result)

    # Placeholder-shaped text that was already in the source has no entry
    # and is left as it is.
    def _resolve_reference(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index >= len(references):
            return match.group(0)
        identifier = references[index]
        if identifier in footnotes:
            return footnote_ref_html(identifier)
        return f"[^{identifier}]"

    def _restore_escape(match: re.Match[str]) -> str:
        index = int(match.group(1))
        return escaped[index] if index < len(escaped) else match.group(0)

    result = _FOOTNOTE_PLACEHOLDER.sub(_resolve_reference, result)
    return _ESCAPE_PLACEHOLDER.sub(_restore_escape, result)


class InlineParsingMixin:
    """Mixin exposing the inline compiler to the AST generator.

    Required Host Attributes:
        - _footnotes: Mapping[str, str]

    """

    _footnotes: Mapping[str, str]

    def _parse_inline(self, text: str) -> str:
        """Compile one leaf text field against this generator's footnotes."""
        return compile_inline(text, self._footnotes)
