"""HTML renderer using StringBuilder pattern.

Maps each AST node to markup. Leaf nodes already carry compiled inline HTML,
so the renderer only adds block structure; the one place it escapes text is
code block content (and attribute values it builds itself).

Output shape:
- top-level blocks are joined with newlines
- a footnote appendix ``<div class="footnotes"><ol>...</ol></div>`` follows
  the body whenever the footnote table is non-empty
- serialize_document() wraps the fragment in a complete HTML document

Thread Safety:
HtmlRenderer holds no per-render state; the footnote table is an argument
of each render() call. One instance can be shared across threads.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

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
    Paragraph,
    Table,
    ThematicBreak,
)
from pluma.parsing.inline import compile_inline
from pluma.stringbuilder import StringBuilder
from pluma.tokens import Alignment
from pluma.utils.logger import get_logger

logger = get_logger(__name__)

CHECKED_BOX = "☑"
UNCHECKED_BOX = "☐"


def html_escape(s: str) -> str:
    """Escape exactly the five characters ``& < > " '``."""
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


@dataclass(frozen=True, slots=True)
class DocumentOptions:
    """Options for wrapping a fragment in a full HTML document.

    Attributes:
        title: Text of the <title> element
        stylesheet: Stylesheet path or URL; None for no stylesheet
        embed_stylesheet: Inline the stylesheet file's contents in a <style>
            element instead of linking to it
        lang: Value of the <html lang> attribute

    """

    title: str = "Document"
    stylesheet: str | Path | None = None
    embed_stylesheet: bool = False
    lang: str = "en"


class HtmlRenderer:
    """Render AST nodes to HTML.

    Usage:
        >>> from pluma.nodes import Heading
        >>> HtmlRenderer().render([Heading(level=1, content="Hi")])
        '<h1>Hi</h1>'

    """

    __slots__ = ("_checked_box", "_unchecked_box")

    def __init__(
        self,
        *,
        checked_box: str = CHECKED_BOX,
        unchecked_box: str = UNCHECKED_BOX,
    ) -> None:
        """Initialize renderer.

        Args:
            checked_box: Glyph prefixed to ``[x]`` list items
            unchecked_box: Glyph prefixed to ``[ ]`` list items
        """
        self._checked_box = checked_box
        self._unchecked_box = unchecked_box

    def render(
        self,
        nodes: Sequence[Block],
        footnotes: Mapping[str, str] | None = None,
    ) -> str:
        """Render blocks to an HTML fragment.

        Args:
            nodes: Top-level blocks from the AST generator
            footnotes: Footnote table; a non-empty table adds the appendix

        Returns:
            HTML fragment
        """
        sb = StringBuilder()
        self._render_blocks(nodes, sb)
        if footnotes:
            if sb:
                sb.append("\n")
            self._render_footnotes(footnotes, sb)
        return sb.build()

    def render_document(
        self,
        nodes: Sequence[Block],
        footnotes: Mapping[str, str] | None = None,
        options: DocumentOptions | None = None,
    ) -> str:
        """Render blocks wrapped in a complete HTML document.

        An unreadable stylesheet requested for embedding degrades to a
        ``<link rel="stylesheet">`` reference.
        """
        options = options or DocumentOptions()
        sb = StringBuilder()
        sb.append_line("<!DOCTYPE html>")
        sb.append_line(f'<html lang="{html_escape(options.lang)}">')
        sb.append_line("<head>")
        sb.append_line('<meta charset="UTF-8">')
        sb.append_line('<meta name="viewport" content="width=device-width, initial-scale=1.0">')
        sb.append_line(f"<title>{html_escape(options.title)}</title>")
        if options.stylesheet is not None:
            sb.append_line(self._stylesheet_html(options.stylesheet, options.embed_stylesheet))
        sb.append_line("</head>")
        sb.append_line("<body>")
        sb.append_line(self.render(nodes, footnotes))
        sb.append_line("</body>")
        sb.append_line("</html>")
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_blocks(self, nodes: Sequence[Block], sb: StringBuilder) -> None:
        for i, node in enumerate(nodes):
            if i:
                sb.append("\n")
            self._render_block(node, sb)

    def _render_block(self, node: Block, sb: StringBuilder) -> None:
        """Render a block node."""
        match node:
            case Heading():
                sb.append(f"<h{node.level}>{node.content}</h{node.level}>")
            case Paragraph():
                sb.append(f"<p>{node.content}</p>")
            case BlockQuote():
                sb.append(f"<blockquote>{node.content}</blockquote>")
            case CodeBlock():
                sb.append(f"<pre><code>{html_escape(node.code)}</code></pre>")
            case ThematicBreak():
                sb.append("<hr />")
            case List():
                self._render_list(node, sb)
            case Table():
                self._render_table(node, sb)
            case DefinitionList():
                self._render_definition_list(node, sb)
            case Admonition():
                classes = " ".join(filter(None, ("admonition", node.kind, node.subtype)))
                self._render_container(
                    f'<aside class="{html_escape(classes)}">', node.children, "</aside>", sb
                )
            case Details():
                self._render_container(
                    f"<details>\n<summary>{node.summary}</summary>", node.children, "</details>", sb
                )
            case CaptionedImage():
                alt = html_escape(node.alt)
                sb.append(
                    f'<figure><img src="{html_escape(node.url)}" alt="{alt}" />'
                    f"<figcaption>{alt}</figcaption></figure>"
                )

    def _render_list(self, lst: List, sb: StringBuilder) -> None:
        """Render ordered or unordered list, nested lists inside their <li>."""
        tag = "ol" if lst.ordered else "ul"
        sb.append(f"<{tag}>")
        for item in lst.items:
            self._render_list_item(item, sb)
        sb.append(f"</{tag}>")

    def _render_list_item(self, item: ListItem, sb: StringBuilder) -> None:
        sb.append("<li>")
        if item.checked is not None:
            sb.append(self._checked_box if item.checked else self._unchecked_box).append(" ")
        sb.append(item.content)
        if item.sublist is not None:
            self._render_list(item.sublist, sb)
        sb.append("</li>")

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        """Render pipe table; only non-left columns get an inline style."""
        alignments = table.alignments
        sb.append("<table><thead><tr>")
        for i, header in enumerate(table.headers):
            sb.append(f"<th{_align_style(alignments, i)}>{header}</th>")
        sb.append("</tr></thead><tbody>")
        for row in table.rows:
            sb.append("<tr>")
            for i, cell in enumerate(row):
                sb.append(f"<td{_align_style(alignments, i)}>{cell}</td>")
            sb.append("</tr>")
        sb.append("</tbody></table>")

    def _render_definition_list(self, dl: DefinitionList, sb: StringBuilder) -> None:
        sb.append("<dl>")
        for child in dl.children:
            match child:
                case DefinitionTerm():
                    sb.append(f"<dt>{child.content}</dt>")
                case DefinitionDescription():
                    sb.append(f"<dd>{child.content}</dd>")
        sb.append("</dl>")

    def _render_container(
        self, opening: str, children: Sequence[Block], closing: str, sb: StringBuilder
    ) -> None:
        """Opening markup, each child block, closing markup; one per line."""
        sb.append_line(opening)
        if children:
            self._render_blocks(children, sb)
            sb.append("\n")
        sb.append(closing)

    # =========================================================================
    # Footnotes and document helpers
    # =========================================================================

    def _render_footnotes(self, footnotes: Mapping[str, str], sb: StringBuilder) -> None:
        """Render the appendix: one entry per footnote in table order."""
        sb.append('<div class="footnotes"><ol>')
        for identifier, text in footnotes.items():
            esc_id = html_escape(identifier)
            sb.append(
                f'<li id="footnote-{esc_id}">{compile_inline(text)} '
                f'<a href="#ref-{esc_id}">↩</a></li>'
            )
        sb.append("</ol></div>")

    def _stylesheet_html(self, stylesheet: str | Path, embed: bool) -> str:
        href = html_escape(str(stylesheet))
        if not embed:
            return f'<link rel="stylesheet" href="{href}">'
        try:
            css = Path(stylesheet).read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Cannot embed stylesheet %s (%s); linking to it instead", stylesheet, exc)
            return f'<link rel="stylesheet" href="{href}">'
        return f"<style>\n{css.rstrip()}\n</style>"


def _align_style(alignments: Sequence[Alignment], index: int) -> str:
    align = alignments[index] if index < len(alignments) else "left"
    return "" if align == "left" else f' style="text-align: {align}"'


def serialize(nodes: Sequence[Block], footnotes: Mapping[str, str] | None = None) -> str:
    """Render AST nodes to an HTML fragment with the default renderer."""
    return HtmlRenderer().render(nodes, footnotes)


def serialize_document(
    nodes: Sequence[Block],
    footnotes: Mapping[str, str] | None = None,
    options: DocumentOptions | None = None,
) -> str:
    """Render AST nodes to a complete HTML document with the default renderer."""
    return HtmlRenderer().render_document(nodes, footnotes, options)
