"""Tests for the HTML renderer.

Nodes are built by hand so each block kind is checked in isolation.
"""

import logging

import pytest

from pluma.nodes import (
    Admonition,
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
from pluma.renderers import DocumentOptions, HtmlRenderer, serialize, serialize_document
from pluma.renderers.html import html_escape


class TestBlocks:
    """One node kind at a time."""

    @pytest.mark.parametrize("level", [1, 3, 6])
    def test_heading(self, level: int) -> None:
        assert serialize([Heading(level=level, content="Hi")]) == f"<h{level}>Hi</h{level}>"

    def test_paragraph_content_is_not_escaped(self) -> None:
        assert serialize([Paragraph(content="<em>x</em>")]) == "<p><em>x</em></p>"

    def test_blockquote(self) -> None:
        assert serialize([BlockQuote(content="Quote")]) == "<blockquote>Quote</blockquote>"

    def test_thematic_break(self) -> None:
        assert serialize([ThematicBreak()]) == "<hr />"

    def test_code_is_escaped(self) -> None:
        node = CodeBlock(code="<a href=\"x\">&'</a>")
        assert serialize([node]) == (
            "<pre><code>&lt;a href=&quot;x&quot;&gt;&amp;&#39;&lt;/a&gt;</code></pre>"
        )

    def test_definition_list(self) -> None:
        node = DefinitionList(
            children=(
                DefinitionTerm(content="Term"),
                DefinitionDescription(content="One"),
                DefinitionDescription(content="Two"),
            )
        )
        assert serialize([node]) == "<dl><dt>Term</dt><dd>One</dd><dd>Two</dd></dl>"

    def test_captioned_image_escapes_attributes(self) -> None:
        node = CaptionedImage(alt='A "cat"', url="c.png?a=1&b=2")
        assert serialize([node]) == (
            '<figure><img src="c.png?a=1&amp;b=2" alt="A &quot;cat&quot;" />'
            "<figcaption>A &quot;cat&quot;</figcaption></figure>"
        )

    def test_blocks_joined_by_newline(self) -> None:
        nodes = [Heading(level=1, content="T"), Paragraph(content="p"), ThematicBreak()]
        assert serialize(nodes) == "<h1>T</h1>\n<p>p</p>\n<hr />"

    def test_empty(self) -> None:
        assert serialize([]) == ""


class TestLists:
    """List rendering."""

    def test_unordered(self) -> None:
        node = List(items=(ListItem(content="Item 1"), ListItem(content="Item 2")))
        assert serialize([node]) == "<ul><li>Item 1</li><li>Item 2</li></ul>"

    def test_ordered(self) -> None:
        node = List(items=(ListItem(content="One"),), ordered=True)
        assert serialize([node]) == "<ol><li>One</li></ol>"

    def test_checkboxes(self) -> None:
        node = List(
            items=(
                ListItem(content="Done", checked=True),
                ListItem(content="Todo", checked=False),
            )
        )
        assert serialize([node]) == "<ul><li>☑ Done</li><li>☐ Todo</li></ul>"

    def test_nested_list_inside_item(self) -> None:
        node = List(
            items=(
                ListItem(
                    content="Item 1",
                    sublist=List(items=(ListItem(content="Nested"),), ordered=True),
                ),
                ListItem(content="Item 2"),
            )
        )
        assert serialize([node]) == (
            "<ul><li>Item 1<ol><li>Nested</li></ol></li><li>Item 2</li></ul>"
        )

    def test_custom_checkbox_glyphs(self) -> None:
        renderer = HtmlRenderer(checked_box="[x]", unchecked_box="[ ]")
        node = List(items=(ListItem(content="a", checked=True), ListItem(content="b", checked=False)))
        assert renderer.render([node]) == "<ul><li>[x] a</li><li>[ ] b</li></ul>"


class TestTables:
    """Table rendering."""

    def test_left_aligned_has_no_style(self) -> None:
        node = Table(headers=("A", "B"), rows=(("1", "2"),), alignments=("left", "left"))
        assert serialize([node]) == (
            "<table><thead><tr><th>A</th><th>B</th></tr></thead>"
            "<tbody><tr><td>1</td><td>2</td></tr></tbody></table>"
        )

    def test_alignment_styles(self) -> None:
        node = Table(
            headers=("A", "B", "C"),
            rows=(("1", "2", "3"),),
            alignments=("left", "center", "right"),
        )
        assert serialize([node]) == (
            "<table><thead><tr><th>A</th>"
            '<th style="text-align: center">B</th>'
            '<th style="text-align: right">C</th></tr></thead>'
            "<tbody><tr><td>1</td>"
            '<td style="text-align: center">2</td>'
            '<td style="text-align: right">3</td></tr></tbody></table>'
        )

    def test_row_wider_than_alignments(self) -> None:
        """Cells without an alignment entry are left aligned."""
        node = Table(headers=("A",), rows=(("1", "2"),), alignments=("right",))
        assert "<td>2</td>" in serialize([node])

    def test_no_body_rows(self) -> None:
        node = Table(headers=("A",), rows=(), alignments=("left",))
        assert serialize([node]) == (
            "<table><thead><tr><th>A</th></tr></thead><tbody></tbody></table>"
        )


class TestContainers:
    """Admonition and details rendering."""

    def test_admonition(self) -> None:
        node = Admonition(kind="note", subtype=None, children=(Paragraph(content="Body"),))
        assert serialize([node]) == '<aside class="admonition note">\n<p>Body</p>\n</aside>'

    def test_admonition_subtype(self) -> None:
        node = Admonition(
            kind="warning", subtype="important", children=(Paragraph(content="Body"),)
        )
        assert serialize([node]) == (
            '<aside class="admonition warning important">\n<p>Body</p>\n</aside>'
        )

    def test_details(self) -> None:
        node = Details(summary="Summary", children=(Paragraph(content="Content"),))
        assert serialize([node]) == (
            "<details>\n<summary>Summary</summary>\n<p>Content</p>\n</details>"
        )

    def test_children_one_per_line(self) -> None:
        node = Details(
            summary="S",
            children=(Heading(level=2, content="A"), Paragraph(content="B")),
        )
        assert serialize([node]) == (
            "<details>\n<summary>S</summary>\n<h2>A</h2>\n<p>B</p>\n</details>"
        )

    def test_empty_children(self) -> None:
        node = Admonition(kind="tip", subtype=None, children=())
        assert serialize([node]) == '<aside class="admonition tip">\n</aside>'


class TestFootnoteAppendix:
    """Footnote list after the body."""

    def test_appendix(self) -> None:
        html = serialize([Paragraph(content="x")], {"1": "**Note**"})
        assert html == (
            "<p>x</p>\n"
            '<div class="footnotes"><ol>'
            '<li id="footnote-1"><strong>Note</strong> <a href="#ref-1">↩</a></li>'
            "</ol></div>"
        )

    def test_entries_in_table_order(self) -> None:
        html = serialize([], {"b": "B", "a": "A"})
        assert html.index('id="footnote-b"') < html.index('id="footnote-a"')
        assert html.startswith('<div class="footnotes">')

    def test_no_appendix_without_footnotes(self) -> None:
        assert "footnotes" not in serialize([Paragraph(content="x")], {})
        assert "footnotes" not in serialize([Paragraph(content="x")])


class TestDocument:
    """Full document wrapping."""

    def test_shell(self) -> None:
        html = serialize_document([Paragraph(content="x")])
        assert html.startswith("<!DOCTYPE html>\n")
        assert '<html lang="en">' in html
        assert '<meta charset="UTF-8">' in html
        assert "<title>Document</title>" in html
        assert "<body>\n<p>x</p>\n</body>" in html
        assert html.rstrip().endswith("</html>")
        assert "<style>" not in html
        assert "<link" not in html

    def test_title_is_escaped(self) -> None:
        html = serialize_document([], None, DocumentOptions(title="A & <B>"))
        assert "<title>A &amp; &lt;B&gt;</title>" in html

    def test_lang(self) -> None:
        html = serialize_document([], None, DocumentOptions(lang="ja"))
        assert '<html lang="ja">' in html

    def test_linked_stylesheet(self) -> None:
        html = serialize_document([], None, DocumentOptions(stylesheet="style.css"))
        assert '<link rel="stylesheet" href="style.css">' in html

    def test_embedded_stylesheet(self, tmp_path) -> None:
        css = tmp_path / "style.css"
        css.write_text("body { color: red; }\n", encoding="utf-8")
        html = serialize_document(
            [], None, DocumentOptions(stylesheet=css, embed_stylesheet=True)
        )
        assert "<style>\nbody { color: red; }\n</style>" in html
        assert "<link" not in html

    def test_unreadable_stylesheet_falls_back_to_link(self, tmp_path, caplog) -> None:
        missing = tmp_path / "missing.css"
        with caplog.at_level(logging.WARNING, logger="pluma"):
            html = serialize_document(
                [], None, DocumentOptions(stylesheet=missing, embed_stylesheet=True)
            )
        assert f'<link rel="stylesheet" href="{missing}">' in html
        assert "<style>" not in html
        assert any("missing.css" in record.getMessage() for record in caplog.records)

    def test_footnotes_inside_body(self) -> None:
        html = serialize_document([Paragraph(content="x")], {"1": "n"})
        assert html.index('<div class="footnotes">') < html.index("</body>")


class TestHtmlEscape:
    """The five-character escape used for code and attributes."""

    def test_escapes_exactly_five(self) -> None:
        assert html_escape("&<>\"'") == "&amp;&lt;&gt;&quot;&#39;"

    def test_ampersand_first(self) -> None:
        assert html_escape("&lt;") == "&amp;lt;"

    def test_other_characters_untouched(self) -> None:
        assert html_escape("a/b=c ☑") == "a/b=c ☑"
