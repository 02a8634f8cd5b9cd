"""Pluma renderers.

Renderers convert typed AST nodes into output formats.

Available Renderers:
- HtmlRenderer: Renders AST to an HTML fragment or a full HTML document

"""

from pluma.renderers.html import DocumentOptions, HtmlRenderer, serialize, serialize_document

__all__ = ["DocumentOptions", "HtmlRenderer", "serialize", "serialize_document"]
