"""JSON round-trip for Pluma tokens and AST nodes.

Converts tokens and nodes to/from JSON-compatible dicts. Useful for:
- Inspecting the intermediate stages (``pluma --dump-tokens``/``--dump-ast``)
- Caching a parsed document on disk
- Golden-file tests

Every dict carries a ``type`` discriminator holding the record tag of the
token or node kind (``"heading"``, ``"code_fence"``, ``"ul"``, ...). Lists
are tagged ``"ul"`` or ``"ol"`` rather than carrying an ``ordered`` field.

Example:
    from pluma import tokenize, generate
    from pluma.serialization import nodes_to_json, from_json

    tokens, footnotes = tokenize("# Hello **World**")
    nodes = generate(tokens, footnotes)
    restored = from_json(nodes_to_json(nodes))
    assert restored == list(nodes)

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import fields
from typing import Any

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
    Node,
    Paragraph,
    Table,
    ThematicBreak,
)
from pluma.tokens import (
    AdmonitionToken,
    BlankToken,
    BlockquoteToken,
    CaptionedImageToken,
    CodeFenceToken,
    DefinitionToken,
    DetailsToken,
    HeadingToken,
    HorizontalRuleToken,
    ListItemToken,
    ParagraphToken,
    TableToken,
    Token,
)

# Registry of token tags to classes for deserialization
_TOKEN_TYPES: dict[str, type[Token]] = {
    cls.type.value: cls
    for cls in (
        BlankToken,
        HeadingToken,
        CodeFenceToken,
        ListItemToken,
        TableToken,
        BlockquoteToken,
        HorizontalRuleToken,
        DetailsToken,
        AdmonitionToken,
        CaptionedImageToken,
        DefinitionToken,
        ParagraphToken,
    )
}

# Registry of node tags to classes; "ul" and "ol" both map to List
_NODE_TYPES: dict[str, type[Node]] = {
    "heading": Heading,
    "paragraph": Paragraph,
    "blockquote": BlockQuote,
    "code": CodeBlock,
    "hr": ThematicBreak,
    "ul": List,
    "ol": List,
    "list_item": ListItem,
    "table": Table,
    "dl": DefinitionList,
    "dt": DefinitionTerm,
    "dd": DefinitionDescription,
    "admonition": Admonition,
    "details": Details,
    "image_captioned": CaptionedImage,
}

_NODE_TAGS: dict[type[Node], str] = {
    cls: tag for tag, cls in _NODE_TYPES.items() if cls is not List
}


def node_tag(node: Node) -> str:
    """Record tag for a node (``"ul"``/``"ol"`` for lists)."""
    if isinstance(node, List):
        return "ol" if node.ordered else "ul"
    return _NODE_TAGS[type(node)]


def to_dict(item: Token | Node) -> dict[str, Any]:
    """Convert a token or AST node to a JSON-compatible dict.

    Includes a ``type`` discriminator field for deserialization.
    Recursively serializes child nodes.

    Args:
        item: Any Pluma token or AST node.

    Returns:
        Dict with ``type`` and all fields.

    """
    if isinstance(item, Token):
        result: dict[str, Any] = {"type": item.type.value}
        skip: frozenset[str] = frozenset()
    else:
        result = {"type": node_tag(item)}
        skip = frozenset({"ordered"}) if isinstance(item, List) else frozenset()

    for f in fields(item):
        if f.name in skip:
            continue
        result[f.name] = _serialize_value(getattr(item, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Token | Node):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Token | Node:
    """Reconstruct a typed token or AST node from a dict.

    Token tags and node tags do not overlap except for ``"heading"``,
    ``"paragraph"``, ``"blockquote"``, ``"details"``, ``"admonition"``,
    ``"table"`` and ``"image_captioned"``; those are told apart by their
    fields (tokens always carry ``raw``).

    Args:
        data: Dict with ``type`` and fields (as produced by to_dict).

    Returns:
        Typed token or node (frozen dataclass).

    Raises:
        ValueError: If ``type`` is missing or unknown.

    """
    tag = data.get("type")
    if tag is None:
        msg = "Missing 'type' field in serialized record"
        raise ValueError(msg)

    if "raw" in data and tag in _TOKEN_TYPES:
        return _build(_TOKEN_TYPES[tag], data)

    node_cls = _NODE_TYPES.get(tag)
    if node_cls is None:
        msg = f"Unknown record type: {tag!r}"
        raise ValueError(msg)
    if node_cls is List:
        return _build(List, {**data, "ordered": tag == "ol"})
    return _build(node_cls, data)


def _build(cls: type[Any], data: dict[str, Any]) -> Any:
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])
    return cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        if "type" in value:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(items: Iterable[Token | Node], *, indent: int | None = None) -> str:
    """Serialize a sequence of tokens or nodes to a JSON array.

    Args:
        items: Tokens or nodes in order.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(item) for item in items], indent=indent, ensure_ascii=False)


def from_json(data: str) -> list[Token | Node]:
    """Deserialize a JSON array produced by :func:`to_json`.

    Raises:
        ValueError: If the JSON is not an array of records.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(record) for record in raw]


def tokens_to_json(tokens: Iterable[Token], *, indent: int | None = 2) -> str:
    """Indented JSON dump of a token sequence."""
    return to_json(tokens, indent=indent)


def nodes_to_json(nodes: Iterable[Node], *, indent: int | None = 2) -> str:
    """Indented JSON dump of an AST."""
    return to_json(nodes, indent=indent)


__all__ = [
    "from_dict",
    "from_json",
    "node_tag",
    "nodes_to_json",
    "to_dict",
    "to_json",
    "tokens_to_json",
]
