"""Compiled line patterns for block classification.

All patterns are compiled once at module load and applied to a single
source line (no embedded newlines), so ``$`` always means end of line.
"""

from __future__ import annotations

import re

# [^id]: definition text
FOOTNOTE_DEF = re.compile(r"^\[\^([^\]]+)\]:\s+(.+)$")

# Lines that may never start a table even if they contain "|"
FENCE_PREFIX = re.compile(r"^`{3,}")
UNORDERED_PREFIX = re.compile(r"^\s*[-*]\s")
ORDERED_PREFIX = re.compile(r"^\s*\d+\.\s")

# One trimmed separator cell: ---, :--, --:, :-:
TABLE_SEPARATOR_CELL = re.compile(r"^:?-+:?$")

HEADING = re.compile(r"^(#{1,6})\s+(.+)$")
CODE_FENCE = re.compile(r"^(`{3,})(.*)$")

# Details opener is "===" plus text; checked for non-blank text separately
DETAILS_OPEN = re.compile(r"^===(.*)$")
DETAILS_CLOSE = re.compile(r"^===$")

ADMONITION_OPEN = re.compile(r"^:::([a-z]+)(?:\s+([a-z]+))?$")
ADMONITION_CLOSE = re.compile(r"^:::$")

CAPTIONED_IMAGE = re.compile(r"^-!\[([^\]]*)\]\(([^)]+)\)$")

UNORDERED_ITEM = re.compile(r"^\s*[-*]\s+(?:\[([ xX])\]\s+)?(.+)$")
ORDERED_ITEM = re.compile(r"^\s*\d+\.\s+(.+)$")
LEADING_WHITESPACE = re.compile(r"^\s*")

BLOCKQUOTE = re.compile(r"^>\s")
BLOCKQUOTE_MARKER = re.compile(r"^>\s*")

HORIZONTAL_RULE = re.compile(r"^([-*_])\1{2,}$")

DEFINITION = re.compile(r"^:\s+(.+)$")
