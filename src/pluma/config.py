"""ContextVar-based parse configuration for Pluma.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markdown instance and read by every Lexer created in
that context, including the sub-lexers used for details/admonition bodies.

Usage:
    # In Markdown class
    md = Markdown(ParseConfig(indent_width=4))
    html = md("- a\\n    - b")  # Sets config internally via ContextVar

    # Direct lexer usage
    from pluma.config import parse_config_context, ParseConfig

    with parse_config_context(ParseConfig(strip_comments=False)):
        tokens, footnotes = tokenize(source)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable tokenizer configuration.

    Attributes:
        indent_width: Leading spaces per list nesting level
        strip_comments: Drop lines whose first non-blank characters are ``//``

    """

    indent_width: int = 2
    strip_comments: bool = True

    def __post_init__(self) -> None:
        if self.indent_width < 1:
            msg = f"indent_width must be >= 1, got {self.indent_width}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ParseConfig:
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ParseConfig.from_dict({"indent_width": 4, "other": 1}).indent_width
            4

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "pluma_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (context-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(indent_width=4)):
        ...     tokens, _ = tokenize("    - nested")
        >>> tokens[0].level
        1

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
