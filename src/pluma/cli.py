"""Command-line front end for Pluma.

Reads a Markdown file (or ``-`` for stdin), converts it, and writes HTML to
stdout or ``--output``. ``--dump-tokens`` and ``--dump-ast`` print the
intermediate stage as JSON instead.

Exit codes: 0 on success, 1 on an I/O error, 2 on a usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pluma import __version__
from pluma.errors import OutputWriteError, PlumaError, SourceReadError
from pluma.lexer import tokenize
from pluma.parser import generate
from pluma.renderers import DocumentOptions, serialize, serialize_document
from pluma.serialization import nodes_to_json, tokens_to_json
from pluma.utils.logger import get_logger

logger = get_logger(__name__)


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def read_source(path: str) -> str:
    """Read Markdown source from ``path``, or stdin when ``path`` is ``-``.

    Raises:
        SourceReadError: If the file cannot be opened or decoded.
    """
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e


def write_output(text: str, path: Path | None) -> None:
    """Write ``text`` to ``path``, or stdout when ``path`` is None.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    if path is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(path, str(e)) from e
    logger.info("wrote %s (%d bytes)", path, len(text.encode("utf-8")))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pluma",
        description="Convert Pluma-flavoured Markdown to HTML.",
    )
    parser.add_argument("input", help="Markdown file to convert ('-' reads stdin)")
    parser.add_argument("--output", "-o", type=Path, default=None, help="Write HTML here instead of stdout")
    parser.add_argument("--title", default=None, help="Document <title> (default: input file stem)")
    parser.add_argument("--css", default=None, help="Stylesheet path or URL")
    parser.add_argument("--embed-css", action="store_true", help="Inline the --css file in a <style> element")
    parser.add_argument("--fragment", action="store_true", help="Emit an HTML fragment, not a full document")

    dump = parser.add_mutually_exclusive_group()
    dump.add_argument("--dump-tokens", action="store_true", help="Print the token stream as JSON")
    dump.add_argument("--dump-ast", action="store_true", help="Print the AST as JSON")

    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")
    parser.add_argument("--version", action="version", version=f"pluma {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.embed_css and args.css is None:
        print("Error: --embed-css requires --css", file=sys.stderr)
        return 2

    try:
        source = read_source(args.input)
        tokens, footnotes = tokenize(source)
        logger.info("tokenized %s: %d tokens, %d footnotes", args.input, len(tokens), len(footnotes))

        if args.dump_tokens:
            write_output(tokens_to_json(tokens), args.output)
            return 0

        nodes = generate(tokens, footnotes)
        if args.dump_ast:
            write_output(nodes_to_json(nodes), args.output)
            return 0

        if args.fragment:
            html = serialize(nodes, footnotes)
        else:
            options = DocumentOptions(
                title=args.title if args.title is not None else _default_title(args.input),
                stylesheet=args.css,
                embed_stylesheet=args.embed_css,
            )
            html = serialize_document(nodes, footnotes, options)
        write_output(html, args.output)
    except PlumaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _default_title(input_path: str) -> str:
    if input_path == "-":
        return DocumentOptions().title
    return Path(input_path).stem
