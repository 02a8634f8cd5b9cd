"""Property-based tests for pipeline invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from pluma import convert, generate, serialize, tokenize
from pluma.nodes import List
from pluma.parsing.inline import compile_inline
from pluma.tokens import TokenType

MARKUP_ALPHABET = "#-*_`>|:=[]^()!{}~\\ \nab1."

_MULTI_LINE = {TokenType.TABLE, TokenType.DETAILS, TokenType.ADMONITION}


class TestTotality:
    """No stage raises for any input."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_any_text(self, source: str) -> None:
        tokens, footnotes = tokenize(source)
        nodes = generate(tokens, footnotes)
        assert isinstance(serialize(nodes, footnotes), str)

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=300))
    @settings(max_examples=300)
    def test_markup_heavy_text(self, source: str) -> None:
        """Dense syntax characters in any combination never crash."""
        assert isinstance(convert(source, document=True), str)

    @given(st.text(max_size=200), st.dictionaries(st.text(min_size=1, max_size=5), st.text(max_size=20)))
    @settings(max_examples=200)
    def test_inline_any_footnotes(self, text: str, footnotes: dict[str, str]) -> None:
        assert isinstance(compile_inline(text, footnotes), str)


class TestTokenStream:
    """Shape of the token sequence."""

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_raw_lines_reconstruct_source(self, source: str) -> None:
        """Joining token raws and dropped lines in order gives back the source lines.

        Every line ends up in exactly one token, except comment and footnote
        lines which produce none.
        """
        tokens, _ = tokenize(source)
        emitted = [line for token in tokens for line in token.raw.split("\n")]
        lines = source.split("\n")
        it = iter(lines)
        # emitted must be a subsequence of the source lines
        assert all(any(line == candidate for candidate in it) for line in emitted)

    @given(st.lists(st.text(alphabet="ab *_`", min_size=1, max_size=20), max_size=20))
    @settings(max_examples=100)
    def test_one_token_per_plain_line(self, lines: list[str]) -> None:
        """Lines without block syntax map one to one onto tokens."""
        source = "\n".join(lines)
        tokens, _ = tokenize(source)
        multi = [t for t in tokens if t.type in _MULTI_LINE]
        if not multi:
            assert [t.raw for t in tokens] == source.split("\n")

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_deterministic(self, source: str) -> None:
        assert tokenize(source) == tokenize(source)


class TestListTree:
    """List grouping never loses items."""

    @given(
        st.lists(
            st.tuples(st.integers(min_value=0, max_value=3), st.booleans()),
            min_size=1,
            max_size=15,
        )
    )
    @settings(max_examples=200)
    def test_every_item_appears_once(self, items: list[tuple[int, bool]]) -> None:
        source = "\n".join(
            "  " * level + (f"{i + 1}. item{i}" if ordered else f"- item{i}")
            for i, (level, ordered) in enumerate(items)
        )
        tokens, footnotes = tokenize(source)
        contents: list[str] = []

        def collect(lst: List) -> None:
            for item in lst.items:
                contents.append(item.content)
                if item.sublist is not None:
                    collect(item.sublist)

        for node in generate(tokens, footnotes):
            assert isinstance(node, List)
            collect(node)

        assert contents == [f"item{i}" for i in range(len(items))]
