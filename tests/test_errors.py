"""Tests for the Pluma exception hierarchy."""

from pathlib import Path

import pytest

from pluma.errors import OutputWriteError, PlumaError, SourceReadError


class TestHierarchy:
    """Every error is catchable as PlumaError."""

    @pytest.mark.parametrize("cls", [SourceReadError, OutputWriteError])
    def test_subclass(self, cls: type[PlumaError]) -> None:
        assert issubclass(cls, PlumaError)
        assert issubclass(cls, Exception)

    def test_source_read_error_message(self) -> None:
        err = SourceReadError("in.md", "No such file or directory")
        assert err.path == Path("in.md")
        assert err.reason == "No such file or directory"
        assert str(err) == "in.md: cannot read input: No such file or directory"

    def test_output_write_error_message(self) -> None:
        err = OutputWriteError(Path("out") / "x.html", "Permission denied")
        assert str(err) == f"{Path('out') / 'x.html'}: cannot write output: Permission denied"

    def test_catch_as_base(self) -> None:
        with pytest.raises(PlumaError):
            raise SourceReadError("a.md", "boom")


class TestPipelineNeverRaises:
    """The conversion stages have no error paths."""

    @pytest.mark.parametrize(
        "source",
        [
            "```",
            "=== open",
            ":::note",
            "| a |\n|",
            "[^]: x",
            "\\",
            "- \n  - \n1.",
            ": \n:",
            "\x00\ufff0ESCAPE0\ufff1 \ufff0FOOTNOTE3\ufff1",
        ],
    )
    def test_odd_inputs(self, source: str) -> None:
        from pluma import convert

        assert isinstance(convert(source), str)
        assert isinstance(convert(source, document=True), str)
