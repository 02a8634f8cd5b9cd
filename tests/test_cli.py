"""Tests for the pluma command-line interface."""

import json
from pathlib import Path

import pytest

from pluma import __version__
from pluma.cli import main, read_source, write_output
from pluma.errors import OutputWriteError, SourceReadError


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n\nSee[^1]\n\n[^1]: Details", encoding="utf-8")
    return path


class TestConversion:
    """HTML output."""

    def test_document_to_stdout(self, source_file: Path, capsys) -> None:
        assert main([str(source_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("<!DOCTYPE html>")
        assert "<title>notes</title>" in out
        assert "<h1>Notes</h1>" in out
        assert '<div class="footnotes">' in out

    def test_fragment(self, source_file: Path, capsys) -> None:
        assert main([str(source_file), "--fragment"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("<h1>Notes</h1>\n")
        assert "<!DOCTYPE" not in out

    def test_title(self, source_file: Path, capsys) -> None:
        main([str(source_file), "--title", "My Notes"])
        assert "<title>My Notes</title>" in capsys.readouterr().out

    def test_output_file(self, source_file: Path, tmp_path: Path, capsys) -> None:
        out_path = tmp_path / "out.html"
        assert main([str(source_file), "-o", str(out_path)]) == 0
        assert capsys.readouterr().out == ""
        assert "<h1>Notes</h1>" in out_path.read_text(encoding="utf-8")

    def test_linked_css(self, source_file: Path, capsys) -> None:
        main([str(source_file), "--css", "theme.css"])
        assert '<link rel="stylesheet" href="theme.css">' in capsys.readouterr().out

    def test_embedded_css(self, source_file: Path, tmp_path: Path, capsys) -> None:
        css = tmp_path / "theme.css"
        css.write_text("h1 { margin: 0; }", encoding="utf-8")
        main([str(source_file), "--css", str(css), "--embed-css"])
        assert "<style>\nh1 { margin: 0; }\n</style>" in capsys.readouterr().out

    def test_stdin(self, monkeypatch, capsys) -> None:
        import io

        monkeypatch.setattr("sys.stdin", io.StringIO("**bold**"))
        assert main(["-", "--fragment"]) == 0
        assert capsys.readouterr().out == "<p><strong>bold</strong></p>\n"


class TestDumps:
    """Intermediate stage output."""

    def test_dump_tokens(self, source_file: Path, capsys) -> None:
        assert main([str(source_file), "--dump-tokens"]) == 0
        records = json.loads(capsys.readouterr().out)
        assert [r["type"] for r in records] == ["heading", "blank", "paragraph", "blank"]

    def test_dump_ast(self, source_file: Path, capsys) -> None:
        assert main([str(source_file), "--dump-ast"]) == 0
        records = json.loads(capsys.readouterr().out)
        assert [r["type"] for r in records] == ["heading", "paragraph"]

    def test_dumps_are_exclusive(self, source_file: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(source_file), "--dump-tokens", "--dump-ast"])
        assert exc_info.value.code == 2


class TestErrors:
    """Exit codes and messages."""

    def test_missing_input(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "nope.md")]) == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "nope.md" in err

    def test_unwritable_output(self, source_file: Path, tmp_path: Path, capsys) -> None:
        target = tmp_path / "missing-dir" / "out.html"
        assert main([str(source_file), "-o", str(target)]) == 1
        assert "cannot write output" in capsys.readouterr().err

    def test_embed_css_requires_css(self, source_file: Path, capsys) -> None:
        assert main([str(source_file), "--embed-css"]) == 2
        assert "--embed-css requires --css" in capsys.readouterr().err

    def test_missing_embedded_css_still_succeeds(self, source_file: Path, tmp_path: Path, capsys) -> None:
        css = tmp_path / "gone.css"
        assert main([str(source_file), "--css", str(css), "--embed-css"]) == 0
        assert '<link rel="stylesheet"' in capsys.readouterr().out

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestHelpers:
    """read_source / write_output."""

    def test_read_source_error(self, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError) as exc_info:
            read_source(str(tmp_path / "absent.md"))
        assert exc_info.value.path == tmp_path / "absent.md"

    def test_read_source_rejects_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.md"
        path.write_bytes(b"caf\xe9")
        with pytest.raises(SourceReadError):
            read_source(str(path))

    def test_write_output_error(self, tmp_path: Path) -> None:
        with pytest.raises(OutputWriteError) as exc_info:
            write_output("x", tmp_path / "no" / "such" / "file.html")
        assert exc_info.value.path.name == "file.html"

    def test_write_output_stdout_adds_newline(self, capsys) -> None:
        write_output("<p>x</p>", None)
        assert capsys.readouterr().out == "<p>x</p>\n"
