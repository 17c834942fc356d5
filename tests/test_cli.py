"""Tests for the command-line interface.

WHY: The CLI is the main way people run the converter. Wrong output
naming overwrites earlier results, a missing blank-input check renders
empty pages, and status text on stdout breaks piping.

HOW: main(argv) is called directly with tmp_path files; stdin is
replaced via monkeypatch; stdout/stderr are captured with capsys.
Error paths are asserted through SystemExit codes.

RULES:
- No test writes outside tmp_path
- Status messages must only appear on stderr
"""

import io
import json

import pytest

from bionic_reader.cli import _resolve_output_path, build_parser, main
from bionic_reader.formatters import FORMATTERS
from bionic_reader.formatters.ansi_text import BOLD_ON
from bionic_reader.formatters.base import BaseFormatter, FormatterOutput


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("Hi, there!\n\n--- ok", encoding="utf-8")
    return path


class _UTF16Formatter(BaseFormatter):
    """Binary formatter: the rebuilt source text encoded as UTF-16."""

    @property
    def name(self):
        return "UTF-16 Text"

    def format(self, document):
        return [FormatterOutput(
            suffix="-bionic.utf16.txt",
            content=document.text.encode("utf-16"),
            media_type="text/plain; charset=utf-16",
        )]


@pytest.fixture
def utf16_format(monkeypatch):
    monkeypatch.setitem(FORMATTERS, "utf16_text", _UTF16Formatter)
    return "utf16_text"


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.input_file is None
        assert args.bold_fraction == 0.4
        assert args.formats is None
        assert args.output_dir is None
        assert args.stdout is False

    def test_all_flags(self):
        args = build_parser().parse_args([
            "in.txt", "--bold-fraction", "0.55", "--formats", "html,markdown",
            "--output-dir", "out", "--stdout",
        ])
        assert args.input_file == "in.txt"
        assert args.bold_fraction == 0.55
        assert args.formats == "html,markdown"
        assert args.output_dir == "out"
        assert args.stdout is True


class TestFileOutput:
    """Input file → saved output files."""

    def test_saves_next_to_input(self, text_file, capsys):
        main([str(text_file)])
        out_path = text_file.parent / "notes-bionic.html"
        assert out_path.is_file()
        # default fraction 0.4: "Hi" → 1, "there" → 2
        assert "<p><b>H</b>i, <b>th</b>ere!</p>" in out_path.read_text(encoding="utf-8")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Saved: notes-bionic.html" in captured.err

    def test_multiple_formats_and_output_dir(self, text_file, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        main([str(text_file), "--formats", "markdown,json_document", "--output-dir", str(out_dir)])
        assert (out_dir / "notes-bionic.md").is_file()
        data = json.loads((out_dir / "notes-bionic.json").read_text(encoding="utf-8"))
        assert data["bold_fraction"] == 0.4

    def test_conflicting_name_gets_counter(self, text_file):
        main([str(text_file), "--formats", "markdown"])
        main([str(text_file), "--formats", "markdown"])
        assert (text_file.parent / "notes-bionic.md").is_file()
        assert (text_file.parent / "notes-bionic-2.md").is_file()

    def test_bold_fraction_is_snapped(self, text_file):
        main([str(text_file), "--formats", "json_document", "--bold-fraction", "0.98"])
        data = json.loads((text_file.parent / "notes-bionic.json").read_text(encoding="utf-8"))
        assert data["bold_fraction"] == 0.7


class TestStdout:
    def test_stdout_flag(self, text_file, capsys):
        main([str(text_file), "--stdout", "--formats", "markdown", "--bold-fraction", "0.5"])
        captured = capsys.readouterr()
        assert captured.out == "**H**i, **the**re!\n\n\\--- **o**k\n"
        assert not (text_file.parent / "notes-bionic.md").exists()

    def test_stdin_implies_stdout(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("hello world"))
        main(["--formats", "ansi_text"])
        captured = capsys.readouterr()
        assert captured.out.startswith(BOLD_ON + "he")
        assert "Converted 1 paragraph(s), 2 word(s)" in captured.err

    def test_dash_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("hello world"))
        main(["-", "--formats", "markdown"])
        assert capsys.readouterr().out == "**he**llo **wo**rld\n"


class TestErrors:
    """Every failure exits 1 with an 'Error:' line on stderr."""

    def test_blank_input(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("   \n\n  "))
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "Error: Please enter some text to convert." in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "nope.txt")])
        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_unsupported_suffix(self, tmp_path, capsys):
        path = tmp_path / "book.pdf"
        path.write_bytes(b"%PDF")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])
        assert exc_info.value.code == 1
        assert "Unsupported file type '.pdf'" in capsys.readouterr().err

    def test_unknown_format(self, text_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(text_file), "--formats", "html,docx"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Unknown format 'docx'" in err
        assert "json_document" in err

    def test_missing_output_dir(self, text_file, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(text_file), "--output-dir", str(tmp_path / "missing")])
        assert exc_info.value.code == 1
        assert "Output directory does not exist" in capsys.readouterr().err


class TestResolveOutputPath:
    def test_free_name(self, tmp_path):
        assert _resolve_output_path("a", "-bionic.html", tmp_path) == tmp_path / "a-bionic.html"

    def test_counter_increments(self, tmp_path):
        (tmp_path / "a-bionic.ansi.txt").write_text("")
        (tmp_path / "a-bionic.ansi-2.txt").write_text("")
        assert _resolve_output_path("a", "-bionic.ansi.txt", tmp_path) == tmp_path / "a-bionic.ansi-3.txt"


class TestBinaryOutput:
    """Formatters may return bytes; those are written without text encoding."""

    def test_bytes_saved_verbatim(self, text_file, utf16_format):
        main([str(text_file), "--formats", utf16_format])
        out_path = text_file.parent / "notes-bionic.utf16.txt"
        assert out_path.read_bytes() == "Hi, there!\n\n--- ok".encode("utf-16")

    def test_bytes_written_to_stdout_buffer(self, text_file, utf16_format, capsysbinary):
        main([str(text_file), "--stdout", "--formats", utf16_format])
        captured = capsysbinary.readouterr()
        assert captured.out == "Hi, there!\n\n--- ok".encode("utf-16")
        assert b"Converted 2 paragraph(s)" in captured.err
