"""Command-line interface for the Bionic Reader.

WHY: Users need a simple way to convert text files (or piped text) into
bionic reading form from the terminal. The CLI wires together the whole
pipeline — input validation, bold-fraction snapping, transformation into
the IR, pluggable formatter output, and file saving — behind a single
command.

HOW: Uses argparse to accept an input file (or stdin), the bold fraction,
output format selection, and an output directory. Status messages go to
stderr; output files are saved next to the source (or to --output-dir),
or written to stdout with --stdout.

RULES:
- Positional argument: input text file path; omitted or "-" reads stdin
- Validates file extension against SUPPORTED_INPUT_SUFFIXES
- Blank input → "Error: Please enter some text to convert." and exit 1
- --bold-fraction is snapped to the slider range and step
- --formats: comma-separated formatter keys (default: config default)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-bionic-2.html)
- Stdin input implies --stdout
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from bionic_reader.config import (
    DEFAULT_BOLD_FRACTION,
    DEFAULT_OUTPUT_FORMAT,
    SUPPORTED_INPUT_SUFFIXES,
    require_text,
    snap_bold_fraction,
)
from bionic_reader.core.transformer import transform
from bionic_reader.formatters import FORMATTERS
from bionic_reader.formatters.base import FormatterOutput

_STDIN_STEM = "stdin"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may convert the same file several times with different
    fractions. Overwriting previous output would lose work.

    HOW: Check if {stem}{suffix} exists. If so, increment a counter
    and insert it before the file extension until a free name is found.

    RULES:
    - First attempt: {stem}{suffix} (e.g. notes-bionic.html)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. notes-bionic-2.html)
    - Counter starts at 2 and increments

    Args:
        stem: Source filename stem (without extension).
        suffix: Formatter's suffix (e.g. "-bionic.html").
        output_dir: Directory to save the output file.

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # e.g. "-bionic.html" → ("-bionic", ".html")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk and return its path.

    String content is written as UTF-8 text, bytes in binary mode.
    """
    path = _resolve_output_path(stem, output.suffix, output_dir)

    if isinstance(output.content, bytes):
        path.write_bytes(output.content)
    else:
        path.write_text(output.content, encoding="utf-8")

    return path


def _write_stdout(output: FormatterOutput) -> None:
    if isinstance(output.content, bytes):
        sys.stdout.buffer.write(output.content)
    else:
        sys.stdout.write(output.content)
    sys.stdout.flush()


def _parse_format_keys(formats: Optional[str]) -> List[str]:
    """Split and validate the --formats value; exit 1 on an unknown key."""
    raw = formats if formats else DEFAULT_OUTPUT_FORMAT
    format_keys = [f.strip() for f in raw.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


def _read_input(input_file: Optional[str]) -> tuple:
    """Read the source text.

    Returns:
        Tuple of (text, source_path) where source_path is None for stdin.
    """
    if input_file is None or input_file == "-":
        return sys.stdin.read(), None

    input_path = Path(input_file).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    ext = input_path.suffix.lower()
    if ext not in SUPPORTED_INPUT_SUFFIXES:
        _fail("Unsupported file type '{}'. Supported formats: {}".format(
            ext, ", ".join(sorted(SUPPORTED_INPUT_SUFFIXES))
        ))

    return input_path.read_text(encoding="utf-8"), input_path


def _run(args: argparse.Namespace) -> None:
    """Execute the conversion pipeline for parsed arguments.

    RULES:
    - Validate formats and input before transforming
    - Stdin input or --stdout → rendered content to stdout, nothing saved
    - Otherwise save each formatter's outputs with conflict avoidance
    """
    format_keys = _parse_format_keys(args.formats)
    text, source_path = _read_input(args.input_file)

    try:
        require_text(text)
        bold_fraction = snap_bold_fraction(args.bold_fraction)
    except ValueError as e:
        _fail(str(e))

    to_stdout = args.stdout or source_path is None

    output_dir: Optional[Path] = None
    if not to_stdout:
        output_dir = Path(args.output_dir).resolve() if args.output_dir else source_path.parent
        if not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))

    document = transform(text, bold_fraction)
    word_count = sum(1 for word in document.words() if word.token)
    _status("Converted {} paragraph(s), {} word(s) at {:.0%} bold".format(
        len(document.paragraphs), word_count, bold_fraction,
    ))

    stem = source_path.stem if source_path is not None else _STDIN_STEM
    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(document):
            if to_stdout:
                _write_stdout(output)
            else:
                saved_path = _save_output(output, stem, output_dir)
                saved_files.append(saved_path)
                _status("  Saved: {}".format(saved_path.name))

    if saved_files:
        _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="bionic_reader",
        description="Convert text into bionic reading form (bold word prefixes) "
                    "and render it as HTML, Markdown, terminal text or JSON.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Path to a text file to convert. Omit or use '-' to read stdin.",
    )

    parser.add_argument(
        "--bold-fraction",
        type=float,
        default=DEFAULT_BOLD_FRACTION,
        help="Proportion of each word to bold, snapped to 0.1-0.7 in 0.05 steps "
             "(default: %(default)s).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())), DEFAULT_OUTPUT_FORMAT
             ),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write rendered output to stdout instead of saving files.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _run(args)


if __name__ == "__main__":
    main()
