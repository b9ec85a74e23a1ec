import io
import logging
from contextlib import contextmanager

from formate import pipeline
from formate.pipeline import RunConfig, format_bytes, format_stream, format_text, run
from formate.reflow import Widths


class FlakyStream:
    def __init__(self, lines):
        self._lines = list(lines)

    def readline(self):
        if not self._lines:
            raise OSError("device went away")
        return self._lines.pop(0)


def test_single_paragraph_has_no_trailing_blank():
    assert format_bytes(b"Hi.\n\n") == b"Hi.\n"


def test_paragraphs_separated_by_one_blank_line():
    assert format_bytes(b"first\n\nsecond\n") == b"first\n\nsecond\n"
    assert format_bytes(b"one\ntwo\n\nthree\nfour\n") == b"one two\n\nthree four\n"


def test_blank_runs_between_paragraphs_are_kept():
    assert format_bytes(b"a\n\n\nb\n") == b"a\n\n\nb\n"
    assert format_bytes(b"a\n   \nb") == b"a\n\nb\n"


def test_trailing_blank_lines_are_dropped():
    assert format_bytes(b"a\n\n\n\n") == b"a\n"


def test_empty_input_produces_nothing():
    assert format_bytes(b"") == b""
    assert format_bytes(b"\n\n") == b""


def test_missing_final_newline_is_added():
    assert format_bytes(b"abc") == b"abc\n"


def test_format_text_uses_given_widths():
    src = "alpha beta gamma delta epsilon\nzeta eta\n\n- keep me\n"
    out = format_text(src, Widths(10, 20))
    assert out == "alpha beta gamma\ndelta epsilon zeta\neta\n\n- keep me\n"


def test_read_error_keeps_output_and_is_reported():
    sink = io.BytesIO()
    stats = format_stream(FlakyStream([b"one\n", b"two\n"]), sink, Widths())
    assert sink.getvalue() == b"one two\n"
    assert isinstance(stats.error, OSError)
    assert stats.lines_in == 2
    assert stats.paragraphs == 1
    assert stats.lines_out == 1


def test_run_reads_and_writes_files(tmp_path):
    src = tmp_path / "in.txt"
    src.write_bytes(b"one\ntwo\n\n1. literal\n")
    dst = tmp_path / "nested" / "out.txt"
    stats = run(RunConfig(input=src, output=dst))
    assert dst.read_bytes() == b"one two\n\n1. literal\n"
    assert stats.error is None
    assert stats.paragraphs == 2


def test_run_logs_read_error_after_output(tmp_path, monkeypatch, caplog):
    @contextmanager
    def flaky_input(path):
        yield FlakyStream([b"Hi.\n"])

    monkeypatch.setattr(pipeline, "open_input", flaky_input)
    dst = tmp_path / "out.txt"
    with caplog.at_level(logging.ERROR, logger="formate"):
        stats = run(RunConfig(output=dst))
    assert dst.read_bytes() == b"Hi.\n"
    assert isinstance(stats.error, OSError)
    assert "device went away" in caplog.text


def test_separator_control_line_is_kept_as_literal():
    assert format_bytes(b"a\n\x1f\nb\n") == b"a\n\x1f\nb\n"
