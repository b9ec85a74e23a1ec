from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .reflow import LineScanner, Reflower, Widths, iter_paragraphs
from .reflow.literal import DECODE_ERRORS
from .reflow.reflower import DEFAULT_MAX_WIDTH, DEFAULT_MIN_WIDTH
from .utils.io import open_input, open_output
from .utils.logging import get_logger


@dataclass
class RunConfig:
    input: Optional[Path] = None  # None=stdin
    output: Optional[Path] = None  # None=stdout
    min_width: int = DEFAULT_MIN_WIDTH
    max_width: int = DEFAULT_MAX_WIDTH
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    def widths(self) -> Widths:
        return Widths(minimum=self.min_width, maximum=self.max_width)


@dataclass
class RunStats:
    paragraphs: int = 0
    lines_in: int = 0
    lines_out: int = 0
    error: Optional[OSError] = None


def format_stream(source: BinaryIO, sink: BinaryIO, widths: Widths, encoding: str = "utf-8") -> RunStats:
    """Reflow every paragraph of ``source`` into ``sink``.

    Each consumed blank input line becomes one blank output line, but blanks
    are only written ahead of further text, never after the last paragraph.
    """
    scanner = LineScanner(source, encoding=encoding)
    reflower = Reflower(widths, encoding=encoding)
    stats = RunStats()
    pending_blanks = 0

    for para, more in iter_paragraphs(scanner):
        if para:
            if pending_blanks:
                sink.write(b"\n" * pending_blanks)
                pending_blanks = 0
            out = reflower.reflow(para)
            for line in out:
                sink.write(line)
                sink.write(b"\n")
            stats.paragraphs += 1
            stats.lines_out += len(out)
        if more:
            pending_blanks += 1

    stats.lines_in = scanner.lines_read
    stats.error = scanner.error
    return stats


def format_bytes(data: bytes, widths: Optional[Widths] = None, encoding: str = "utf-8") -> bytes:
    sink = io.BytesIO()
    format_stream(io.BytesIO(data), sink, widths or Widths(), encoding=encoding)
    return sink.getvalue()


def format_text(text: str, widths: Optional[Widths] = None) -> str:
    data = format_bytes(text.encode("utf-8", DECODE_ERRORS), widths)
    return data.decode("utf-8", DECODE_ERRORS)


def run(cfg: RunConfig) -> RunStats:
    logger = get_logger()
    widths = cfg.widths()
    logger.debug(f"Widths: {widths.minimum}..{widths.maximum} encoding={cfg.encoding}")

    with open_input(cfg.input) as source, open_output(cfg.output) as sink:
        stats = format_stream(source, sink, widths, encoding=cfg.encoding)

    logger.debug(f"Read {stats.lines_in} lines, wrote {stats.paragraphs} paragraphs in {stats.lines_out} lines")
    if stats.error is not None:
        # Output already written stands; the failure is only reported.
        logger.error(f"Read error: {stats.error}")
    return stats
