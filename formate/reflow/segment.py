from __future__ import annotations

from typing import BinaryIO, Iterator, List, Optional, Tuple

from .literal import check_encoding, decode_line, is_blank_text


class LineScanner:
    """Reads newline-delimited lines from a binary stream.

    A failing read ends the scan early; the exception is kept on ``error`` so
    the caller can report it once its output is complete.
    """

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8") -> None:
        self.stream = stream
        check_encoding(encoding)
        self.encoding = encoding
        self.error: Optional[OSError] = None
        self.lines_read = 0
        self._done = False

    def scan(self) -> Optional[bytes]:
        if self._done:
            return None
        try:
            raw = self.stream.readline()
        except OSError as e:
            self.error = e
            self._done = True
            return None
        if not raw:
            self._done = True
            return None
        self.lines_read += 1
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        return raw

    def is_blank(self, line: bytes) -> bool:
        return is_blank_text(decode_line(line, self.encoding))


def next_paragraph(scanner: LineScanner) -> Tuple[List[bytes], bool]:
    para: List[bytes] = []
    while True:
        line = scanner.scan()
        if line is None:
            return para, False
        if scanner.is_blank(line):
            return para, True
        para.append(line)


def iter_paragraphs(scanner: LineScanner) -> Iterator[Tuple[List[bytes], bool]]:
    while True:
        para, more = next_paragraph(scanner)
        yield para, more
        if not more:
            return
