from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


@contextmanager
def open_input(path: Optional[Path]) -> Iterator[BinaryIO]:
    if path is None:
        yield sys.stdin.buffer
        return
    with path.open("rb") as fh:
        yield fh


@contextmanager
def open_output(path: Optional[Path]) -> Iterator[BinaryIO]:
    if path is None:
        sink = sys.stdout.buffer
        try:
            yield sink
        finally:
            sink.flush()
        return
    ensure_parent(path)
    with path.open("wb") as fh:
        yield fh
