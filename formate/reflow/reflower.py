from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .literal import check_encoding, decode_line, encode_line, is_literal_text


DEFAULT_MIN_WIDTH = 45
DEFAULT_MAX_WIDTH = 75


@dataclass(frozen=True)
class Widths:
    minimum: int = DEFAULT_MIN_WIDTH
    maximum: int = DEFAULT_MAX_WIDTH

    def __post_init__(self) -> None:
        if self.minimum < 0 or self.maximum < 0:
            raise ValueError(f"widths must be non-negative, got {self.minimum}..{self.maximum}")
        if self.minimum > self.maximum:
            raise ValueError(f"minimum width {self.minimum} exceeds maximum width {self.maximum}")


def _join_forward(lines: List[str], i: int, minimum: int) -> str:
    line = lines[i]
    while len(line) < minimum:
        nxt = i + 1
        if nxt == len(lines) or is_literal_text(lines[nxt]):
            break
        if not line.endswith(" "):
            line += " "
        line += lines.pop(nxt)
    return line


def _split_index(line: str, maximum: int) -> int:
    for idx in range(maximum, -1, -1):
        if line[idx] == " ":
            return idx
    # No space in reach: split at the very start, leaving an empty head.
    return 0


def _carry_forward(lines: List[str], i: int, rest: str) -> None:
    # A split on a trailing space leaves nothing to carry.
    if not rest:
        return
    nxt = i + 1
    if nxt == len(lines):
        lines.append(rest)
    elif is_literal_text(lines[nxt]):
        lines.insert(nxt, rest)
    else:
        if not rest.endswith(" "):
            rest += " "
        lines[nxt] = rest + lines[nxt]


def reflow_lines(lines: Sequence[str], widths: Widths) -> List[str]:
    """Reflow one paragraph of decoded lines.

    The cursor walks a private copy of the paragraph. Joins pop lines ahead of
    it and splits push the remainder into the line ahead of it, so nothing
    behind the cursor is ever revisited.
    """
    work = list(lines)
    out: List[str] = []
    i = 0
    while i < len(work):
        if is_literal_text(work[i]):
            out.append(work[i])
            i += 1
            continue

        line = _join_forward(work, i, widths.minimum)
        if len(line) > widths.maximum:
            cut = _split_index(line, widths.maximum)
            rest = line[cut + 1 :]
            line = line[:cut]
            _carry_forward(work, i, rest)

        work[i] = line
        out.append(line)
        i += 1
    return out


class Reflower:
    def __init__(self, widths: Widths, encoding: str = "utf-8") -> None:
        check_encoding(encoding)
        self.widths = widths
        self.encoding = encoding

    def reflow(self, paragraph: Sequence[bytes]) -> List[bytes]:
        text = [decode_line(line, self.encoding) for line in paragraph]
        return [encode_line(line, self.encoding) for line in reflow_lines(text, self.widths)]


def reflow_paragraph(paragraph: Sequence[bytes], widths: Widths, encoding: str = "utf-8") -> List[bytes]:
    return Reflower(widths, encoding=encoding).reflow(paragraph)
