from .literal import is_literal, is_literal_text
from .reflower import Reflower, Widths, reflow_lines, reflow_paragraph
from .segment import LineScanner, iter_paragraphs, next_paragraph

__all__ = [
    "LineScanner",
    "Reflower",
    "Widths",
    "is_literal",
    "is_literal_text",
    "iter_paragraphs",
    "next_paragraph",
    "reflow_lines",
    "reflow_paragraph",
]
