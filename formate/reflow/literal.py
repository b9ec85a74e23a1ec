from __future__ import annotations

import codecs
import unicodedata


DECODE_ERRORS = "surrogateescape"

# Latin-1 whitespace; above it only the Z* categories count. The \x1c-\x1f
# separator controls are not whitespace.
_LATIN1_SPACE = "\t\n\v\f\r \x85\xa0"


def check_encoding(encoding: str) -> str:
    """Return the codec name, or raise if lines can't be split on ``b"\\n"``.

    Unknown codecs raise ``LookupError``; codecs that are not ASCII compatible
    (UTF-16, UTF-32, ...) raise ``ValueError``.
    """
    name = codecs.lookup(encoding).name
    if "\n".encode(encoding) != b"\n" or "a".encode(encoding) != b"a":
        raise ValueError(f"encoding {encoding!r} is not ASCII compatible")
    return name


def decode_line(line: bytes, encoding: str = "utf-8") -> str:
    # Undecodable bytes become lone surrogates: one character each, and they
    # encode back to the exact original byte.
    return line.decode(encoding, DECODE_ERRORS)


def encode_line(text: str, encoding: str = "utf-8") -> bytes:
    return text.encode(encoding, DECODE_ERRORS)


def is_space(ch: str) -> bool:
    return ch in _LATIN1_SPACE or unicodedata.category(ch).startswith("Z")


def is_blank_text(text: str) -> bool:
    return all(is_space(ch) for ch in text)


def is_literal_text(text: str) -> bool:
    if not text:
        return True
    # Escaped bytes are category Cs, so malformed input lands here as well.
    return not unicodedata.category(text[0]).startswith("L")


def is_literal(line: bytes, encoding: str = "utf-8") -> bool:
    """True when the line must be passed through untouched.

    A line is reflowable only if its first character decodes cleanly and is a
    letter in some script. Empty lines, list markers, indented code,
    punctuation-led text and lines starting with a malformed byte sequence are
    all literal.
    """
    return is_literal_text(decode_line(line, encoding))
