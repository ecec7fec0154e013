"""String helpers: padding, trimming, splitting, hashing and lexical casts."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import BinaryIO, Iterable, Sequence

__all__ = [
    "Padding",
    "to_upper",
    "to_lower",
    "to_string",
    "pad_string",
    "spaces",
    "trim_string",
    "trim_quotes",
    "trim_end",
    "trim_start",
    "erase_chars",
    "get_quoted_string",
    "split_string",
    "tokenize",
    "format_string_array",
    "trim_strings",
    "split_filename",
    "split_path",
    "str_icmp",
    "starts_with",
    "ends_with",
    "str_mid",
    "hash_str",
    "write_binary_string",
    "read_binary_string",
    "lexical_cast",
    "to_bool",
]


class Padding(IntEnum):
    """Where padding goes when a string is widened."""

    LEFT = 1  # padding before the text (right justified)
    RIGHT = 2  # padding after the text (left justified)
    DEFAULT = RIGHT


def to_upper(text: str) -> str:
    """Return ``text`` in upper case."""
    return text.upper()


def to_lower(text: str) -> str:
    """Return ``text`` in lower case."""
    return text.lower()


def _format_scalar(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return "%d" % value
    if isinstance(value, float):
        return "%f" % value
    raise TypeError(f"cannot convert {type(value).__name__} to a string")


def to_string(value: object) -> str:
    """Render a scalar or a 2 to 4 element vector as text.

    Booleans become ``1``/``0``, integers use ``%d``, floats ``%f``. Vectors
    are rendered as ``(x, y, ...)``; boolean vectors use ``true``/``false``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return _format_scalar(value)
    if isinstance(value, Sequence) and 2 <= len(value) <= 4:
        if all(isinstance(item, bool) for item in value):
            parts = ["true" if item else "false" for item in value]
        elif all(isinstance(item, int) and not isinstance(item, bool) for item in value):
            parts = ["%d" % item for item in value]
        elif all(isinstance(item, (int, float)) and not isinstance(item, bool) for item in value):
            parts = ["%f" % item for item in value]
        else:
            raise TypeError("vector elements must all be bools, ints or floats")
        return "(" + ", ".join(parts) + ")"
    raise TypeError(f"cannot convert {type(value).__name__} to a string")


def pad_string(text: str, width: int, padding: Padding = Padding.DEFAULT) -> str:
    """Pad ``text`` with spaces to ``width``, or truncate it if it is longer."""
    if len(text) >= width:
        return text[:width]
    if padding == Padding.LEFT:
        return text.rjust(width)
    return text.ljust(width)


def spaces(width: int) -> str:
    """Return a string of ``width`` spaces."""
    return " " * max(width, 0)


def trim_string(text: str) -> str:
    """Strip leading and trailing space characters (only ``' '``)."""
    return text.strip(" ")


def trim_quotes(text: str) -> str:
    """Strip leading and trailing double quotes."""
    return text.strip('"')


def trim_end(text: str, token: str) -> str:
    """Strip every trailing occurrence of the character ``token``."""
    return text.rstrip(token) if token else text


def trim_start(text: str, token: str) -> str:
    """Strip every leading occurrence of the character ``token``."""
    return text.lstrip(token) if token else text


def erase_chars(text: str, chars: str) -> str:
    """Remove every occurrence of each character in ``chars``."""
    return "".join(c for c in text if c not in chars)


def get_quoted_string(text: str) -> str:
    """Return the text between the first two double quotes, or ``""``."""
    first = text.find('"')
    if first == -1:
        return ""
    second = text.find('"', first + 1)
    if second == -1:
        return ""
    return text[first + 1:second]


def split_string(text: str, token: str) -> tuple[str, str]:
    """Split at the first ``token``; the right part is empty if it is absent."""
    left, _, right = text.partition(token)
    return left, right


def tokenize(text: str, token: str = " ") -> list[str]:
    """Split ``text`` on ``token``, dropping empty pieces."""
    return [piece for piece in text.split(token) if piece]


def format_string_array(strings: Iterable[str]) -> str:
    """Render strings as ``{ a, b, c }``."""
    return "{ " + ", ".join(strings) + " }"


def trim_strings(strings: Iterable[str]) -> list[str]:
    """Return the strings with surrounding spaces removed."""
    return [trim_string(s) for s in strings]


def split_filename(text: str) -> tuple[str, str]:
    """Split at the last ``.`` into name and extension.

    Without a dot the whole text is the name and the extension is empty.
    """
    pos = text.rfind(".")
    if pos == -1:
        return text, ""
    return text[:pos], text[pos + 1:]


def split_path(text: str) -> tuple[str, str]:
    """Split at the last ``/`` or ``\\`` into directory and name."""
    last = max(text.rfind("/"), text.rfind("\\"))
    if last == -1:
        return "", text
    return text[:last], text[last + 1:]


def str_icmp(a: str, b: str) -> bool:
    """Case-insensitive equality."""
    return a.lower() == b.lower()


def starts_with(text: str, token: str) -> bool:
    """Case-insensitive prefix test."""
    if len(token) > len(text):
        return False
    return text[:len(token)].lower() == token.lower()


def ends_with(text: str, token: str) -> bool:
    """Case-insensitive suffix test."""
    if len(token) > len(text):
        return False
    return text[len(text) - len(token):].lower() == token.lower()


def str_mid(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters starting at ``start``."""
    if start < 0 or start > len(text):
        raise IndexError(f"start {start} is outside a string of length {len(text)}")
    return text[start:start + length]


def _signed_byte(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value >= 0x80 else value


def hash_str(text: str) -> int:
    """Case-folding 32-bit string hash (multiplier 131)."""
    result = 0
    for byte in text.encode("utf-8"):
        c = _signed_byte(byte)
        c = _signed_byte(c - (c & (c >> 1) & 0x20))
        result = (131 * result + c) & 0xFFFFFFFF
    return result


def write_binary_string(stream: BinaryIO, text: str) -> int:
    """Write ``text`` followed by a NUL byte; return the bytes written."""
    data = text.encode("utf-8") + b"\0"
    written = stream.write(data)
    if written is not None and written != len(data):
        raise OSError(f"short write: {written} of {len(data)} bytes")
    return len(data)


def read_binary_string(stream: BinaryIO) -> str:
    """Read a NUL-terminated string written by :func:`write_binary_string`."""
    buffer = bytearray()
    while True:
        byte = stream.read(1)
        if not byte:
            raise EOFError("stream ended before the string terminator")
        if byte == b"\0":
            return buffer.decode("utf-8")
        buffer += byte


_INT_RE = re.compile(r"[+-]?\d+\s*\Z")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*\Z")
_WORD_RE = re.compile(r"\S+\s*\Z")


def _stream_text(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, ".6g")
    return str(value)


def lexical_cast(value: object, target: type):
    """Convert ``value`` to ``target`` through its text form.

    The text may carry trailing but not leading whitespace, and must be
    consumed entirely; otherwise :class:`ValueError` is raised.
    """
    if isinstance(value, str):
        if target is str:
            return value
        if target is bool:
            return to_bool(value)
    text = _stream_text(value)
    if target is str:
        if not _WORD_RE.match(text):
            raise ValueError(f"cannot convert {text!r} to str")
        return text.rstrip()
    if target is bool:
        if not _INT_RE.match(text):
            raise ValueError(f"cannot convert {text!r} to bool")
        number = int(text)
        if number not in (0, 1):
            raise ValueError(f"cannot convert {text!r} to bool")
        return bool(number)
    if target is int:
        if not _INT_RE.match(text):
            raise ValueError(f"cannot convert {text!r} to int")
        return int(text)
    if target is float:
        if not _FLOAT_RE.match(text):
            raise ValueError(f"cannot convert {text!r} to float")
        return float(text)
    raise TypeError(f"unsupported target type {target!r}")


def to_bool(text: str) -> bool:
    """Interpret text as a flag: empty, ``false`` and ``0`` are false."""
    trimmed = trim_string(text)
    if not trimmed:
        return False
    if str_icmp(trimmed, "false") or trimmed == "0":
        return False
    return True