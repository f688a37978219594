"""Byte offset to display column mapping.

Spans are given as UTF-8 byte offsets into the line, but everything is drawn
in terminal columns. Wide (East Asian) characters take two columns, combining
marks and ANSI escape sequences take none.
"""

from __future__ import annotations

import re
import unicodedata

from .errors import OffsetError

# Regex pattern to strip ANSI escape sequences
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def _char_width(c: str) -> int:
    if unicodedata.combining(c) or unicodedata.category(c) == "Cf":
        return 0
    return 2 if unicodedata.east_asian_width(c) in "WF" else 1


def display_width(text: str) -> int:
    """Calculate the display width of a string in terminal columns."""
    return sum(_char_width(c) for c in strip_ansi(text))


def _prefix(line: str, byte_offset: int) -> str:
    """Return the part of line before byte_offset, validating the offset."""
    data = line.encode("utf-8")
    if byte_offset < 0 or byte_offset > len(data):
        raise OffsetError(
            f"byte offset {byte_offset} is outside the line (0..{len(data)})"
        )
    # UTF-8 continuation bytes are 0b10xxxxxx
    if byte_offset < len(data) and data[byte_offset] & 0xC0 == 0x80:
        raise OffsetError(f"byte offset {byte_offset} is not on a character boundary")
    return data[:byte_offset].decode("utf-8")


def column_of(line: str, byte_offset: int) -> int:
    """Display column at which the character at byte_offset is drawn.

    Raises:
        OffsetError: if the offset is out of bounds or inside a character.
    """
    return display_width(_prefix(line, byte_offset))


def char_index(line: str, byte_offset: int) -> int:
    """Convert a UTF-8 byte offset into an index into the str."""
    return len(_prefix(line, byte_offset))
