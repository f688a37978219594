from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Charset:
    """Glyphs used to draw a diagnostic.

    Attributes:
        column_line: Gutter separator on the source line row
        column_broken_line: Gutter separator on every row below the source line
        spanning: Marker glyph under spans whose label is inline (and width-1 spans)
        spanning_out: Bar glyph under spans whose label is moved to a lower row
        spanning_mid: Anchor glyph in the bar where the connector departs
        out_extension: Vertical pass-through glyph of a connector
        out_end: Elbow glyph that terminates a connector before its label
        note: Gutter glyph in front of the trailing note
    """

    column_line: str = "|"
    column_broken_line: str = "¦"
    spanning: str = "^"
    spanning_out: str = "─"
    spanning_mid: str = "┬"
    out_extension: str = "│"  # box drawing, not a pipe
    out_end: str = "╰"
    note: str = ">"

    @classmethod
    def unicode(cls) -> Charset:
        """Box drawing glyphs (the default)."""
        return cls()

    @classmethod
    def ascii(cls) -> Charset:
        """Plain ASCII glyphs for terminals without box drawing support."""
        return cls(
            column_line="|",
            column_broken_line=":",
            spanning="^",
            spanning_out="-",
            spanning_mid=".",
            out_extension="|",
            out_end="\\",
            note=">",
        )
