from __future__ import annotations

from dataclasses import dataclass

from .charset import Charset
from .spans import Span


@dataclass(frozen=True)
class Underline:
    """Glyphs drawn under one span on the underline row."""

    column: int
    width: int
    anchor: int  # Absolute column where a connector departs
    charset: Charset

    def glyphs(self, deferred: bool = False) -> str:
        """Underline text for this span.

        A span whose label moves to a lower row gets a bar with the anchor
        glyph in it, everything else gets a run of markers.
        """
        cs = self.charset
        if not deferred or self.width == 1:
            return cs.spanning * self.width
        left = self.anchor - self.column
        return (
            cs.spanning_out * left
            + cs.spanning_mid
            + cs.spanning_out * (self.width - left - 1)
        )


def build_underline(span: Span, charset: Charset) -> Underline:
    # Floor of the midpoint, which is the left column for a width of 2
    anchor = span.column + (span.width - 1) // 2
    return Underline(span.column, span.width, anchor, charset)
