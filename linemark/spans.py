from __future__ import annotations

from dataclasses import dataclass

from .columns import column_of
from .errors import OverlapError, SpanError


@dataclass(frozen=True)
class Span:
    """A validated byte range of the line, with its display position.

    Attributes:
        start: Byte offset of the first character
        end: Byte offset just past the last character (== start for a point)
        column: Display column of start
        width: Columns covered by the underline, at least 1
        order: Attachment index, used as the tie-break between equal columns
    """

    start: int
    end: int
    column: int
    width: int
    order: int = 0

    @property
    def columns(self) -> range:
        """Half-open range of display columns the underline occupies."""
        return range(self.column, self.column + self.width)

    def sort_key(self) -> tuple[int, int]:
        return self.column, self.order


def validate_span(line: str, start: int, end: int, order: int = 0) -> Span:
    """Check (start, end) against the line and build a Span.

    Zero-width spans are widened to a single column anchored at start.

    Raises:
        SpanError: start > end, or a bound past the end of the line.
        OffsetError: a bound that is not on a character boundary.
    """
    length = len(line.encode("utf-8"))
    if start > end:
        raise SpanError(f"span start {start} is after its end {end}")
    if start < 0 or end > length:
        raise SpanError(f"span {start}..{end} is outside the line (0..{length})")
    column = column_of(line, start)
    width = column_of(line, end) - column
    return Span(start, end, column, max(width, 1), order)


def check_overlap(spans: list[Span], span: Span) -> None:
    """Raise OverlapError if span shares any column with one of spans."""
    for other in spans:
        if span.column < other.columns.stop and other.column < span.columns.stop:
            raise OverlapError(
                f"span {span.start}..{span.end} overlaps span {other.start}..{other.end}"
            )
