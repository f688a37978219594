from __future__ import annotations

from .charset import Charset
from .columns import display_width
from .errors import LayoutError
from .layout import (
    ELBOW_WIDTH,
    FIRST_DEFERRED_ROW,
    Layout,
    LayoutItem,
    allocate_rows,
    connectors,
)
from .logging import logger
from .spans import Span, check_overlap, validate_span
from .underline import build_underline

# ANSI escape codes used by render(color=True) (can be monkeypatched for styling)
ESC = "\x1b["
RESET = f"{ESC}0m"
GUTTER = f"{ESC}90m"  # Dark grey for line number and gutter glyphs
MARK = f"{ESC}1;31m"  # Bold red for underlines and connectors


def _single_line(text: str, what: str) -> str:
    if "\n" in text or "\r" in text:
        raise ValueError(f"{what} must be a single line: {text!r}")
    return text


class Diagnostic:
    """One source line with labeled spans, rendered as a text diagram.

    Build it up with the chaining methods, then call render():

        >>> d = Diagnostic("im out of this worl", charset=Charset.ascii())
        >>> print(d.label(15, 19, "forgot d").label(0, 2, "forgot '").render())
        0 | im out of this worl
          : ^^ forgot '    ^^^^ forgot d

    Spans are UTF-8 byte offsets into the line. Labels may carry ANSI color
    codes, which take no room in the layout. Rendering never modifies the
    diagnostic.
    """

    def __init__(
        self, line: str, *, lineno: int = 0, charset: Charset | None = None
    ) -> None:
        self.line = _single_line(line.rstrip("\n\r"), "line")
        self.lineno = lineno
        self.glyphs = charset or Charset.unicode()
        self.header: str | None = None
        self.footer: str | None = None
        self.spans: list[Span] = []
        self.labels: list[str] = []

    def label(self, start: int, end: int, text: str) -> Diagnostic:
        """Attach a label to the bytes start..end of the line.

        Raises:
            OffsetError: a bound is not on a character boundary
            SpanError: start > end or a bound is past the end of the line
            OverlapError: the span shares columns with an earlier one
        """
        _single_line(text, "label")
        try:
            span = validate_span(self.line, start, end, order=len(self.spans))
            check_overlap(self.spans, span)
        except LayoutError as e:
            logger.debug(f"Rejected label {text!r} at {start}..{end}: {e}")
            raise
        self.spans.append(span)
        self.labels.append(text)
        return self

    def message(self, text: str) -> Diagnostic:
        """Set the header line printed above the source line."""
        self.header = _single_line(text, "message")
        return self

    def note(self, text: str) -> Diagnostic:
        """Set the note printed below the diagram (replaces any earlier note)."""
        self.footer = _single_line(text, "note")
        return self

    def charset(self, charset: Charset) -> Diagnostic:
        self.glyphs = charset
        return self

    def _items(self) -> list[LayoutItem]:
        return [
            LayoutItem(build_underline(span, self.glyphs), display_width(text))
            for span, text in zip(self.spans, self.labels)
        ]

    def layout(self, *, compact: bool = False) -> Layout:
        """Inline/deferred decision and row of every label, in attachment order."""
        return allocate_rows(self._items(), compact)

    def body_rows(self, *, color: bool = False, compact: bool = False) -> list[str]:
        """Underline row and deferred rows, without the gutter."""
        items = self._items()
        if not items:
            return []
        layout = allocate_rows(items, compact)

        def paint(glyphs: str) -> str:
            return f"{MARK}{glyphs}{RESET}" if color else glyphs

        # Underline row with inline labels
        parts = []
        pos = 0
        order = sorted(range(len(items)), key=lambda i: self.spans[i].sort_key())
        for i in order:
            underline, label_width = items[i]
            inline = layout.placements[i].inline
            parts.append(" " * (underline.column - pos))
            parts.append(paint(underline.glyphs(deferred=not inline)))
            pos = underline.column + underline.width
            if inline:
                parts.append(f" {self.labels[i]}")
                pos += 1 + label_width
        rows = ["".join(parts)]

        # Deferred rows, each connector passing down until its label's row
        for row in range(FIRST_DEFERRED_ROW, layout.row_count):
            parts = []
            pos = 0
            for i, anchor, ends in connectors(layout, items, row):
                parts.append(" " * (anchor - pos))
                if ends:
                    parts.append(f"{paint(self.glyphs.out_end)} {self.labels[i]}")
                    pos = anchor + ELBOW_WIDTH + items[i].label_width
                else:
                    parts.append(paint(self.glyphs.out_extension))
                    pos = anchor + 1
            rows.append("".join(parts))
        return rows

    def render(self, *, color: bool = False, compact: bool = False) -> str:
        """Render the diagram as text, rows separated by newlines.

        Args:
            color: Paint gutter, underlines and connectors with ANSI codes.
            compact: Let deferred labels share a row when they do not collide.
        """
        cs = self.glyphs
        number = str(self.lineno)
        pad = " " * len(number)
        if color:
            first = f"{GUTTER}{number} {cs.column_line}{RESET} "
            cont = f"{GUTTER}{pad} {cs.column_broken_line}{RESET} "
            note = f"{GUTTER}{pad} {cs.note}{RESET} "
        else:
            first = f"{number} {cs.column_line} "
            cont = f"{pad} {cs.column_broken_line} "
            note = f"{pad} {cs.note} "

        output = []
        if self.header is not None:
            output.append(self.header)
        output.append(f"{first}{self.line}")
        for row in self.body_rows(color=color, compact=compact):
            output.append(f"{cont}{row}")
        if self.footer is not None:
            output.append(f"{note}{self.footer}")
        return "\n".join(output)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Diagnostic {self.line!r} with {len(self.spans)} labels>"
