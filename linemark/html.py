from __future__ import annotations

from importlib.resources import files
from typing import Any, cast

from html5tagger import E  # type: ignore[import]

from .columns import char_index, strip_ansi
from .diagnostic import Diagnostic

style = files(cast(str, __package__)).joinpath("style.css").read_text(encoding="UTF-8")


def html_diagnostic(
    diagnostic: Diagnostic,
    *,
    include_css: bool = True,
    compact: bool = False,
) -> Any:
    """Render a diagnostic as an HTML fragment.

    The source line is shown with every span inside a <mark> element that
    carries its label in data-label. The underline and connector rows follow
    as plain text so that the diagram stays aligned in the <pre> block.
    ANSI color codes are removed from all caller supplied text.
    """
    cs = diagnostic.glyphs
    number = str(diagnostic.lineno)
    pad = " " * len(number)

    with E.div(class_="linemark") as doc:
        if include_css:
            doc._style(style)

        if diagnostic.header is not None:
            doc.h3(strip_ansi(diagnostic.header))

        with doc.pre, doc.code:
            with doc.span(class_="codeline", data_lineno=diagnostic.lineno):
                doc.span(f"{number} {cs.column_line} ", class_="gutter")
                _marked_line(doc, diagnostic)
            for row in diagnostic.body_rows(compact=compact):
                doc("\n")
                doc.span(f"{pad} {cs.column_broken_line} ", class_="gutter")
                doc(strip_ansi(row))

        if diagnostic.footer is not None:
            doc.p(strip_ansi(diagnostic.footer), class_="note")
    return doc


def _marked_line(doc: Any, diagnostic: Diagnostic) -> None:
    """Source line text with each labeled span wrapped in <mark>."""
    line = diagnostic.line
    pos = 0
    pairs = sorted(
        zip(diagnostic.spans, diagnostic.labels), key=lambda p: p[0].sort_key()
    )
    for span, label in pairs:
        beg = char_index(line, span.start)
        end = char_index(line, span.end)
        if beg > pos:
            doc(line[pos:beg])
        doc.mark(line[beg:end], data_label=strip_ansi(label))
        pos = end
    if pos < len(line):
        doc(line[pos:])
