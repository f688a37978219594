"""Row allocation for labels.

Each label either goes inline, on the underline row right after its
underline, or is deferred to a row below. A deferred label hangs off a
vertical connector that starts at its span's anchor column:

    0 | Strin::nouveau().i_like_tests(3.14158)
      ¦ ──┬──  ────┬──── ^ caps: I    ^^^^^^^ your π is bad
      ¦   │        ╰ use new()
      ¦   ╰ you probably meant String

Deferred labels are given rows from the right edge inwards, so a connector
never has to cross the text of a label to its right.
"""

from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass

# Row numbers: 0 is the source line, 1 the underline row, 2+ deferred rows
LINE_ROW = 0
UNDERLINE_ROW = 1
FIRST_DEFERRED_ROW = 2

# Elbow glyph followed by a space, in front of a deferred label
ELBOW_WIDTH = 2

Placement = namedtuple("Placement", ["index", "inline", "row"])
LayoutItem = namedtuple("LayoutItem", ["underline", "label_width"])


@dataclass
class Layout:
    """Where each label is drawn.

    Attributes:
        placements: One Placement per item, in the order the items were given
        row_count: Number of output rows, including the source line
    """

    placements: list[Placement]
    row_count: int

    @property
    def inline(self) -> list[Placement]:
        return [p for p in self.placements if p.inline]

    @property
    def deferred(self) -> list[Placement]:
        return [p for p in self.placements if not p.inline]


def _sorted_indices(items: list[LayoutItem]) -> list[int]:
    # Stable: equal columns keep the order the items were attached in
    return sorted(range(len(items)), key=lambda i: items[i].underline.column)


def _find_inline(items: list[LayoutItem], order: list[int]) -> set[int]:
    """Pick labels that fit on the underline row without hitting the next span."""
    inline = set()
    frontier = 0
    for pos, i in enumerate(order):
        underline, label_width = items[i]
        required_end = underline.column + underline.width + 1 + label_width
        if underline.column < frontier:
            continue
        if any(
            frontier <= items[j].underline.column < required_end
            for j in order[pos + 1 :]
        ):
            continue
        inline.add(i)
        frontier = required_end
    return inline


def _stack_rows(items: list[LayoutItem], deferred: list[int]) -> dict[int, int]:
    """One row per deferred label, rightmost anchor first."""
    by_anchor = sorted(
        deferred, key=lambda i: items[i].underline.anchor, reverse=True
    )
    return {i: FIRST_DEFERRED_ROW + n for n, i in enumerate(by_anchor)}


def _pack_rows(items: list[LayoutItem], deferred: list[int]) -> dict[int, int]:
    """Terminate as many deferred labels per row as fit.

    The rightmost open connector always ends on the current row. Any other
    label ends there too when its text stops at least one column before the
    next open connector to its right.
    """
    rows = {}
    pending = sorted(deferred, key=lambda i: items[i].underline.anchor)
    row = FIRST_DEFERRED_ROW
    while pending:
        remaining = []
        for pos, i in enumerate(pending):
            underline, label_width = items[i]
            if pos + 1 < len(pending):
                next_anchor = items[pending[pos + 1]].underline.anchor
                text_end = underline.anchor + ELBOW_WIDTH + label_width
                if text_end >= next_anchor:
                    remaining.append(i)
                    continue
            rows[i] = row
        pending = remaining
        row += 1
    return rows


def allocate_rows(items: list[LayoutItem], compact: bool = False) -> Layout:
    """Decide for every label whether it is drawn inline or on a lower row.

    Args:
        items: (Underline, label display width) per label, in attachment order
        compact: Share deferred rows between labels that do not collide,
            instead of giving every deferred label a row of its own.
    """
    if not items:
        return Layout([], LINE_ROW + 1)

    order = _sorted_indices(items)
    inline = _find_inline(items, order)
    deferred = [i for i in order if i not in inline]
    rows = (_pack_rows if compact else _stack_rows)(items, deferred)

    placements = [
        Placement(i, i in inline, rows.get(i, UNDERLINE_ROW))
        for i in range(len(items))
    ]
    row_count = max(rows.values(), default=UNDERLINE_ROW) + 1
    return Layout(placements, row_count)


def connectors(
    layout: Layout, items: list[LayoutItem], row: int
) -> list[tuple[int, int, bool]]:
    """Connector glyphs of one deferred row, left to right.

    Returns (item index, anchor column, terminates here) for every deferred
    label whose connector reaches this row.
    """
    reaching = [p for p in layout.deferred if p.row >= row]
    reaching.sort(key=lambda p: items[p.index].underline.anchor)
    return [
        (p.index, items[p.index].underline.anchor, p.row == row) for p in reaching
    ]
