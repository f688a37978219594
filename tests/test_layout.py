"""Tests for row allocation of inline and deferred labels."""

from linemark.charset import Charset
from linemark.layout import (
    LayoutItem,
    Placement,
    allocate_rows,
    connectors,
)
from linemark.spans import Span
from linemark.underline import build_underline


def item(column, width, label_width):
    span = Span(column, column + width, column, width)
    return LayoutItem(build_underline(span, Charset.unicode()), label_width)


# Strin::nouveau().i_like_tests(3.14158) with its four labels
FLAGSHIP = [item(0, 5, 25), item(7, 9, 9), item(17, 1, 7), item(30, 7, 13)]

# A point whose label collides with an inline span, and a long label
# that would run over the last span. Both fit on one deferred row.
SHAREABLE = [item(0, 1, 4), item(3, 1, 1), item(20, 1, 30), item(40, 1, 2)]


def assignments(items, layout):
    return {
        (items[p.index].underline.column, p.inline, p.row) for p in layout.placements
    }


class TestAllocateRows:
    def test_no_items(self):
        layout = allocate_rows([])
        assert layout.placements == []
        assert layout.row_count == 1

    def test_single_item_is_inline(self):
        layout = allocate_rows([item(0, 5, 100)])
        assert layout.placements == [Placement(0, True, 1)]
        assert layout.row_count == 2

    def test_flagship(self):
        """The two leftmost labels are deferred, the right one nearer to row 1."""
        layout = allocate_rows(FLAGSHIP)
        assert layout.placements == [
            Placement(0, False, 3),
            Placement(1, False, 2),
            Placement(2, True, 1),
            Placement(3, True, 1),
        ]
        assert layout.row_count == 4
        assert [p.index for p in layout.inline] == [2, 3]
        assert [p.index for p in layout.deferred] == [0, 1]

    def test_non_colliding_labels_all_inline(self):
        items = [item(0, 2, 8), item(15, 4, 8)]
        layout = allocate_rows(items)
        assert all(p.inline for p in layout.placements)
        assert layout.row_count == 2

    def test_label_touching_next_span_is_inline(self):
        """required_end equal to the next column still fits."""
        layout = allocate_rows([item(0, 1, 3), item(5, 1, 1)])
        assert layout.placements[0].inline

    def test_label_one_column_too_long(self):
        layout = allocate_rows([item(0, 1, 4), item(5, 1, 1)])
        assert not layout.placements[0].inline
        assert layout.placements[0].row == 2

    def test_attachment_order_does_not_matter(self):
        forward = allocate_rows(FLAGSHIP)
        backward_items = FLAGSHIP[::-1]
        backward = allocate_rows(backward_items)
        assert assignments(FLAGSHIP, forward) == assignments(backward_items, backward)

    def test_equal_columns_keep_attachment_order(self):
        """With equal columns the earlier attached label is processed first."""
        wide_first = [item(4, 1, 20), item(4, 1, 1)]
        for items in (wide_first, wide_first[::-1]):
            layout = allocate_rows(items)
            assert layout.placements[0].inline is False
            assert layout.placements[1].inline is True

    def test_dense_labels_terminate(self):
        items = [item(c, 1, 10) for c in range(0, 20, 2)]
        layout = allocate_rows(items)
        deferred = layout.deferred
        assert len(deferred) == 9
        # One row per deferred label, rightmost first
        assert sorted(p.row for p in deferred) == list(range(2, 11))
        rows = {items[p.index].underline.anchor: p.row for p in deferred}
        assert rows[16] == 2
        assert rows[0] == 10
        assert layout.row_count == 11

    def test_placements_in_input_order(self):
        layout = allocate_rows(FLAGSHIP[::-1])
        assert [p.index for p in layout.placements] == [0, 1, 2, 3]


class TestCompact:
    def test_stacked_by_default(self):
        layout = allocate_rows(SHAREABLE)
        assert [p.inline for p in layout.placements] == [False, True, False, True]
        assert layout.placements[2].row == 2
        assert layout.placements[0].row == 3
        assert layout.row_count == 4

    def test_compact_shares_row(self):
        layout = allocate_rows(SHAREABLE, compact=True)
        assert layout.placements[0].row == 2
        assert layout.placements[2].row == 2
        assert layout.row_count == 3

    def test_compact_keeps_colliding_rows(self):
        """Labels that would run into the next connector still stack."""
        assert allocate_rows(FLAGSHIP, compact=True) == allocate_rows(FLAGSHIP)

    def test_compact_dense(self):
        items = [item(c, 1, 10) for c in range(0, 20, 2)]
        layout = allocate_rows(items, compact=True)
        assert layout.row_count == 11


class TestConnectors:
    def test_flagship_rows(self):
        layout = allocate_rows(FLAGSHIP)
        assert connectors(layout, FLAGSHIP, 2) == [(0, 2, False), (1, 11, True)]
        assert connectors(layout, FLAGSHIP, 3) == [(0, 2, True)]

    def test_unbroken_path(self):
        """Every deferred label has a connector on each row down to its own."""
        items = [item(c, 1, 10) for c in range(0, 20, 2)]
        layout = allocate_rows(items)
        for p in layout.deferred:
            for row in range(2, p.row + 1):
                reaching = {i: ends for i, _, ends in connectors(layout, items, row)}
                assert p.index in reaching
                assert reaching[p.index] == (row == p.row)

    def test_connectors_left_to_right(self):
        layout = allocate_rows(SHAREABLE, compact=True)
        assert connectors(layout, SHAREABLE, 2) == [(0, 0, True), (2, 20, True)]
