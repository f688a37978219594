"""Exceptions raised while attaching spans to a diagnostic.

All of them are raised at the point a span is attached, never during
rendering, so a diagnostic that accepted every label always renders.
"""


class LayoutError(ValueError):
    """Base class for invalid span or offset input."""


class OffsetError(LayoutError):
    """A byte offset is out of bounds or splits a UTF-8 character."""


class SpanError(LayoutError):
    """A span's bounds are reversed or exceed the line."""


class OverlapError(SpanError):
    """A span shares display columns with a previously attached span."""
