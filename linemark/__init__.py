from .charset import Charset
from .columns import column_of, display_width
from .diagnostic import Diagnostic
from .errors import LayoutError, OffsetError, OverlapError, SpanError
from .html import html_diagnostic
from .layout import Layout, Placement, allocate_rows
from .spans import Span, validate_span
from .tty import tty_diagnostic

__all__ = [
    "Diagnostic",
    "Charset",
    "tty_diagnostic",
    "html_diagnostic",
    "column_of",
    "display_width",
    "validate_span",
    "allocate_rows",
    "Span",
    "Layout",
    "Placement",
    "LayoutError",
    "OffsetError",
    "SpanError",
    "OverlapError",
]
