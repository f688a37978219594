from __future__ import annotations

import sys
from typing import TextIO

from .columns import ANSI_ESCAPE_RE
from .diagnostic import RESET, Diagnostic
from .logging import logger


def tty_diagnostic(
    diagnostic: Diagnostic,
    *,
    file: TextIO | None = None,
    compact: bool = False,
) -> None:
    """Print a diagnostic for terminal output (TTY).

    Colors are used only when the output is a terminal. Otherwise all ANSI
    escape sequences are stripped, including any the caller put in labels.

    Args:
        diagnostic: The diagnostic to print.
        file: Output file. Defaults to sys.stderr.
        compact: Let deferred labels share rows when they do not collide.
    """
    if file is None:
        file = sys.stderr

    is_tty = file.isatty() if hasattr(file, "isatty") else False

    output = diagnostic.render(color=is_tty, compact=compact)
    # Reset to original terminal colors
    output += "\n" + RESET

    if not is_tty:
        # Strip all ANSI escape sequences for non-TTY output
        logger.debug("Output is not a terminal, printing without colors")
        output = ANSI_ESCAPE_RE.sub("", output)

    file.write(output)
