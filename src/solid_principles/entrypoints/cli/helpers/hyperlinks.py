"""OSC-8 hyperlinks for the solid CLI.

Terminals that understand OSC-8 render the reference links as clickable
text; everywhere else the plain URL is printed.
"""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort guess whether `stream` renders OSC-8 hyperlinks.

    Args:
        stream: Stream to check; defaults to ``sys.stdout``.

    Returns:
        bool: False for anything that is not a TTY; otherwise True for a
        small allowlist of terminals known to support OSC-8.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS:
        return True
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(("alacritty", "konsole"))


def hyperlink(url: str, text: str | None = None, stream: TextIO | None = None) -> str:
    """Return `url` as an OSC-8 hyperlink, or as plain text when unsupported.

    Args:
        url: Target URL.
        text: Visible label; defaults to the URL itself.
        stream: Stream the link will be written to; defaults to ``sys.stdout``.
    """
    if not supports_osc8(stream):
        return url
    return f"\x1b]8;;{url}\x07{text or url}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
