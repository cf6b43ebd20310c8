"""CLI helpers for the solid command.

Utilities used by the command-line interface: logger-level option parsing,
OSC-8 terminal hyperlinks when supported, stderr status messages with
emoji→ASCII fallbacks, and Rich rendering of the principle catalogue.
"""

from .hyperlinks import hyperlink
from .messages import error, success, warn

__all__ = ["error", "hyperlink", "success", "warn"]
