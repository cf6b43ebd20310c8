"""Parse ``NAME=LEVEL`` logger overrides given on the command line.

Values may arrive as repeated options (``-L a=INFO -L b=DEBUG``) or as one
comma/space separated string from ``SOLID_LOGGER_LEVELS``. Levels are either
standard level names (case-insensitive) or plain integers.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten raw option value(s) into non-empty ``NAME=LEVEL`` items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def to_level(text: str) -> int:
    """Convert a level name or number to its numeric logging level.

    Raises:
        ValueError: If `text` is neither a known level name nor an integer.
    """
    text = text.strip()
    if text.lstrip("-").isdigit():
        return int(text)
    level = logging.getLevelNamesMapping().get(text.upper())
    if level is None:
        raise ValueError(text)
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or names an
            unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in split_items(value or ()):
        name, sep, level_text = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        try:
            levels[name.strip()] = to_level(level_text)
        except ValueError as e:
            raise click.BadParameter(f"Invalid log level: {level_text}") from e
    return levels
