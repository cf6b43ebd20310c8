"""Logging for the solid CLI.

Records go to two places:

- the console, through a Rich handler on stderr, at the level picked with
  ``-v``/``-q`` (DEBUG and source locations with ``--debug``);
- the flight recorder, an in-memory buffer kept at DEBUG that is written to
  the log file once a WARNING arrives, or on exit with ``--force-flush``.

`configure_logging` wires both from a `LoggingSettings`.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from solid_principles import config

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "solid_principles"
BASE_LEVEL = logging.WARNING
FILE_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s:%(lineno)d: %(message)s"
REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich", "platformdirs")


def console_level(verbose: int = 0, quiet: int = 0) -> int:
    """WARNING moved one level per ``-v`` (down) or ``-q`` (up), within DEBUG..CRITICAL."""
    level = BASE_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with ``[package]``.

    Project records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


@dataclass(frozen=True)
class LoggingSettings:
    """What the ``solid`` options ask of logging.

    ``log_path=None`` turns the flight recorder off.
    """

    level: int = BASE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = 2000
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        return logging.DEBUG if self.debug else self.level

    @property
    def flight_recorder(self) -> bool:
        return self.log_path is not None


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return the stderr console handler.

    In debug mode every record is shown with its time, logger and source
    location; otherwise third-party records carry a ``[package]`` prefix.
    """
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a buffer of up to `capacity` records flushed to `path`.

    The file is opened lazily and truncated, so a run that never flushes
    leaves no file behind and each flushing run replaces the previous log.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[Handler]:
    """Install the console handler and, if enabled, the flight recorder.

    The root logger passes everything (DEBUG); each handler applies its own
    level. Per-logger overrides apply to both destinations.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[Handler] = [
        config_console_handler(
            level=settings.level, debug_mode=settings.debug, color=settings.color
        )
    ]
    if settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                settings.log_path,
                capacity=settings.capacity,
                flush_on_close=settings.force_flush,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<not installed>"


def log_startup(logger: Logger, settings: LoggingSettings, *, app_version: str) -> None:
    """Log a one-line INFO banner, then DEBUG diagnostics for bug reports.

    Diagnostics cover the interpreter, the CLI libraries, the ``SOLID_*``
    illustration settings, the flight recorder and per-logger overrides.
    """
    logger.info(
        "solid %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.flight_recorder else "OFF",
    )
    logger.debug(
        "Python %s on %s %s (pid %s)",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
        os.getpid(),
    )
    logger.debug(
        "Libraries: %s",
        ", ".join(f"{n} {_distribution_version(n)}" for n in REPORTED_DISTRIBUTIONS),
    )
    logger.debug(
        "Illustration settings: %s=%r, %s=%r",
        config.DEFAULT_AMOUNT_ENV,
        os.environ.get(config.DEFAULT_AMOUNT_ENV),
        config.DEFAULT_PAYLOAD_ENV,
        os.environ.get(config.DEFAULT_PAYLOAD_ENV),
    )
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>",
    )
