"""solid CLI entry point.

Defines the top-level ``solid`` command (via Click-Extra) and registers the
subcommands exposed by the project.

Currently available commands
- ``solid overview``: what SOLID is, its advantages, disadvantages and conclusion.
- ``solid principles``: one-line summary table of the five principles.
- ``solid explain PRINCIPLE``: one principle in detail.
- ``solid demo PRINCIPLE``: run an illustration, compliant or ``--before``.

Notes
- The CLI version is sourced from `solid_principles.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional commands should be registered here via ``solid.add_command(...)``.

Examples
    $ solid --version
    $ solid demo lsp
    $ solid demo ocp --before --tier premium
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from solid_principles import __version__
from solid_principles.logging import (
    LoggingSettings,
    configure_logging,
    console_level,
    log_startup,
)

from .catalog import explain, overview, principles
from .demo import demo
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """Illustrations of the SOLID object-oriented design principles.

    Each principle (SRP, OCP, LSP, ISP, DIP) is shown through a toy domain:
    users and logging, customer discounts, payments, printers and databases.
    Run an illustration in its compliant form, or with --before to see the
    design that violates the principle.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  SOLID : " + hyperlink("https://en.wikipedia.org/wiki/SOLID"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("solid", appauthor=False)) / "latest.log",
    envvar="SOLID_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="SOLID_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via SOLID_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a "
        "WARNING/ERROR occurs, or on clean exit if --force-flush is set."
    ),
    default=True,
    envvar="SOLID_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    envvar="SOLID_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight-recorder. Repeatable (e.g. -L click_extra=INFO) or "
        "via SOLID_LOGGER_LEVELS (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    envvar="SOLID_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def solid(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Illustrations of the SOLID object-oriented design principles."""
    settings = LoggingSettings(
        level=console_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    configure_logging(settings)
    log_startup(logger, settings, app_version=__version__)
    ctx.call_on_close(logging.shutdown)


solid.add_command(overview)
solid.add_command(principles)
solid.add_command(explain)
solid.add_command(demo)
