"""Tessera CLI entry point.

Defines the top-level ``tessera`` command (via Click-Extra) and registers
subcommands exposed by the project.

Currently available commands
- ``tessera compare``: structural equality of two JSON documents.

Notes
- The CLI version is sourced from `tessera.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional commands should be registered here via ``tessera.add_command(...)``.

Examples
    $ tessera --version
    $ tessera -v compare before.json after.json
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from tessera import __version__
from tessera.logging import config_console_handler, log_startup

from .compare import compare as compare_command
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """TESSERA command-line interface.

    TESSERA clones, freezes and compares arbitrary value graphs by structure
    rather than by identity. The CLI exposes the structural comparison for
    JSON documents.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
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
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,  # repeatable option
    callback=parse_log_level,
    envvar="TESSERA_LOGGER_LEVELS",
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). This changes the "
        "logger's own level. Use to quiet verbose third-party libs. Repeatable "
        "(e.g. -L tessera=INFO -L markdown_it=ERROR) or via TESSERA_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    show_envvar=True,
)
@clickx.pass_context
def tessera(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """TESSERA command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) Configure root logger with configured handlers
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,  # override any existing logging config
    )

    # 3) Set per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 4) Log startup info
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    # 5) Ensure logging is cleanly shutdown on program exit
    ctx.call_on_close(logging.shutdown)


tessera.add_command(compare_command)
