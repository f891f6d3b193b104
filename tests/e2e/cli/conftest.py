"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at
every level, plus fixtures to register that command, obtain a CliRunner, and
write JSON documents for `tessera compare`.
"""

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import click
import pytest
from click.testing import CliRunner

from tessera.entrypoints.cli.main import tessera

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI logging tests.

    Emits DEBUG/INFO/WARNING/ERROR messages on the 'tessera.demo' logger and
    additional messages on a 'some.thirdparty' logger to exercise logger-level
    filtering and third-party prefixes.
    """
    logger = logging.getLogger("tessera.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo() -> Iterator[None]:
    """Register the 'log-demo' command for the duration of a test."""
    tessera.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(tessera, "log-demo")
        for name in ("tessera.demo", "some.thirdparty"):
            logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def json_file(tmp_path: Path) -> Callable[[str, Any], str]:
    """Return a helper that writes a JSON document and returns its path."""

    def write(name: str, document: Any) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)

    return write
