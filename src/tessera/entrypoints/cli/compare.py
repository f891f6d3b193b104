"""``tessera compare``: structural comparison of two JSON documents."""

import json
import logging
from typing import Any, TextIO

import click

from tessera.value_graph import equals

from .helpers.messages import success, warn

logger = logging.getLogger(__name__)

EXIT_DIFFERENT = 1  # pragma: no mutate


def _load_json(stream: TextIO, param_hint: str) -> Any:
    """Parse one JSON document, turning syntax errors into usage errors.

    Raises:
        click.BadParameter: If the stream does not hold valid JSON.
    """
    try:
        return json.load(stream)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(
            f"{stream.name} is not valid JSON: {exc}", param_hint=param_hint
        ) from exc


@click.command()
@click.argument("left", type=click.File("r", encoding="utf-8"))
@click.argument("right", type=click.File("r", encoding="utf-8"))
@click.pass_context
def compare(ctx: click.Context, left: TextIO, right: TextIO) -> None:
    """Compare two JSON documents structurally.

    Prints ``equal`` or ``different`` on stdout and exits with status 0 when
    the documents are equal, 1 when they differ. Object key order is ignored;
    everything else (array order, value types) must match. Use ``-`` to read
    one document from stdin.
    """
    left_value = _load_json(left, "LEFT")
    right_value = _load_json(right, "RIGHT")
    logger.debug("Comparing %s with %s", left.name, right.name)

    if equals(left_value, right_value):
        click.echo("equal")
        success("Documents are structurally equal.")
        return

    click.echo("different")
    warn("Documents differ.")
    ctx.exit(EXIT_DIFFERENT)
