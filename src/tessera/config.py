"""Configuration utilities for TESSERA.

This module centralizes small helpers and constants related to runtime
configuration. Settings come from environment variables so that applications
embedding the library can configure it without code changes.
"""

import os

ID_GENERATOR_ENV = "TESSERA_ID_GENERATOR"  # pragma: no mutate
DEFAULT_ID_GENERATOR = "uuid4"  # pragma: no mutate
ID_GENERATOR_NAMES = ("uuid4", "ulid", "simple")  # pragma: no mutate


class UnknownIdGeneratorError(Exception):
    """Raised when TESSERA_ID_GENERATOR names an unsupported generator."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown ID generator '{name}' in {ID_GENERATOR_ENV}. "
            f"Expected one of: {', '.join(ID_GENERATOR_NAMES)}."
        )
        self.name = name


def get_id_generator_name() -> str:
    """Get the configured entity ID generator name from the environment.

    Returns:
        The lower-cased value of `TESSERA_ID_GENERATOR`, or ``"uuid4"`` when it
        is unset or empty.

    Raises:
        UnknownIdGeneratorError: If the variable names an unsupported generator.
    """
    if not (name := os.environ.get(ID_GENERATOR_ENV, "").strip().lower()):
        return DEFAULT_ID_GENERATOR
    if name not in ID_GENERATOR_NAMES:
        raise UnknownIdGeneratorError(name)
    return name
