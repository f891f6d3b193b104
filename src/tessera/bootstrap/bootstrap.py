"""Build the configured adapters and install them as defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tessera import config
from tessera.adapters.id_generators import build_id_generator
from tessera.domain.entity_id import EntityId
from tessera.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    id_generator: IdGenerator


def bootstrap() -> AppContainer:
    """Wire the application from configuration.

    Builds the id generator named by ``TESSERA_ID_GENERATOR`` and installs it
    as the default client-id generator of `EntityId`.

    Returns:
        AppContainer: The wired components.

    Raises:
        UnknownIdGeneratorError: If the configured generator name is unknown.
    """
    name = config.get_id_generator_name()
    id_generator = build_id_generator(name)
    EntityId.use_id_generator(id_generator)
    logger.debug("Using %s for client ids", type(id_generator).__name__)

    return AppContainer(id_generator=id_generator)
