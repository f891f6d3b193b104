"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from tessera.adapters.id_generators import ID_GENERATORS, build_id_generator
from tessera.interfaces.id_generator import IdGenerator

# Generators whose ids sort in creation order
MONOTONIC_GENERATORS = ["ulid", "simple"]


@pytest.fixture(params=sorted(ID_GENERATORS))
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh instance of every registered IdGenerator.

    New adapters are picked up automatically once they are added to
    `ID_GENERATORS`.
    """
    yield build_id_generator(request.param)


@pytest.fixture(params=MONOTONIC_GENERATORS)
def monotonic_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield instances of IdGenerators that promise monotonic ID order."""
    yield build_id_generator(request.param)
