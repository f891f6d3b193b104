"""Global pytest fixtures and hooks for TESSERA."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from tessera.domain.entity_id import EntityId

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test folder -> marker added to every test collected below it
FOLDER_MARKERS = {
    "unit": pytest.mark.unit,
    "contract": pytest.mark.contract,
    "e2e": pytest.mark.e2e,
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Add the folder's default mark to every item that does not carry it yet."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        if (marker := FOLDER_MARKERS.get(folder)) is None:
            continue
        if not any(m.name == marker.name for m in item.iter_markers()):
            item.add_marker(marker)


@pytest.fixture(autouse=True)
def reset_default_id_generator() -> Iterator[None]:
    """Undo any process-wide id generator a test installed (e.g. via bootstrap)."""
    yield
    EntityId.use_id_generator(None)
