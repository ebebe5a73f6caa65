"""pytest fixtures for wirekit containers.

Enable with ``pytest_plugins = ["wirekit.integrations.pytest_plugin"]`` in a
``conftest.py``.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from wirekit.builders.autowired import container_registry
from wirekit.container import Container


@pytest.fixture()
def wirekit_container() -> Container:
    """Create a per-test container.

    The fixture is function-scoped, so bindings are isolated between tests
    unless users override fixture scope explicitly.

    Returns:
        A new ``Container`` instance.

    """
    return Container()


@pytest.fixture()
def wirekit_autowire_container(wirekit_container: Container) -> Iterator[Container]:
    """Make ``wirekit_container`` the default container for ``@autowired`` classes.

    The process-wide ``container_registry`` is restored to its previous
    entries after the test.

    Yields:
        The per-test container.

    """
    previous = container_registry.copy()
    container_registry.set_default_container(wirekit_container)
    try:
        yield wirekit_container
    finally:
        container_registry.update_from(previous)
