"""Shared pytest fixtures for wirekit tests."""

import pytest

from wirekit.container import Container
from wirekit.lock_mode import LockMode
from wirekit.metadata import AnnotationMetadataProvider


@pytest.fixture()
def metadata_provider() -> AnnotationMetadataProvider:
    """Fresh provider so explicit registrations do not leak between tests."""
    return AnnotationMetadataProvider()


@pytest.fixture()
def container(metadata_provider: AnnotationMetadataProvider) -> Container:
    """Default container using an isolated metadata provider."""
    return Container(metadata_provider=metadata_provider)


@pytest.fixture()
def container_thread_locked(metadata_provider: AnnotationMetadataProvider) -> Container:
    """Container whose singletons lock their first resolution."""
    return Container(metadata_provider=metadata_provider, lock_mode=LockMode.THREAD)
