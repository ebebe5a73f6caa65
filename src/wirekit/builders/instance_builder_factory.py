from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from wirekit.builders.instance_builder import InstanceBuilder

if TYPE_CHECKING:
    from wirekit.container import Container

T = TypeVar("T")


class InstanceBuilderFactory:
    """Create instance builders configured from the container's metadata provider."""

    @staticmethod
    def create(concrete: type[T], container: Container) -> InstanceBuilder[T]:
        """Return a builder for ``concrete`` bound to ``container``.

        Classes without injection metadata get a pass-through builder that
        constructs with the caller's arguments only.

        Raises:
            WirekitMetadataUnavailableError: If the provider cannot describe ``concrete``.

        """
        metadata = container.metadata_provider.get_metadata(concrete)
        return InstanceBuilder(concrete, container, metadata)
