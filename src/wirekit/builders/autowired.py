"""Wire instances created by ordinary construction, outside container resolution."""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, TypeVar, overload

from wirekit.builders.instance_builder import (
    is_pipeline_constructing,
    released_pipeline_construction,
)
from wirekit.builders.instance_builder_factory import InstanceBuilderFactory
from wirekit.decorators import injectable
from wirekit.exceptions import WirekitContainerNotSetError

if TYPE_CHECKING:
    from wirekit.container import Container

T = TypeVar("T")
C = TypeVar("C", bound=type[Any])


class ContainerRegistry:
    """Containers used by ``@autowired`` classes: one default plus per-class overrides.

    The registry is process-global for this ``ContainerRegistry`` instance.
    It is not task-local or thread-local.
    """

    def __init__(self) -> None:
        self._default: Container | None = None
        self._by_class: dict[type[Any], Container] = {}

    def set_default_container(self, container: Container) -> None:
        """Use ``container`` for autowired classes without a per-class container."""
        self._default = container

    def set_container(self, cls: type[Any], container: Container) -> None:
        """Use ``container`` for ``cls`` and its subclasses."""
        self._by_class[cls] = container

    def get_container(self, cls: type[Any]) -> Container:
        """Return the container for ``cls``: nearest per-class entry in the MRO, else the default.

        Raises:
            WirekitContainerNotSetError: If no container applies.

        """
        for klass in cls.__mro__:
            container = self._by_class.get(klass)
            if container is not None:
                return container
        if self._default is None:
            msg = (
                f"No container is set for {cls.__qualname__}. "
                "Call container_registry.set_default_container(container) during startup."
            )
            raise WirekitContainerNotSetError(msg)
        return self._default

    def clear(self) -> None:
        """Forget the default and all per-class containers."""
        self._default = None
        self._by_class.clear()

    def copy(self) -> ContainerRegistry:
        """Return an independent registry with the same entries."""
        registry = ContainerRegistry()
        registry._default = self._default
        registry._by_class = dict(self._by_class)
        return registry

    def update_from(self, other: ContainerRegistry) -> None:
        """Replace this registry's entries with the entries of ``other``."""
        self._default = other._default
        self._by_class = dict(other._by_class)


container_registry = ContainerRegistry()


class AutowiredBuilder:
    """Run attribute and method injection on an already-constructed instance."""

    @staticmethod
    def build(
        instance: T,
        cls: type[T],
        container: Container,
        extra_method_args: Mapping[str, Sequence[Any]] | None = None,
    ) -> T:
        return (
            InstanceBuilderFactory.create(cls, container)
            .set_product(instance)
            .inject_properties()
            .inject_methods(extra_method_args)
            .get_product()
        )

    @staticmethod
    def resolve_constructor_arguments(cls: type[Any], container: Container) -> list[Any]:
        return InstanceBuilderFactory.create(cls, container).resolve_constructor_arguments()


@overload
def autowired(cls: C, /) -> C: ...


@overload
def autowired(
    *,
    use_constructor_injection: bool = False,
    registry: ContainerRegistry | None = None,
) -> Callable[[C], C]: ...


def autowired(
    cls: C | None = None,
    /,
    *,
    use_constructor_injection: bool = False,
    registry: ContainerRegistry | None = None,
) -> C | Callable[[C], C]:
    """Wire instances of a class right after ``Cls(...)`` returns.

    The class is marked like ``@injectable``. Its ``__init__`` is wrapped so
    that constructing exactly this class injects attributes and calls injected
    methods from the registry's container. The instance the container's own
    pipeline constructs is left to the pipeline; ``Cls(...)`` calls nested in
    its constructor are wired as usual.

    Args:
        cls: Class to decorate in direct form.
        use_constructor_injection: Resolve injected constructor parameters and
            pass them before the caller's arguments.
        registry: Container registry to use. Defaults to ``container_registry``.

    Examples:
        .. code-block:: python

            @autowired
            class Handler:
                repo: Injected[Repository]


            container_registry.set_default_container(container)
            handler = Handler()

    """

    def decorator(target: C) -> C:
        injectable(constructor_injection=use_constructor_injection)(target)
        original_init = target.__init__

        @functools.wraps(original_init)
        def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
            if type(self) is not target:
                original_init(self, *args, **kwargs)
                return
            if is_pipeline_constructing(target):
                with released_pipeline_construction():
                    original_init(self, *args, **kwargs)
                return

            container = (registry or container_registry).get_container(target)
            if use_constructor_injection:
                args = (*AutowiredBuilder.resolve_constructor_arguments(target, container), *args)
            original_init(self, *args, **kwargs)
            AutowiredBuilder.build(self, target, container)

        target.__init__ = __init__  # type: ignore[misc]
        return target

    if cls is None:
        return decorator
    return decorator(cls)
