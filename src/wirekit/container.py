from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Literal, TypeVar, overload

from wirekit.bindings import (
    Binding,
    ClassBinding,
    FactoryBinding,
    InstanceBinding,
    SingletonWrapper,
)
from wirekit.defaults import DEFAULT_LOCK_MODE, DEFAULT_METADATA_PROVIDER
from wirekit.exceptions import WirekitNotBoundError
from wirekit.lock_mode import LockMode
from wirekit.metadata import TypeMetadataProvider
from wirekit.registry import BindingsRegistry, Memento

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Container:
    """Own a binding registry and resolve keys into fully-initialized instances.

    Keys are usually classes, including abstract base classes and protocols
    standing in for interfaces, but any hashable token works. Every key must
    be bound explicitly; resolving an unbound key raises
    ``WirekitNotBoundError``.

    Class bindings run the injection pipeline (construct, inject attributes,
    call injected methods) using plans from the metadata provider. Nested
    dependencies are resolved against the same container.

    The registry is not synchronized. Bind everything during startup, or
    guard mutations and resolutions externally when threads share a
    container.
    """

    def __init__(
        self,
        *,
        metadata_provider: TypeMetadataProvider | None = None,
        lock_mode: LockMode = DEFAULT_LOCK_MODE,
    ) -> None:
        """Initialize an empty container.

        Args:
            metadata_provider: Source of injection plans for class bindings.
                Defaults to the shared ``AnnotationMetadataProvider`` that
                reads ``@injectable``/``@autowired`` annotations.
            lock_mode: Default lock strategy for singleton registrations.

        Examples:
            .. code-block:: python

                container = Container()

                threaded_container = Container(lock_mode=LockMode.THREAD)

        """
        self._metadata_provider = (
            DEFAULT_METADATA_PROVIDER if metadata_provider is None else metadata_provider
        )
        self._lock_mode = lock_mode
        self._registry = BindingsRegistry()

    @property
    def metadata_provider(self) -> TypeMetadataProvider:
        return self._metadata_provider

    # region Registration Methods
    def bind(
        self,
        abstract: Any,
        concrete: type[Any] | None = None,
        extra_ctor_args: Sequence[Any] = (),
    ) -> None:
        """Bind ``abstract`` to a class built through the injection pipeline.

        When ``concrete`` is itself bound, resolving ``abstract`` resolves
        ``concrete`` instead, so bindings can alias each other.

        Args:
            abstract: Key to register.
            concrete: Class to build. Defaults to ``abstract``.
            extra_ctor_args: Constructor arguments appended after the
                injected ones.

        """
        self._add(ClassBinding(abstract, concrete, extra_ctor_args))

    def bind_factory(self, abstract: Any, factory: Callable[[Container], Any]) -> None:
        """Bind ``abstract`` to ``factory(container)``; no injection runs on the result."""
        self._add(FactoryBinding(abstract, factory))

    def instance(self, abstract: Any, value: Any) -> None:
        """Bind ``abstract`` to a pre-built value returned as-is on every resolution."""
        self._add(InstanceBinding(abstract, value))

    def singleton(
        self,
        abstract: Any,
        concrete: type[Any] | None = None,
        extra_ctor_args: Sequence[Any] = (),
        *,
        lock_mode: LockMode | Literal["from_container"] = "from_container",
    ) -> None:
        """Bind like ``bind`` but build once and reuse the first instance.

        Args:
            abstract: Key to register.
            concrete: Class to build. Defaults to ``abstract``.
            extra_ctor_args: Constructor arguments appended after the
                injected ones.
            lock_mode: Lock strategy for the first resolution, or
                ``"from_container"`` for the container default.

        """
        self._add(
            SingletonWrapper(
                ClassBinding(abstract, concrete, extra_ctor_args),
                self._resolve_lock_mode(lock_mode),
            ),
        )

    def singleton_factory(
        self,
        abstract: Any,
        factory: Callable[[Container], Any],
        *,
        lock_mode: LockMode | Literal["from_container"] = "from_container",
    ) -> None:
        """Bind like ``bind_factory`` but call the factory once and reuse its result."""
        self._add(
            SingletonWrapper(
                FactoryBinding(abstract, factory),
                self._resolve_lock_mode(lock_mode),
            ),
        )

    def unbind(self, abstract: Any) -> None:
        """Remove the binding for ``abstract``; unbound keys are ignored."""
        if self._registry.remove(abstract):
            logger.debug("Unbound %r", abstract)

    # endregion Registration Methods

    # region Resolution Methods
    @overload
    def resolve(self, abstract: type[T]) -> T: ...

    @overload
    def resolve(self, abstract: Any) -> Any: ...

    def resolve(self, abstract: Any) -> Any:
        """Resolve ``abstract`` through its binding.

        Raises:
            WirekitNotBoundError: If ``abstract`` (or a dependency of it) is not bound.
            WirekitCyclicAliasError: If alias bindings form a cycle.
            WirekitMetadataUnavailableError: If a class's injection plan cannot be read.

        """
        return self.get_binding(abstract).resolve(self)

    def is_bound(self, abstract: Any) -> bool:
        """Return True when ``abstract`` has a binding."""
        return abstract in self._registry

    def get_binding(self, abstract: Any) -> Binding[Any]:
        """Return the binding registered for ``abstract``.

        Raises:
            WirekitNotBoundError: If ``abstract`` is not bound.

        """
        binding = self._registry.get(abstract)
        if binding is None:
            raise WirekitNotBoundError(abstract)
        return binding

    def __contains__(self, abstract: object) -> bool:
        return self.is_bound(abstract)

    # endregion Resolution Methods

    # region Memento
    def save(self) -> Memento:
        """Capture the current bindings.

        Later ``bind``/``unbind`` calls do not change the returned memento.
        Singleton bindings are captured by reference, so instances they
        already cached remain cached after ``restore``.
        """
        return self._registry.snapshot()

    def restore(self, memento: Memento) -> None:
        """Replace all bindings with the ones captured by ``save``."""
        self._registry.restore(memento)
        logger.debug("Restored %d bindings from memento", len(memento))

    # endregion Memento

    def _add(self, binding: Binding[Any]) -> None:
        self._registry.add(binding)
        logger.debug("Bound %r", binding)

    def _resolve_lock_mode(self, lock_mode: LockMode | Literal["from_container"]) -> LockMode:
        if lock_mode == "from_container":
            return self._lock_mode
        return lock_mode
