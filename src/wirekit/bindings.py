"""Binding strategies stored in a container registry.

Each binding maps one abstract key to a producer of instances and resolves
against the container that owns it, so producers can resolve their own
dependencies recursively.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from wirekit.builders.instance_builder_factory import InstanceBuilderFactory
from wirekit.lock_mode import LockMode
from wirekit.resolution_stack import chasing_alias

if TYPE_CHECKING:
    from wirekit.builders.instance_builder import InstanceBuilder
    from wirekit.container import Container

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

_UNRESOLVED: Any = object()


class Binding(Protocol[T_co]):
    """Protocol for registered producers."""

    def get_class(self) -> Any:
        """Return the abstract key this binding was registered under."""
        ...

    def resolve(self, container: Container) -> T_co:
        """Produce an instance, resolving dependencies from ``container``."""
        ...


class ClassBinding(Generic[T]):
    """Build ``concrete`` through the injection pipeline.

    When ``concrete`` differs from ``abstract`` and is bound in the container
    itself, resolution is delegated to that binding instead (alias chasing).
    """

    __slots__ = ("_abstract", "_concrete", "_extra_ctor_args")

    def __init__(
        self,
        abstract: Any,
        concrete: type[T] | None = None,
        extra_ctor_args: Sequence[Any] = (),
    ) -> None:
        self._abstract = abstract
        self._concrete = abstract if concrete is None else concrete
        self._extra_ctor_args = tuple(extra_ctor_args)

    @property
    def concrete(self) -> Any:
        return self._concrete

    @property
    def extra_ctor_args(self) -> tuple[Any, ...]:
        return self._extra_ctor_args

    def get_class(self) -> Any:
        return self._abstract

    def resolve(self, container: Container) -> T:
        if self._is_alias(container):
            with chasing_alias(self._abstract):
                return container.resolve(self._concrete)
        return self._build_instance(container)

    def _is_alias(self, container: Container) -> bool:
        return self._abstract is not self._concrete and container.is_bound(self._concrete)

    def _build_instance(self, container: Container) -> T:
        return (
            self._get_instance_builder(container)
            .create_instance(self._extra_ctor_args)
            .inject_properties()
            .inject_methods()
            .get_product()
        )

    def _get_instance_builder(self, container: Container) -> InstanceBuilder[T]:
        return InstanceBuilderFactory.create(self._concrete, container)

    def __repr__(self) -> str:
        return f"ClassBinding({self._abstract!r} -> {self._concrete!r})"


class FactoryBinding(Generic[T]):
    """Return whatever ``factory(container)`` produces; no injection runs."""

    __slots__ = ("_abstract", "_factory")

    def __init__(self, abstract: Any, factory: Callable[[Container], T]) -> None:
        self._abstract = abstract
        self._factory = factory

    def get_class(self) -> Any:
        return self._abstract

    def resolve(self, container: Container) -> T:
        return self._factory(container)

    def __repr__(self) -> str:
        return f"FactoryBinding({self._abstract!r} -> {self._factory!r})"


class InstanceBinding(Generic[T]):
    """Return a pre-built value."""

    __slots__ = ("_abstract", "_value")

    def __init__(self, abstract: Any, value: T) -> None:
        self._abstract = abstract
        self._value = value

    def get_class(self) -> Any:
        return self._abstract

    def resolve(self, container: Container) -> T:  # noqa: ARG002
        return self._value

    def __repr__(self) -> str:
        return f"InstanceBinding({self._abstract!r})"


class SingletonWrapper(Generic[T]):
    """Cache the first result of the wrapped binding.

    The inner binding is resolved at most once over the wrapper's lifetime
    (``None`` results are cached too). With ``LockMode.NONE`` concurrent first
    resolutions are not synchronized; ``LockMode.THREAD`` serializes them.
    """

    __slots__ = ("_inner", "_instance", "_lock")

    def __init__(self, inner: Binding[T], lock_mode: LockMode = LockMode.NONE) -> None:
        self._inner = inner
        self._instance: Any = _UNRESOLVED
        self._lock = threading.RLock() if lock_mode is LockMode.THREAD else None

    @property
    def inner(self) -> Binding[T]:
        return self._inner

    @property
    def is_resolved(self) -> bool:
        return self._instance is not _UNRESOLVED

    def get_class(self) -> Any:
        return self._inner.get_class()

    def resolve(self, container: Container) -> T:
        instance = self._instance
        if instance is not _UNRESOLVED:
            return instance
        if self._lock is None:
            return self._resolve_once(container)
        with self._lock:
            if self._instance is not _UNRESOLVED:
                return self._instance
            return self._resolve_once(container)

    def _resolve_once(self, container: Container) -> T:
        instance = self._inner.resolve(container)
        self._instance = instance
        return instance

    def __repr__(self) -> str:
        return f"SingletonWrapper({self._inner!r})"
