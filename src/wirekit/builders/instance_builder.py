from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from typing_extensions import Self

from wirekit.exceptions import WirekitOutOfOrderBuildError
from wirekit.metadata import TypeMetadata

if TYPE_CHECKING:
    from wirekit.container import Container

T = TypeVar("T")

_UNSET: Any = object()

# Class whose constructor the pipeline is currently running.
_constructing: ContextVar[type[Any] | None] = ContextVar("constructing", default=None)


def is_pipeline_constructing(cls: type[Any]) -> bool:
    """Return True while an ``InstanceBuilder`` is calling ``cls(...)``."""
    return _constructing.get() is cls


@contextmanager
def released_pipeline_construction() -> Iterator[None]:
    """Clear the constructing flag so nested ``Cls(...)`` calls count as ordinary construction."""
    token = _constructing.set(None)
    try:
        yield
    finally:
        _constructing.reset(token)


class BuildStage(Enum):
    """Stages of an ``InstanceBuilder``, in pipeline order."""

    EMPTY = "empty"
    CONSTRUCTED = "constructed"
    PROPERTIES_INJECTED = "properties_injected"
    METHODS_INJECTED = "methods_injected"


class InstanceBuilder(Generic[T]):
    """Assemble one instance: construct, inject attributes, then call injected methods.

    A builder is single-use. Each stage checks the current ``BuildStage`` and
    raises ``WirekitOutOfOrderBuildError`` when called out of order:

    - ``create_instance`` or ``set_product``: EMPTY -> CONSTRUCTED
    - ``inject_properties``: CONSTRUCTED -> PROPERTIES_INJECTED
    - ``inject_methods``: PROPERTIES_INJECTED -> METHODS_INJECTED
    - ``get_product``: any stage except EMPTY

    Dependencies are resolved from ``container``; resolution errors propagate
    unchanged.
    """

    def __init__(
        self,
        concrete: type[T],
        container: Container,
        metadata: TypeMetadata | None = None,
    ) -> None:
        self._concrete = concrete
        self._container = container
        self._metadata = TypeMetadata.empty() if metadata is None else metadata
        self._stage = BuildStage.EMPTY
        self._product: Any = _UNSET

    @property
    def stage(self) -> BuildStage:
        return self._stage

    @property
    def metadata(self) -> TypeMetadata:
        return self._metadata

    def resolve_constructor_arguments(self) -> list[Any]:
        """Resolve injected constructor arguments in declaration order."""
        if not self._metadata.constructor_injection:
            return []
        return [self._container.resolve(spec.dependency) for spec in self._metadata.constructor]

    def create_instance(self, extra_ctor_args: Sequence[Any] = ()) -> Self:
        """Construct the product from injected arguments followed by ``extra_ctor_args``."""
        self._require(BuildStage.EMPTY, "create_instance")
        args = [*self.resolve_constructor_arguments(), *extra_ctor_args]

        token = _constructing.set(self._concrete)
        try:
            product = self._concrete(*args)
        finally:
            _constructing.reset(token)

        self._adopt(product)
        return self

    def set_product(self, instance: T) -> Self:
        """Adopt an already-constructed instance instead of constructing one."""
        self._require(BuildStage.EMPTY, "set_product")
        self._adopt(instance)
        return self

    def inject_properties(self) -> Self:
        """Assign each injected attribute on the product."""
        self._require(BuildStage.CONSTRUCTED, "inject_properties")
        for spec in self._metadata.properties:
            setattr(self._product, spec.name, self._container.resolve(spec.dependency))
        self._stage = BuildStage.PROPERTIES_INJECTED
        return self

    def inject_methods(self, extra_args: Mapping[str, Sequence[Any]] | None = None) -> Self:
        """Call each injected method with resolved arguments.

        Args:
            extra_args: Positional arguments appended after the resolved ones,
                keyed by method name.

        """
        self._require(BuildStage.PROPERTIES_INJECTED, "inject_methods")
        extra_args = extra_args or {}
        for spec in self._metadata.methods:
            resolved = [self._container.resolve(parameter.dependency) for parameter in spec.parameters]
            getattr(self._product, spec.name)(*resolved, *extra_args.get(spec.name, ()))
        self._stage = BuildStage.METHODS_INJECTED
        return self

    def get_product(self) -> T:
        """Return the assembled instance; repeated calls return the same object."""
        if self._stage is BuildStage.EMPTY:
            raise WirekitOutOfOrderBuildError("get_product", self._stage)
        return self._product

    def _adopt(self, product: T) -> None:
        self._product = product
        self._stage = BuildStage.CONSTRUCTED

    def _require(self, stage: BuildStage, operation: str) -> None:
        if self._stage is not stage:
            raise WirekitOutOfOrderBuildError(operation, self._stage)
