"""Injection metadata consumed by the instance builders.

The builders never inspect classes themselves. They ask a
``TypeMetadataProvider`` for a ``TypeMetadata`` plan describing which
constructor parameters, attributes, and methods receive injected values.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, get_type_hints

from wirekit.exceptions import WirekitMetadataUnavailableError
from wirekit.markers import extract_injection_target

INJECTABLE_ATTR = "__wirekit_injectable__"
INJECT_METHOD_ATTR = "__wirekit_inject_method__"

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """Constructor or method parameter that receives an injected value."""

    name: str
    declared: Any
    explicit: Any | None = None

    @property
    def dependency(self) -> Any:
        """Key resolved for this parameter: the explicit override, else the declared type."""
        return self.declared if self.explicit is None else self.explicit


@dataclass(frozen=True, slots=True)
class PropertySpec:
    """Attribute assigned with an injected value after construction."""

    name: str
    declared: Any
    explicit: Any | None = None

    @property
    def dependency(self) -> Any:
        """Key resolved for this attribute: the explicit override, else the declared type."""
        return self.declared if self.explicit is None else self.explicit


@dataclass(frozen=True, slots=True)
class MethodSpec:
    """Method called with injected arguments after attribute injection."""

    name: str
    parameters: tuple[ParameterSpec, ...] = ()


@dataclass(frozen=True, slots=True)
class TypeMetadata:
    """Injection plan for one class.

    ``constructor_injection=False`` means caller-supplied constructor
    arguments are forwarded as the whole argument list.
    """

    constructor: tuple[ParameterSpec, ...] = ()
    properties: tuple[PropertySpec, ...] = ()
    methods: tuple[MethodSpec, ...] = ()
    constructor_injection: bool = True

    @classmethod
    def empty(cls) -> TypeMetadata:
        """Return the plan of a class that declares no injection at all."""
        return cls(constructor_injection=False)


@dataclass(frozen=True, slots=True)
class InjectableOptions:
    """Options stored on classes marked with ``@injectable`` or ``@autowired``."""

    constructor_injection: bool = True


class TypeMetadataProvider(Protocol):
    """Supply injection plans for classes built by the container."""

    def get_metadata(self, cls: Any) -> TypeMetadata | None:
        """Return the plan for ``cls``, or None when it is not marked for injection.

        Raises:
            WirekitMetadataUnavailableError: If the plan cannot be obtained.

        """
        ...


class AnnotationMetadataProvider:
    """Build injection plans from ``Injected``/``Inject`` annotations.

    Classes are considered only when marked with ``@injectable`` or
    ``@autowired``; plans registered explicitly with ``register`` take
    precedence over annotations. Built plans are cached per class.
    """

    def __init__(self) -> None:
        self._registered: dict[type[Any], TypeMetadata] = {}
        self._cache: dict[type[Any], TypeMetadata] = {}

    def register(self, cls: type[Any], metadata: TypeMetadata) -> None:
        """Use ``metadata`` for ``cls`` instead of reading its annotations."""
        self._registered[cls] = metadata
        self._cache.pop(cls, None)

    def get_metadata(self, cls: Any) -> TypeMetadata | None:
        if not isinstance(cls, type):
            raise WirekitMetadataUnavailableError(cls, "not a class")

        registered = self._registered.get(cls)
        if registered is not None:
            return registered

        options = getattr(cls, INJECTABLE_ATTR, None)
        if options is None:
            return None

        cached = self._cache.get(cls)
        if cached is not None:
            return cached

        metadata = TypeMetadata(
            constructor=self._extract_constructor(cls),
            properties=self._extract_properties(cls),
            methods=self._extract_methods(cls),
            constructor_injection=options.constructor_injection,
        )
        logger.debug(
            "Built injection metadata for %s: constructor=%d properties=%d methods=%d",
            cls.__qualname__,
            len(metadata.constructor),
            len(metadata.properties),
            len(metadata.methods),
        )
        self._cache[cls] = metadata
        return metadata

    def _extract_constructor(self, cls: type[Any]) -> tuple[ParameterSpec, ...]:
        init_func = inspect.unwrap(cls.__init__)
        if init_func is object.__init__:
            return ()
        return self._extract_parameters(cls, init_func)

    def _extract_properties(self, cls: type[Any]) -> tuple[PropertySpec, ...]:
        properties: list[PropertySpec] = []
        for name, hint in self._type_hints(cls, cls).items():
            target = extract_injection_target(hint)
            if target is None:
                continue
            properties.append(
                PropertySpec(name=name, declared=target.declared, explicit=target.explicit),
            )
        return tuple(properties)

    def _extract_methods(self, cls: type[Any]) -> tuple[MethodSpec, ...]:
        # Base classes first; an override without the marker drops the method.
        marked: dict[str, Callable[..., Any]] = {}
        for klass in reversed(cls.__mro__):
            for name, member in vars(klass).items():
                if getattr(member, INJECT_METHOD_ATTR, False):
                    marked[name] = member
                else:
                    marked.pop(name, None)

        return tuple(
            MethodSpec(name=name, parameters=self._extract_parameters(cls, func))
            for name, func in marked.items()
        )

    def _extract_parameters(
        self,
        cls: type[Any],
        func: Callable[..., Any],
    ) -> tuple[ParameterSpec, ...]:
        type_hints = self._type_hints(cls, func)
        try:
            parameters = list(inspect.signature(func).parameters.values())[1:]
        except (TypeError, ValueError) as e:
            raise WirekitMetadataUnavailableError(cls, str(e)) from e

        specs: list[ParameterSpec] = []
        for parameter in parameters:
            if parameter.kind not in _POSITIONAL_KINDS:
                continue
            target = extract_injection_target(type_hints.get(parameter.name))
            if target is None:
                continue
            specs.append(
                ParameterSpec(
                    name=parameter.name,
                    declared=target.declared,
                    explicit=target.explicit,
                ),
            )
        return tuple(specs)

    def _type_hints(self, cls: type[Any], obj: Any) -> dict[str, Any]:
        try:
            return get_type_hints(obj, include_extras=True)
        except (NameError, TypeError) as e:
            raise WirekitMetadataUnavailableError(cls, str(e)) from e
