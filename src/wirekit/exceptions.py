from __future__ import annotations

from typing import Any


def _describe(dependency: Any) -> str:
    return getattr(dependency, "__qualname__", None) or repr(dependency)


class WirekitError(Exception):
    """Represent a base class for all wirekit-specific failures.

    Catch this type when you want to handle any wirekit error path without
    matching each concrete exception class individually.
    """


class WirekitNotBoundError(WirekitError):
    """Signal that a type identity has no binding in the container registry.

    Raised by ``Container.resolve`` and ``Container.get_binding`` when the
    requested key was never passed to ``bind``/``bind_factory``/``instance``
    (or was removed with ``unbind``). Raised unchanged from nested
    resolutions, so a missing dependency deep in a graph surfaces as-is.

    Typical fix is registering the dependency before resolving it. The
    container never binds a class implicitly.
    """

    def __init__(self, dependency: Any) -> None:
        self.dependency = dependency
        super().__init__(f"{_describe(dependency)} is not bound in the container")


class WirekitMetadataUnavailableError(WirekitError):
    """Signal that injection metadata for a class cannot be obtained.

    Raised by metadata providers when the build target is not a class, when
    its injection annotations cannot be evaluated (for example a forward
    reference to an undefined name), or when an injected method parameter
    has no annotation.
    """

    def __init__(self, target: Any, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Injection metadata for {_describe(target)} is unavailable: {reason}")


class WirekitCyclicAliasError(WirekitError):
    """Signal an alias chain that revisits a type identity.

    Raised by ``ClassBinding.resolve`` when chasing aliases (``bind(A, B)``
    where ``B`` is bound too) leads back to a key already being chased in the
    current resolution. ``chain`` holds the visited keys ending with the
    repeated one.
    """

    def __init__(self, chain: tuple[Any, ...]) -> None:
        self.chain = chain
        path = " -> ".join(_describe(dependency) for dependency in chain)
        super().__init__(f"Cyclic alias chain detected: {path}")


class WirekitOutOfOrderBuildError(WirekitError):
    """Signal an ``InstanceBuilder`` stage invoked before its prerequisite.

    Builders are single-use and walk ``create_instance``/``set_product`` ->
    ``inject_properties`` -> ``inject_methods``; ``get_product`` is available
    once a product exists.
    """

    def __init__(self, operation: str, stage: Any) -> None:
        self.operation = operation
        self.stage = stage
        super().__init__(f"Cannot call {operation}() while the builder is at stage {stage.name}")


class WirekitContainerNotSetError(WirekitError):
    """Signal autowiring before any container was made available.

    Raised by ``ContainerRegistry.get_container`` when neither a per-class nor
    a default container is set.

    Typical fix is calling ``container_registry.set_default_container(container)``
    during application startup.
    """
