from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from wirekit.metadata import INJECT_METHOD_ATTR, INJECTABLE_ATTR, InjectableOptions

C = TypeVar("C", bound=type[Any])
F = TypeVar("F", bound=Callable[..., Any])


@overload
def injectable(cls: C, /) -> C: ...


@overload
def injectable(*, constructor_injection: bool = True) -> Callable[[C], C]: ...


def injectable(
    cls: C | None = None,
    /,
    *,
    constructor_injection: bool = True,
) -> C | Callable[[C], C]:
    """Mark a class for metadata-driven injection.

    Constructor parameters and class attributes annotated with
    ``Injected[T]`` or ``Annotated[T, Inject(Key)]`` are injected, as are the
    marked parameters of methods decorated with ``@inject_method``.

    Args:
        cls: Class to mark in direct form.
        constructor_injection: When False, constructor arguments supplied at
            bind time are forwarded as the whole argument list and constructor
            annotations are ignored.

    Returns:
        The marked class in direct form, or a decorator in parameterized form.

    Examples:
        .. code-block:: python

            @injectable
            class Service:
                clock: Injected[Clock]

                def __init__(self, repo: Injected[Repository]) -> None:
                    self.repo = repo

    """

    def decorator(target: C) -> C:
        setattr(target, INJECTABLE_ATTR, InjectableOptions(constructor_injection=constructor_injection))
        return target

    if cls is None:
        return decorator
    return decorator(cls)


def inject_method(func: F) -> F:
    """Mark a method to be called with injected arguments after attribute injection."""
    setattr(func, INJECT_METHOD_ATTR, True)
    return func
