from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from wirekit.exceptions import WirekitCyclicAliasError

# Keys whose alias bindings are being chased by the current call stack.
_alias_stack: ContextVar[tuple[Any, ...]] = ContextVar("alias_stack", default=())


def get_alias_stack() -> tuple[Any, ...]:
    """Return the keys currently being alias-chased, outermost first."""
    return _alias_stack.get()


@contextmanager
def chasing_alias(abstract: Any) -> Iterator[None]:
    """Track ``abstract`` as being alias-chased for the duration of the block.

    Raises:
        WirekitCyclicAliasError: If ``abstract`` is already being chased.

    """
    stack = _alias_stack.get()
    if any(key is abstract or key == abstract for key in stack):
        raise WirekitCyclicAliasError((*stack, abstract))

    token = _alias_stack.set((*stack, abstract))
    try:
        yield
    finally:
        _alias_stack.reset(token)
