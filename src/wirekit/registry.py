from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from wirekit.bindings import Binding


@dataclass(frozen=True, slots=True)
class Memento:
    """Read-only snapshot of a registry's key -> binding mapping."""

    bindings: Mapping[Any, Binding[Any]]

    def __len__(self) -> int:
        return len(self.bindings)


class BindingsRegistry:
    """Store bindings indexed by abstract key.

    Keys are unique: adding a binding for an existing key replaces the
    previous binding.
    """

    def __init__(self) -> None:
        self._bindings: dict[Any, Binding[Any]] = {}

    def add(self, binding: Binding[Any]) -> None:
        """Register ``binding`` under its abstract key."""
        self._bindings[binding.get_class()] = binding

    def get(self, abstract: Any) -> Binding[Any] | None:
        """Return the binding for ``abstract``, if any."""
        return self._bindings.get(abstract)

    def remove(self, abstract: Any) -> bool:
        """Remove the binding for ``abstract`` and report whether one existed."""
        return self._bindings.pop(abstract, None) is not None

    def snapshot(self) -> Memento:
        """Capture current bindings for a later ``restore``."""
        return Memento(bindings=MappingProxyType(dict(self._bindings)))

    def restore(self, memento: Memento) -> None:
        """Replace all bindings with the ones captured in ``memento``."""
        self._bindings = dict(memento.bindings)

    def __contains__(self, abstract: object) -> bool:
        return abstract in self._bindings

    def __iter__(self) -> Iterator[Any]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)
