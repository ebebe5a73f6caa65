"""Tests for the autowiring boundary: ContainerRegistry, AutowiredBuilder and @autowired."""

import pytest

from wirekit.builders.autowired import AutowiredBuilder, ContainerRegistry, autowired
from wirekit.container import Container
from wirekit.decorators import inject_method, injectable
from wirekit.exceptions import WirekitContainerNotSetError, WirekitNotBoundError
from wirekit.markers import Injected


class Repository:
    pass


class Clock:
    pass


@pytest.fixture()
def registry() -> ContainerRegistry:
    return ContainerRegistry()


@pytest.fixture()
def bound_container(container: Container, registry: ContainerRegistry) -> Container:
    container.singleton(Repository)
    container.singleton(Clock)
    registry.set_default_container(container)
    return container


class TestContainerRegistry:
    def test_raises_when_nothing_is_set(self, registry: ContainerRegistry) -> None:
        with pytest.raises(WirekitContainerNotSetError, match="set_default_container"):
            registry.get_container(Repository)

    def test_default_container(self, registry: ContainerRegistry, container: Container) -> None:
        registry.set_default_container(container)

        assert registry.get_container(Repository) is container

    def test_per_class_container_wins(self, registry: ContainerRegistry) -> None:
        default = Container()
        special = Container()
        registry.set_default_container(default)
        registry.set_container(Repository, special)

        assert registry.get_container(Repository) is special
        assert registry.get_container(Clock) is default

    def test_per_class_container_applies_to_subclasses(self, registry: ContainerRegistry) -> None:
        class SqlRepository(Repository):
            pass

        special = Container()
        registry.set_container(Repository, special)

        assert registry.get_container(SqlRepository) is special

    def test_clear(self, registry: ContainerRegistry, container: Container) -> None:
        registry.set_default_container(container)
        registry.clear()

        with pytest.raises(WirekitContainerNotSetError):
            registry.get_container(Repository)

    def test_copy_and_update_from(self, registry: ContainerRegistry) -> None:
        first = Container()
        registry.set_default_container(first)
        saved = registry.copy()

        registry.set_default_container(Container())
        registry.update_from(saved)

        assert registry.get_container(Repository) is first


class TestAutowiredBuilder:
    def test_wires_existing_instance(self, bound_container: Container) -> None:
        @injectable
        class Handler:
            repository: Injected[Repository]

            @inject_method
            def set_clock(self, clock: Injected[Clock], suffix: str) -> None:
                self.clock = clock
                self.suffix = suffix

        handler = Handler()

        result = AutowiredBuilder.build(
            handler,
            Handler,
            bound_container,
            extra_method_args={"set_clock": ["!"]},
        )

        assert result is handler
        assert handler.repository is bound_container.resolve(Repository)
        assert handler.clock is bound_container.resolve(Clock)
        assert handler.suffix == "!"

    def test_unmarked_class_is_left_untouched(self, bound_container: Container) -> None:
        class Plain:
            pass

        plain = Plain()

        assert AutowiredBuilder.build(plain, Plain, bound_container) is plain


class TestAutowiredDecorator:
    def test_wires_after_plain_construction(
        self,
        registry: ContainerRegistry,
        bound_container: Container,
    ) -> None:
        @autowired(registry=registry)
        class Handler:
            repository: Injected[Repository]

            def __init__(self, name: str) -> None:
                self.name = name

        handler = Handler("h")

        assert handler.name == "h"
        assert handler.repository is bound_container.resolve(Repository)

    def test_constructor_injection_prepends_arguments(
        self,
        registry: ContainerRegistry,
        bound_container: Container,
    ) -> None:
        @autowired(use_constructor_injection=True, registry=registry)
        class Job:
            def __init__(self, repository: Injected[Repository], name: str) -> None:
                self.repository = repository
                self.name = name

        job = Job("nightly")

        assert job.repository is bound_container.resolve(Repository)
        assert job.name == "nightly"

    def test_without_constructor_injection_arguments_pass_through(
        self,
        registry: ContainerRegistry,
        bound_container: Container,  # noqa: ARG002
    ) -> None:
        @autowired(registry=registry)
        class Job:
            def __init__(self, repository: Injected[Repository]) -> None:
                self.repository = repository

        manual = Repository()

        assert Job(manual).repository is manual

    def test_missing_container_raises(self, registry: ContainerRegistry) -> None:
        @autowired(registry=registry)
        class Handler:
            repository: Injected[Repository]

        with pytest.raises(WirekitContainerNotSetError):
            Handler()

    def test_missing_binding_raises(self, registry: ContainerRegistry, container: Container) -> None:
        registry.set_default_container(container)

        @autowired(registry=registry)
        class Handler:
            repository: Injected[Repository]

        with pytest.raises(WirekitNotBoundError):
            Handler()

    def test_container_driven_construction_is_wired_once(
        self,
        registry: ContainerRegistry,
        bound_container: Container,
    ) -> None:
        calls: list[Clock] = []

        @autowired(registry=registry)
        class Handler:
            @inject_method
            def start(self, clock: Injected[Clock]) -> None:
                calls.append(clock)

        bound_container.bind(Handler)
        bound_container.resolve(Handler)

        assert len(calls) == 1

    def test_nested_construction_inside_container_build_is_wired(
        self,
        registry: ContainerRegistry,
        bound_container: Container,
    ) -> None:
        @autowired(registry=registry)
        class Node:
            repository: Injected[Repository]

            def __init__(self, depth: int = 1) -> None:
                self.child = Node(depth - 1) if depth > 0 else None

        bound_container.bind(Node)
        built = bound_container.resolve(Node)

        repository = bound_container.resolve(Repository)
        assert built.repository is repository
        assert built.child is not None
        assert built.child.repository is repository
        assert built.child.child is None

    def test_factory_resolved_inside_container_build_wires_its_product(
        self,
        registry: ContainerRegistry,
        bound_container: Container,
    ) -> None:
        @autowired(registry=registry)
        class Node:
            repository: Injected[Repository]

            def __init__(self, spare: bool = False) -> None:
                self.spare = None if spare else bound_container.resolve("spare")

        bound_container.bind_factory("spare", lambda _: Node(spare=True))
        bound_container.bind(Node)
        built = bound_container.resolve(Node)

        assert built.spare.repository is bound_container.resolve(Repository)

    def test_subclass_construction_is_not_wired_by_parent(
        self,
        registry: ContainerRegistry,
        bound_container: Container,  # noqa: ARG002
    ) -> None:
        @autowired(registry=registry)
        class Parent:
            repository: Injected[Repository]

        class Child(Parent):
            pass

        assert not hasattr(Child(), "repository")
        assert hasattr(Parent(), "repository")
