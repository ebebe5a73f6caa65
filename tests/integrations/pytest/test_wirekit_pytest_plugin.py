from __future__ import annotations

from wirekit import Container, Injected, autowired, container_registry

pytest_plugins = ["wirekit.integrations.pytest_plugin"]


class _Service:
    pass


@autowired
class _Handler:
    service: Injected[_Service]


def test_container_fixture_is_fresh(wirekit_container: Container) -> None:
    assert isinstance(wirekit_container, Container)
    assert not wirekit_container.is_bound(_Service)


def test_bindings_do_not_leak_between_tests(wirekit_container: Container) -> None:
    wirekit_container.bind(_Service)

    assert wirekit_container.is_bound(_Service)


def test_autowire_container_becomes_default(wirekit_autowire_container: Container) -> None:
    wirekit_autowire_container.singleton(_Service)

    handler = _Handler()

    assert container_registry.get_container(_Handler) is wirekit_autowire_container
    assert handler.service is wirekit_autowire_container.resolve(_Service)
