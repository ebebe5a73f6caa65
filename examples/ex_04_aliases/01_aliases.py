"""Aliases: bind one key to another bound key.

When the concrete class of a binding is bound itself, resolution follows that
binding instead of building a new object. Chains are followed transitively
and cycles are reported with ``WirekitCyclicAliasError``.
"""

from __future__ import annotations

from wirekit import Container, WirekitCyclicAliasError


class Cache:
    pass


class LocalCache(Cache):
    pass


class TieredCache(LocalCache):
    pass


class Ping:
    pass


class Pong:
    pass


def main() -> None:
    container = Container()
    shared = TieredCache()

    container.instance(TieredCache, shared)
    container.bind(LocalCache, TieredCache)
    container.bind(Cache, LocalCache)

    print(f"alias_chain_resolves_shared={container.resolve(Cache) is shared}")  # => alias_chain_resolves_shared=True

    container.bind(Ping, Pong)
    container.bind(Pong, Ping)
    try:
        container.resolve(Ping)
    except WirekitCyclicAliasError as error:
        print(f"cycle={' -> '.join(key.__name__ for key in error.chain)}")  # => cycle=Ping -> Pong -> Ping


if __name__ == "__main__":
    main()
