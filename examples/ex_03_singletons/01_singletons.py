"""Singletons: build once, reuse the first instance.

``singleton`` wraps a class binding and ``singleton_factory`` wraps a
factory binding. Pass ``lock_mode=LockMode.THREAD`` when several threads may
race on the first resolution.
"""

from __future__ import annotations

from wirekit import Container, LockMode


class ConnectionPool:
    pass


class Metrics:
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix


def main() -> None:
    container = Container()
    calls: list[str] = []

    def build_metrics(_: Container) -> Metrics:
        calls.append("metrics")
        return Metrics(prefix="app")

    container.singleton(ConnectionPool, lock_mode=LockMode.THREAD)
    container.singleton_factory(Metrics, build_metrics)

    same_pool = container.resolve(ConnectionPool) is container.resolve(ConnectionPool)
    print(f"same_pool={same_pool}")  # => same_pool=True

    container.resolve(Metrics)
    container.resolve(Metrics)
    print(f"factory_calls={len(calls)}")  # => factory_calls=1


if __name__ == "__main__":
    main()
