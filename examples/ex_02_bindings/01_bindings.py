"""Binding strategies: classes, factories, and pre-built instances.

Class bindings run the injection pipeline, factory bindings receive the
container and build the value themselves, and instance bindings return the
same object every time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from wirekit import Container, Injected, injectable


@dataclass(frozen=True)
class Settings:
    dsn: str


class Storage(ABC):
    @abstractmethod
    def describe(self) -> str: ...


@injectable
class SqlStorage(Storage):
    def __init__(self, settings: Injected[Settings], pool_size: int) -> None:
        self.settings = settings
        self.pool_size = pool_size

    def describe(self) -> str:
        return f"sql({self.settings.dsn}, pool={self.pool_size})"


class Clock:
    def __init__(self, zone: str) -> None:
        self.zone = zone


def main() -> None:
    container = Container()
    settings = Settings(dsn="postgres://db")

    container.instance(Settings, settings)
    container.bind(Storage, SqlStorage, extra_ctor_args=[5])
    container.bind_factory(Clock, lambda c: Clock(zone=c.resolve(Settings).dsn.split(":")[0]))

    storage = container.resolve(Storage)
    print(f"storage={storage.describe()}")  # => storage=sql(postgres://db, pool=5)

    same_settings = container.resolve(Settings) is settings
    print(f"instance_is_same={same_settings}")  # => instance_is_same=True

    print(f"clock_zone={container.resolve(Clock).zone}")  # => clock_zone=postgres

    fresh = container.resolve(Storage) is not container.resolve(Storage)
    print(f"class_binding_is_transient={fresh}")  # => class_binding_is_transient=True


if __name__ == "__main__":
    main()
