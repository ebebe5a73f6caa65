"""Quickstart: bind classes and let wirekit build the dependency chain.

Mark classes with ``@injectable``, annotate constructor parameters with
``Injected[...]``, bind every key, and resolve only the top-level service.
"""

from __future__ import annotations

from wirekit import Container, Injected, injectable


class Database:
    def __init__(self) -> None:
        self.host = "localhost"


@injectable
class UserRepository:
    def __init__(self, database: Injected[Database]) -> None:
        self.database = database


@injectable
class UserService:
    def __init__(self, repository: Injected[UserRepository]) -> None:
        self.repository = repository


def main() -> None:
    container = Container()
    container.bind(Database)
    container.bind(UserRepository)
    container.bind(UserService)

    service = container.resolve(UserService)

    print(f"db_host={service.repository.database.host}")  # => db_host=localhost

    chain = (
        f"{type(service).__name__}"
        f">{type(service.repository).__name__}"
        f">{type(service.repository.database).__name__}"
    )
    print(f"chain={chain}")  # => chain=UserService>UserRepository>Database


if __name__ == "__main__":
    main()
