"""Autowiring: wire objects created with a plain ``Cls(...)`` call.

``@autowired`` classes pull their dependencies from the container set in
``container_registry`` right after their constructor returns. With
``use_constructor_injection=True`` injected constructor parameters are
resolved too and passed before the caller's arguments.
"""

from __future__ import annotations

from wirekit import Container, Injected, autowired, container_registry


class Repository:
    pass


@autowired
class Handler:
    repository: Injected[Repository]


@autowired(use_constructor_injection=True)
class Job:
    def __init__(self, repository: Injected[Repository], name: str) -> None:
        self.repository = repository
        self.name = name


def main() -> None:
    container = Container()
    container.singleton(Repository)
    container_registry.set_default_container(container)

    handler = Handler()
    print(f"handler_wired={handler.repository is container.resolve(Repository)}")  # => handler_wired=True

    job = Job("nightly")
    print(f"job={job.name} wired={isinstance(job.repository, Repository)}")  # => job=nightly wired=True

    container_registry.clear()


if __name__ == "__main__":
    main()
