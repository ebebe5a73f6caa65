"""Common error classes for troubleshooting.

This module triggers representative error paths and prints exception type
names so you can recognize each error category quickly.
"""

from __future__ import annotations

from wirekit import (
    Container,
    InstanceBuilder,
    WirekitMetadataUnavailableError,
    WirekitNotBoundError,
    WirekitOutOfOrderBuildError,
)


class MissingDependency:
    pass


def main() -> None:
    container = Container()

    try:
        container.resolve(MissingDependency)
    except WirekitNotBoundError as error:
        print(f"missing={type(error).__name__}")  # => missing=WirekitNotBoundError

    container.bind("settings", "not-a-class")  # type: ignore[arg-type]
    try:
        container.resolve("settings")
    except WirekitMetadataUnavailableError as error:
        print(f"metadata={type(error).__name__}")  # => metadata=WirekitMetadataUnavailableError

    builder = InstanceBuilder(MissingDependency, container)
    try:
        builder.inject_properties()
    except WirekitOutOfOrderBuildError as error:
        print(f"order={type(error).__name__}")  # => order=WirekitOutOfOrderBuildError


if __name__ == "__main__":
    main()
