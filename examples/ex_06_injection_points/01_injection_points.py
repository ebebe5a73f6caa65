"""Injection points: constructor, attributes, and methods.

The pipeline constructs the object, then assigns ``Injected[...]`` class
attributes, then calls ``@inject_method`` methods with resolved arguments.
``Annotated[T, Inject(Key)]`` resolves ``Key`` instead of ``T``.
"""

from __future__ import annotations

from typing import Annotated

from wirekit import Container, Inject, Injected, inject_method, injectable


class Logger:
    def __init__(self, name: str) -> None:
        self.name = name


class Formatter:
    pass


class JsonFormatter(Formatter):
    pass


class EventBus:
    def __init__(self) -> None:
        self.subscribers: list[str] = []


@injectable
class Reporter:
    logger: Injected[Logger]

    def __init__(self, formatter: Annotated[Formatter, Inject(JsonFormatter)]) -> None:
        self.formatter = formatter
        self.steps = ["constructed"]

    @inject_method
    def subscribe(self, bus: Injected[EventBus]) -> None:
        self.steps.append(f"subscribed(logger={self.logger.name})")
        bus.subscribers.append("reporter")


def main() -> None:
    container = Container()
    bus = EventBus()
    container.instance(Logger, Logger("reports"))
    container.instance(EventBus, bus)
    container.bind(JsonFormatter)
    container.bind(Reporter)

    reporter = container.resolve(Reporter)

    print(f"formatter={type(reporter.formatter).__name__}")  # => formatter=JsonFormatter
    print(f"steps={','.join(reporter.steps)}")  # => steps=constructed,subscribed(logger=reports)
    print(f"subscribers={bus.subscribers}")  # => subscribers=['reporter']


if __name__ == "__main__":
    main()
