"""Memento: save the registry and restore it later.

``save`` returns a snapshot that later ``bind``/``unbind`` calls cannot
change. ``restore`` puts every binding back exactly as it was, which is handy
for temporary overrides in tests.
"""

from __future__ import annotations

from wirekit import Container


class Mailer:
    def send(self) -> str:
        return "smtp"


class FakeMailer(Mailer):
    def send(self) -> str:
        return "fake"


class AuditLog:
    pass


def main() -> None:
    container = Container()
    container.bind(Mailer)
    container.bind(AuditLog)

    memento = container.save()

    container.bind(Mailer, FakeMailer)
    container.unbind(AuditLog)
    print(f"override={container.resolve(Mailer).send()}")  # => override=fake
    print(f"audit_bound={container.is_bound(AuditLog)}")  # => audit_bound=False

    container.restore(memento)
    print(f"restored={container.resolve(Mailer).send()}")  # => restored=smtp
    print(f"audit_bound={container.is_bound(AuditLog)}")  # => audit_bound=True


if __name__ == "__main__":
    main()
