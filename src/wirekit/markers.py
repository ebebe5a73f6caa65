from typing import TYPE_CHECKING, Annotated, Any, NamedTuple, TypeVar, Union, get_args, get_origin

T = TypeVar("T")
_ANNOTATED_MARKER_MIN_ARGS = 2


class InjectedMarker:
    """A marker used to indicate a member should be injected from the container.

    The injected dependency is the annotated type itself.
    """


class Inject(NamedTuple):
    """Inject an explicit dependency key instead of the annotated type.

    Examples:
        .. code-block:: python

            @injectable
            class Report:
                def __init__(self, storage: Annotated[Storage, Inject(S3Storage)]) -> None:
                    self.storage = storage

    """

    dependency: Any


if TYPE_CHECKING:
    Injected = Union[T, T]  # noqa: UP007,PYI016
    """Mark a constructor parameter or class attribute for injection.

    At runtime ``Injected[T]`` becomes ``Annotated[T, InjectedMarker()]``.
    """

else:

    class Injected:
        """Mark a constructor parameter or class attribute for injection.

        At runtime ``Injected[T]`` resolves to ``Annotated[T, InjectedMarker()]``.

        Examples:
            .. code-block:: python

                @injectable
                class Service:
                    logger: Injected[Logger]

                    def __init__(self, repo: Injected[Repository], name: str) -> None:
                        self.repo = repo
                        self.name = name

        """

        def __class_getitem__(cls, item: T) -> Annotated[T, InjectedMarker]:
            if get_origin(item) is Annotated:
                args = get_args(item)
                inner = args[0]
                metadata = args[1:]
                return _build_annotated((inner, *metadata, InjectedMarker()))
            return _build_annotated((item, InjectedMarker()))


class InjectionTarget(NamedTuple):
    """Declared type and explicit override extracted from a marked annotation."""

    declared: Any
    explicit: Any | None


def extract_injection_target(annotation: Any) -> InjectionTarget | None:
    """Return the injection target of a marked annotation, or None when unmarked."""
    if get_origin(annotation) is not Annotated:
        return None
    annotation_args = get_args(annotation)
    if len(annotation_args) < _ANNOTATED_MARKER_MIN_ARGS:
        return None  # pragma: no cover - Annotated requires at least 2 args

    declared = annotation_args[0]
    metadata = annotation_args[1:]
    explicit = next((item for item in metadata if isinstance(item, Inject)), None)
    if explicit is not None:
        return InjectionTarget(declared=declared, explicit=explicit.dependency)
    if any(isinstance(item, InjectedMarker) for item in metadata):
        return InjectionTarget(declared=declared, explicit=None)
    return None


def _build_annotated(params: tuple[object, ...]) -> Any:
    """Return Annotated[...] with a pre-built params tuple (Py 3.10+ compatible)."""
    try:
        return Annotated.__class_getitem__(params)  # type: ignore[attr-defined]
    except AttributeError:
        return Annotated.__getitem__(params)  # type: ignore[attr-defined]
