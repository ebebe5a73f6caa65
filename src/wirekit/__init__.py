from wirekit.bindings import Binding, ClassBinding, FactoryBinding, InstanceBinding, SingletonWrapper
from wirekit.builders import (
    AutowiredBuilder,
    BuildStage,
    ContainerRegistry,
    InstanceBuilder,
    InstanceBuilderFactory,
    autowired,
    container_registry,
)
from wirekit.container import Container
from wirekit.decorators import inject_method, injectable
from wirekit.exceptions import (
    WirekitContainerNotSetError,
    WirekitCyclicAliasError,
    WirekitError,
    WirekitMetadataUnavailableError,
    WirekitNotBoundError,
    WirekitOutOfOrderBuildError,
)
from wirekit.lock_mode import LockMode
from wirekit.markers import Inject, Injected
from wirekit.metadata import (
    AnnotationMetadataProvider,
    MethodSpec,
    ParameterSpec,
    PropertySpec,
    TypeMetadata,
    TypeMetadataProvider,
)
from wirekit.registry import Memento

__all__ = [
    "AnnotationMetadataProvider",
    "AutowiredBuilder",
    "Binding",
    "BuildStage",
    "ClassBinding",
    "Container",
    "ContainerRegistry",
    "FactoryBinding",
    "Inject",
    "Injected",
    "InstanceBinding",
    "InstanceBuilder",
    "InstanceBuilderFactory",
    "LockMode",
    "Memento",
    "MethodSpec",
    "ParameterSpec",
    "PropertySpec",
    "SingletonWrapper",
    "TypeMetadata",
    "TypeMetadataProvider",
    "WirekitContainerNotSetError",
    "WirekitCyclicAliasError",
    "WirekitError",
    "WirekitMetadataUnavailableError",
    "WirekitNotBoundError",
    "WirekitOutOfOrderBuildError",
    "autowired",
    "container_registry",
    "inject_method",
    "injectable",
]
