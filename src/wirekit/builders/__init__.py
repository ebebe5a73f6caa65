from wirekit.builders.autowired import AutowiredBuilder, ContainerRegistry, autowired, container_registry
from wirekit.builders.instance_builder import BuildStage, InstanceBuilder
from wirekit.builders.instance_builder_factory import InstanceBuilderFactory

__all__ = [
    "AutowiredBuilder",
    "BuildStage",
    "ContainerRegistry",
    "InstanceBuilder",
    "InstanceBuilderFactory",
    "autowired",
    "container_registry",
]
