"""Data models for Docker Engine API payloads."""

from .base import EngineModel  # noqa: F401
from .containers import (  # noqa: F401
    ContainerCreate,
    ContainerCreateResponse,
    HealthConfig,
    ListContainer,
)
from .enums import (  # noqa: F401
    HealthCheckKind,
    MountConsistency,
    MountType,
    PortType,
)
from .filesystem import (  # noqa: F401
    BindOptions,
    DriverConfig,
    Labels,
    Mount,
    TmpfsOptions,
    VolumeOptions,
)
from .networking import (  # noqa: F401
    EndpointIPAMConfig,
    EndpointSettings,
    HostConfig,
    HostMount,
    Network,
    NetworkSettings,
    Port,
    PortBinding,
    parse_port_key,
    port_key,
)

__all__ = [
    "EngineModel",
    # Container models
    "ContainerCreate",
    "ContainerCreateResponse",
    "HealthConfig",
    "ListContainer",
    # Enums
    "HealthCheckKind",
    "MountConsistency",
    "MountType",
    "PortType",
    # Filesystem models
    "BindOptions",
    "DriverConfig",
    "Labels",
    "Mount",
    "TmpfsOptions",
    "VolumeOptions",
    # Networking models
    "EndpointIPAMConfig",
    "EndpointSettings",
    "HostConfig",
    "HostMount",
    "Network",
    "NetworkSettings",
    "Port",
    "PortBinding",
    "parse_port_key",
    "port_key",
]
