"""Enum definitions for Docker Engine API payloads."""

from enum import Enum


class PortType(str, Enum):
    """Transport protocol of a published port."""

    TCP = "tcp"
    UDP = "udp"
    SCTP = "sctp"

    @classmethod
    def _missing_(cls, value):
        # Older clients spelled SCTP as "stcp"
        if isinstance(value, str) and value.lower() == "stcp":
            return cls.SCTP
        return None


class MountType(str, Enum):
    """Kind of filesystem attachment."""

    BIND = "bind"
    VOLUME = "volume"
    TMPFS = "tmpfs"
    NPIPE = "npipe"


class MountConsistency(str, Enum):
    """Consistency requirement for bind mounts."""

    DEFAULT = "default"
    CONSISTENT = "consistent"
    CACHED = "cached"
    DELEGATED = "delegated"


class HealthCheckKind(Enum):
    """Form of a health check ``Test`` command."""

    INHERIT = "inherit"
    NONE = "none"
    CMD = "cmd"
    CMD_SHELL = "cmd_shell"
    UNKNOWN = "unknown"
