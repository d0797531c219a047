"""Networking data models: endpoints, networks, ports and host configuration."""

from typing import Any

from pydantic import Field, RootModel, field_validator, model_validator

from .base import EngineModel, fold_legacy_key
from .enums import MountType, PortType


def _protocol(value: PortType | str) -> PortType:
    if isinstance(value, str) and not isinstance(value, PortType):
        value = value.lower()
    return PortType(value)


def _check_port(number: int) -> int:
    if not (0 <= number <= 65535):
        raise ValueError(f"Port {number} out of valid range 0-65535")
    return number


def port_key(port: int, protocol: PortType | str = PortType.TCP) -> str:
    """Build a ``<port>/<protocol>`` key as used by ExposedPorts and PortBindings."""
    return f"{_check_port(int(port))}/{_protocol(protocol).value}"


def parse_port_key(key: str) -> tuple[int, PortType]:
    """Split a ``<port>/<protocol>`` key; the protocol defaults to tcp."""
    port, _, protocol = key.strip().partition("/")
    try:
        number = int(port)
    except ValueError as e:
        raise ValueError(f"Invalid port key: '{key}' (port must be numeric)") from e
    _check_port(number)
    try:
        return number, _protocol(protocol or PortType.TCP)
    except ValueError as e:
        raise ValueError(f"Invalid port key: '{key}' (unknown protocol '{protocol}')") from e


class EndpointIPAMConfig(EngineModel):
    """Static IP configuration requested for an endpoint."""

    ipv4_address: str | None = Field(default=None, alias="IPv4Address")
    ipv6_address: str | None = Field(default=None, alias="IPv6Address")
    link_local_ips: list[str] | None = Field(default=None, alias="LinkLocalIPs")


class EndpointSettings(EngineModel):
    """A container's attachment to one network."""

    ipam_config: EndpointIPAMConfig | None = Field(default=None, alias="IPAMConfig")
    links: list[str] | None = Field(default=None, alias="Links")
    aliases: list[str] | None = Field(default=None, alias="Aliases")
    network_id: str | None = Field(default=None, alias="NetworkID")
    endpoint_id: str | None = Field(default=None, alias="EndpointID")
    gateway: str | None = Field(default=None, alias="Gateway")
    ip_address: str | None = Field(default=None, alias="IPAddress")
    ip_prefix_len: int | None = Field(default=None, alias="IPPrefixLen")
    ipv6_gateway: str | None = Field(default=None, alias="IPv6Gateway")
    global_ipv6_address: str | None = Field(default=None, alias="GlobalIPv6Address")
    mac_address: str | None = Field(default=None, alias="MacAddress")
    driver_opts: dict[str, Any] | None = Field(default=None, alias="DriverOpts")


class Network(RootModel[dict[str, EndpointSettings]]):
    """Mapping of network name to the container's endpoint on it."""

    root: dict[str, EndpointSettings] = Field(default_factory=dict)

    def __getitem__(self, name: str) -> EndpointSettings:
        return self.root[name]

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, name: object) -> bool:
        return name in self.root

    def get(self, name: str, default: EndpointSettings | None = None) -> EndpointSettings | None:
        return self.root.get(name, default)

    def items(self):
        return self.root.items()


class Port(EngineModel):
    """A port exposed by a listed container."""

    ip: str | None = Field(default=None, alias="IP")
    private_port: int = Field(alias="PrivatePort")
    public_port: int | None = Field(default=None, alias="PublicPort")
    type: PortType = Field(alias="Type")

    @model_validator(mode="before")
    @classmethod
    def fold_public_port(cls, data: Any) -> Any:
        """Accept the PublicPOrt misspelling of PublicPort."""
        return fold_legacy_key(data, "PublicPOrt", "PublicPort", "public_port")

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        """Map legacy protocol spellings onto their canonical value."""
        if isinstance(v, str) and not isinstance(v, PortType):
            try:
                return _protocol(v)
            except ValueError:
                return v
        return v

    @property
    def key(self) -> str:
        return port_key(self.private_port, self.type)


class PortBinding(EngineModel):
    """Host side of a port mapping."""

    host_ip: str | None = Field(default=None, alias="HostIp")
    host_port: str | None = Field(default=None, alias="HostPort")


class HostMount(EngineModel):
    """Mount specification attached to a HostConfig."""

    type: MountType | None = Field(default=None, alias="Type")
    source: str | None = Field(default=None, alias="Source")
    target: str | None = Field(default=None, alias="Target")
    read_only: bool | None = Field(default=None, alias="ReadOnly")


class HostConfig(EngineModel):
    """Host-level runtime configuration of a container."""

    # bridge, host, none, container:<name|id>, or a custom network's name
    network_mode: str | None = Field(default=None, alias="NetworkMode")
    # keyed by "<port>/<protocol>", e.g. "80/udp"
    port_bindings: dict[str, list[PortBinding] | None] | None = Field(
        default=None, alias="PortBindings"
    )
    # conflicts with Capabilities
    cap_add: list[str] | None = Field(default=None, alias="CapAdd")
    mounts: list[HostMount] | None = Field(default=None, alias="Mounts")
    # no effect if RestartPolicy is set
    auto_remove: bool | None = Field(default=None, alias="AutoRemove")

    def bind_port(
        self,
        container_port: int,
        host_port: int | str | None = None,
        protocol: PortType | str = PortType.TCP,
        host_ip: str | None = None,
    ) -> "HostConfig":
        """Publish ``container_port`` on the host and return self."""
        fields: dict[str, str] = {}
        if host_ip is not None:
            fields["HostIp"] = host_ip
        if host_port is not None:
            fields["HostPort"] = str(host_port)
        binding = PortBinding(**fields)

        bindings = dict(self.port_bindings or {})
        key = port_key(container_port, protocol)
        bindings[key] = [*(bindings.get(key) or []), binding]
        self.port_bindings = bindings
        return self


class NetworkSettings(EngineModel):
    """Networks a container is attached to."""

    networks: Network = Field(alias="Networks")
