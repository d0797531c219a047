"""Container data models: health checks, listings and creation payloads."""

from datetime import UTC, datetime
from typing import Any

from pydantic import Field, model_validator

from .base import EngineModel, fold_legacy_key
from .enums import HealthCheckKind, PortType
from .filesystem import Labels, Mount
from .networking import HostConfig, NetworkSettings, Port, port_key


class HealthConfig(EngineModel):
    """Health check probe of a container.

    ``test`` takes one of these forms:

    - absent or ``[]``: inherit the health check from the image
    - ``["NONE"]``: disable the health check
    - ``["CMD", arg, ...]``: exec the arguments directly
    - ``["CMD-SHELL", command]``: run the command with the system's shell

    Durations are nanoseconds.
    """

    test: list[str] | None = Field(default=None, alias="Test")
    interval: int | None = Field(default=None, alias="Interval")
    timeout: int | None = Field(default=None, alias="Timeout")
    retries: int | None = Field(default=None, alias="Retries")
    start_period: int | None = Field(default=None, alias="StartPeriod")

    @classmethod
    def inherit(cls, **timing: int) -> "HealthConfig":
        return cls(test=[], **timing)

    @classmethod
    def disabled(cls, **timing: int) -> "HealthConfig":
        return cls(test=["NONE"], **timing)

    @classmethod
    def exec_form(cls, *args: str, **timing: int) -> "HealthConfig":
        return cls(test=["CMD", *args], **timing)

    @classmethod
    def shell_form(cls, command: str, **timing: int) -> "HealthConfig":
        return cls(test=["CMD-SHELL", command], **timing)

    @property
    def kind(self) -> HealthCheckKind:
        """Classify ``test``; malformed values are reported as UNKNOWN."""
        if not self.test:
            return HealthCheckKind.INHERIT
        head, *rest = self.test
        if head == "NONE" and not rest:
            return HealthCheckKind.NONE
        if head == "CMD" and rest:
            return HealthCheckKind.CMD
        if head == "CMD-SHELL" and len(rest) == 1:
            return HealthCheckKind.CMD_SHELL
        return HealthCheckKind.UNKNOWN


class ListContainer(EngineModel):
    """One entry of a container listing."""

    id: str | None = Field(default=None, alias="Id")
    names: list[str] | None = Field(default=None, alias="Names")
    image: str | None = Field(default=None, alias="Image")
    image_id: str | None = Field(default=None, alias="ImageID")
    command: str | None = Field(default=None, alias="Command")
    created: int | None = Field(default=None, alias="Created")  # unix seconds
    ports: list[Port] | None = Field(default=None, alias="Ports")
    size_rw: int | None = Field(default=None, alias="SizeRw")
    size_root_fs: int | None = Field(default=None, alias="SizeRootFs")
    labels: Labels | None = Field(default=None, alias="Labels")
    state: str | None = Field(default=None, alias="State")
    status: str | None = Field(default=None, alias="Status")
    host_config: HostConfig | None = Field(default=None, alias="HostConfig")
    network_settings: NetworkSettings = Field(alias="NetworkSettings")
    mounts: list[Mount] = Field(alias="Mounts")

    @property
    def name(self) -> str | None:
        """First container name without the leading slash."""
        if not self.names:
            return None
        return self.names[0].lstrip("/")

    @property
    def created_at(self) -> datetime | None:
        if self.created is None:
            return None
        return datetime.fromtimestamp(self.created, tz=UTC)


class ContainerCreate(EngineModel):
    """Request body for creating a container."""

    # valid RFC 1123 hostname
    hostname: str | None = Field(default=None, alias="Hostname")
    domainname: str | None = Field(default=None, alias="Domainname")
    user: str | None = Field(default=None, alias="User")
    attach_stdin: bool | None = Field(default=None, alias="AttachStdin")
    attach_stdout: bool | None = Field(default=None, alias="AttachStdout")
    attach_stderr: bool | None = Field(default=None, alias="AttachStderr")
    # {"<port>/<tcp|udp|sctp>": {}}
    exposed_ports: dict[str, dict[str, Any]] | None = Field(default=None, alias="ExposedPorts")
    tty: bool | None = Field(default=None, alias="Tty")
    open_stdin: bool | None = Field(default=None, alias="OpenStdin")
    stdin_once: bool | None = Field(default=None, alias="StdinOnce")
    # "VAR=value"; a variable without "=" is removed from the environment
    env: list[str] | None = Field(default=None, alias="Env")
    cmd: list[str] | None = Field(default=None, alias="Cmd")
    healthcheck: HealthConfig | None = Field(default=None, alias="Healthcheck")
    # Windows only
    args_escaped: bool | None = Field(default=None, alias="ArgsEscaped")
    image: str | None = Field(default=None, alias="Image")
    volumes: dict[str, dict[str, Any]] | None = Field(default=None, alias="Volumes")
    working_dir: str | None = Field(default=None, alias="WorkingDir")
    # [""] resets the entrypoint to the system default
    entrypoint: list[str] | None = Field(default=None, alias="Entrypoint")
    network_disabled: bool | None = Field(default=None, alias="NetworkDisabled")
    mac_address: str | None = Field(default=None, alias="MacAddress")
    on_build: list[str] | None = Field(default=None, alias="OnBuild")
    labels: Labels | None = Field(default=None, alias="Labels")
    stop_signal: str | None = Field(default=None, alias="StopSignal")
    stop_timeout: int | None = Field(default=None, alias="StopTimeout")  # seconds
    shell: list[str] | None = Field(default=None, alias="Shell")
    host_config: HostConfig | None = Field(default=None, alias="HostConfig")
    networking_config: NetworkSettings | None = Field(default=None, alias="NetworkingConfig")

    @model_validator(mode="before")
    @classmethod
    def fold_stdin_one(cls, data: Any) -> Any:
        """Accept the StdinOne misspelling of StdinOnce."""
        return fold_legacy_key(data, "StdinOne", "StdinOnce", "stdin_once")

    def expose(self, port: int, protocol: PortType | str = PortType.TCP) -> "ContainerCreate":
        """Add ``port`` to ExposedPorts and return self."""
        exposed = dict(self.exposed_ports or {})
        exposed[port_key(port, protocol)] = {}
        self.exposed_ports = exposed
        return self


class ContainerCreateResponse(EngineModel):
    """Response body of a container creation request."""

    id: str | None = Field(default=None, alias="Id")
    warnings: list[str] | None = Field(default=None, alias="Warnings")
    # set instead of Id when the engine rejects the request
    message: str | None = Field(default=None, alias="message")
