"""Filesystem data models: mounts and their type-specific options."""

from typing import Any

from pydantic import Field

from .base import EngineModel
from .enums import MountConsistency, MountType

Labels = dict[str, str]


class BindOptions(EngineModel):
    """Options for ``bind`` mounts."""

    propagation: str | None = Field(default=None, alias="Propagation")
    non_recursive: bool | None = Field(default=None, alias="NonRecursive")


class DriverConfig(EngineModel):
    """Volume driver and its options."""

    name: str | None = Field(default=None, alias="Name")
    options: dict[str, Any] | None = Field(default=None, alias="Options")


class VolumeOptions(EngineModel):
    """Options for ``volume`` mounts."""

    no_copy: bool | None = Field(default=None, alias="NoCopy")
    labels: Labels | None = Field(default=None, alias="Labels")
    driver_config: DriverConfig | None = Field(default=None, alias="DriverConfig")


class TmpfsOptions(EngineModel):
    """Options for ``tmpfs`` mounts."""

    size_bytes: int | None = Field(default=None, alias="SizeBytes")
    mode: int | None = Field(default=None, alias="Mode")


class Mount(EngineModel):
    """A filesystem attachment.

    Only the options block matching ``type`` is meaningful. The others are
    carried as received and never cross-checked.
    """

    target: str | None = Field(default=None, alias="Target")
    source: str | None = Field(default=None, alias="Source")
    type: MountType | None = Field(default=None, alias="Type")
    read_only: bool | None = Field(default=None, alias="Readonly")
    consistency: MountConsistency | None = Field(default=None, alias="Consistency")
    bind_options: BindOptions | None = Field(default=None, alias="BindOptions")
    volume_options: VolumeOptions | None = Field(default=None, alias="VolumeOptions")
    tmpfs_options: TmpfsOptions | None = Field(default=None, alias="TmpfsOptions")

    @property
    def options(self) -> BindOptions | VolumeOptions | TmpfsOptions | None:
        """Options block selected by the mount type."""
        by_type = {
            MountType.BIND: self.bind_options,
            MountType.VOLUME: self.volume_options,
            MountType.TMPFS: self.tmpfs_options,
        }
        return by_type.get(self.type)
