"""Device directory and device kind types."""

import os
from enum import Enum
from typing import Any
from uuid import NAMESPACE_DNS, UUID, getnode, uuid5

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DeviceKind(str, Enum):
    """Semantic category assigned to a device directory.

    The kind is decided by which attribute files exist under the
    directory, never by a declared type attribute. Exactly one kind is
    assigned per evaluation; ``UNKNOWN`` when nothing matched.
    """

    THERMAL = "thermal"
    NETWORK = "network"
    POWER = "power"
    UNKNOWN = "unknown"


def path_uuid(path: str) -> UUID:
    """Return a UUID that is stable for a path on this machine."""
    return uuid5(NAMESPACE_DNS, f"{getnode()}.{path}.uuid.sysprobe")


class DeviceDirectory(BaseModel):
    """A directory node representing one hardware/device instance.

    A DeviceDirectory is the category root (e.g. ``/sys/class/thermal``)
    joined with a selected entry name (e.g. ``thermal_zone0``). It is an
    immutable value supplied by the caller for each evaluation; nothing
    about the device contents is stored here, so every inspection reads
    the live filesystem.

    The UUID is derived from the joined path, so the same device node
    keeps the same identifier across runs on one machine. An explicit
    ``uuid`` (e.g. from serialized data) is kept as given.
    """

    model_config = ConfigDict(frozen=True)

    uuid: UUID = Field(description="Identifier derived from the device path")
    name: str = Field(min_length=1, description="Entry name within the root")
    root: str = Field(
        min_length=1, description="Category root path the device lives under"
    )

    @model_validator(mode="before")
    @classmethod
    def _derive_uuid(cls, data: Any) -> Any:
        if isinstance(data, dict) and "uuid" not in data:
            if data.get("root") and data.get("name"):
                path = os.path.join(str(data["root"]), str(data["name"]))
                data = {**data, "uuid": path_uuid(path)}
        return data

    @classmethod
    def from_path(cls, path: str) -> "DeviceDirectory":
        """Build a DeviceDirectory from a full device path."""
        root, name = os.path.split(os.path.normpath(path))
        return cls(root=root, name=name)

    @property
    def path(self) -> str:
        """Full filesystem path of this device directory."""
        return os.path.join(self.root, self.name)

    def attribute_path(self, attribute: str) -> str:
        """Return the filesystem path of an attribute under this device."""
        return os.path.join(self.path, attribute)

    def __repr__(self) -> str:
        """Return a short representation showing the device path."""
        return f"DeviceDirectory('{self.path}')"
