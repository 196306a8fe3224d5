"""Probe classes that interpret one kind of device directory."""

from abc import ABC, abstractmethod
from typing import ClassVar, List

from pydantic import BaseModel, ConfigDict

from .attribute import has_attribute, read_attribute
from .device import DeviceDirectory, DeviceKind
from .field import DisplayField


class Probe(BaseModel, ABC):
    """Base class for the per-kind interpretation of a device directory.

    A Probe pairs a presence test with a formatter. The presence test
    checks that the kind-defining attribute exists; the formatter reads
    and interprets the kind's attributes into an ordered list of
    DisplayField.

    Probes are immutable and keep no state between calls. Every
    formatting call performs fresh reads, so the same probe instance can
    be shared freely, including between threads.

    Subclasses set ``kind`` and ``presence_attribute`` and implement
    _fields().
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[DeviceKind]
    presence_attribute: ClassVar[str]

    def matches(self, device: DeviceDirectory) -> bool:
        """Return True if the kind-defining attribute exists."""
        return has_attribute(device, self.presence_attribute)

    def format(self, device: DeviceDirectory) -> List[DisplayField]:
        """Read and interpret this kind's attributes.

        Args:
            device: Device directory already known to match this probe

        Returns:
            Ordered, non-empty list of display fields
        """
        return self._fields(device)

    def read(self, device: DeviceDirectory, attribute: str) -> str:
        """Read one attribute of the device, ``""`` when unavailable."""
        return read_attribute(device, attribute)

    @abstractmethod
    def _fields(self, device: DeviceDirectory) -> List[DisplayField]:
        """Build the display fields for this kind."""
