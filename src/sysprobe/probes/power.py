"""Power supply probe reporting battery level and charge status."""

from typing import ClassVar, List

from sysprobe.base.device import DeviceDirectory, DeviceKind
from sysprobe.base.field import DisplayField
from sysprobe.base.probe import Probe


class PowerProbe(Probe):
    """Probe for devices exposing a ``capacity`` attribute.

    Always reports both battery level and status, even when either
    attribute reads empty.
    """

    kind: ClassVar[DeviceKind] = DeviceKind.POWER
    presence_attribute: ClassVar[str] = "capacity"

    def _fields(self, device: DeviceDirectory) -> List[DisplayField]:
        capacity = self.read(device, "capacity")
        status = self.read(device, "status")
        return [
            DisplayField(label="Battery Level", value=f"{capacity}%"),
            DisplayField(label="Status", value=status),
        ]
