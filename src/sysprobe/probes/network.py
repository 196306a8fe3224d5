"""Network interface probe reporting link state and traffic."""

from typing import ClassVar, List

from sysprobe.base.device import DeviceDirectory, DeviceKind
from sysprobe.base.field import DisplayField, Emphasis
from sysprobe.base.probe import Probe


class NetworkProbe(Probe):
    """Probe for devices exposing an ``operstate`` attribute.

    Link state is normal only when it reads exactly ``up``; ``down``,
    ``unknown`` and an unreadable state are alerts. The MAC address and
    received byte counter are appended when available. The byte counter
    is shown verbatim, without parsing or unit conversion.
    """

    kind: ClassVar[DeviceKind] = DeviceKind.NETWORK
    presence_attribute: ClassVar[str] = "operstate"

    def _fields(self, device: DeviceDirectory) -> List[DisplayField]:
        state = self.read(device, "operstate")
        fields = [
            DisplayField(
                label="Link State",
                value=state,
                emphasis=Emphasis.NORMAL if state == "up" else Emphasis.ALERT,
            )
        ]

        address = self.read(device, "address")
        if address:
            fields.append(DisplayField(label="MAC", value=address))

        rx_bytes = self.read(device, "statistics/rx_bytes")
        if rx_bytes:
            fields.append(
                DisplayField(label="Data Rx", value=f"{rx_bytes} bytes")
            )
        return fields
