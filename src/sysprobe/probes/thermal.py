"""Thermal zone probe reporting temperature in degrees Celsius."""

import logging
import math
import re
from typing import ClassVar, List

from pydantic import Field

from sysprobe.base.device import DeviceDirectory, DeviceKind
from sysprobe.base.field import DisplayField, Emphasis
from sysprobe.base.probe import Probe

logger = logging.getLogger(__name__)

DECIMAL_RE = re.compile(r"[+-]?\d+(?:\.\d+)?", re.ASCII)


class ThermalProbe(Probe):
    """Probe for devices exposing a ``temp`` attribute.

    The ``temp`` attribute holds millidegrees Celsius. The reading is
    shown with one decimal place and flagged as an alert when strictly
    above ``alert_above_c``. An optional ``type`` attribute is shown as
    the sensor type.

    An empty ``temp`` yields a single "Error reading temp" field and a
    non-numeric one a single "Parse Error" field; in both cases nothing
    else is reported for the device.
    """

    kind: ClassVar[DeviceKind] = DeviceKind.THERMAL
    presence_attribute: ClassVar[str] = "temp"

    alert_above_c: float = Field(
        default=60.0,
        description="Temperature in degrees Celsius above which the "
        "reading is an alert",
    )

    def _fields(self, device: DeviceDirectory) -> List[DisplayField]:
        raw = self.read(device, "temp")
        if not raw:
            return [
                DisplayField(value="Error reading temp", emphasis=Emphasis.ALERT)
            ]

        degrees = self.parse_millidegrees(raw)
        if degrees is None:
            logger.warning(
                "Unparseable temperature %r in %s", raw, device.path
            )
            return [
                DisplayField(
                    label="Parse Error", value=raw, emphasis=Emphasis.ALERT
                )
            ]

        emphasis = (
            Emphasis.ALERT if degrees > self.alert_above_c else Emphasis.NORMAL
        )
        fields = [
            DisplayField(
                label="Temperature",
                value=f"{round(degrees, 1) + 0.0:.1f} °C",
                emphasis=emphasis,
            )
        ]

        sensor_type = self.read(device, "type")
        if sensor_type:
            fields.append(DisplayField(label="Sensor Type", value=sensor_type))
        return fields

    @staticmethod
    def parse_millidegrees(raw: str) -> float | None:
        """Convert a millidegree string to degrees, None if malformed.

        Only plain decimal numbers are accepted; exponents, digit
        separators and spelled-out infinities are malformed.
        """
        text = raw.strip()
        if not DECIMAL_RE.fullmatch(text):
            return None
        value = float(text)
        if not math.isfinite(value):
            return None
        return value / 1000.0
