"""Device classification and metric formatting.

This module decides which kind of device a directory represents and
turns its attribute files into display fields. Kinds are tested in an
explicit priority order:

- Thermal: ``temp`` exists
- Network: ``operstate`` exists
- Power: ``capacity`` exists

The first probe whose presence test passes wins, so a directory exposing
both ``temp`` and ``operstate`` is always Thermal. When no probe
matches, the result is a single muted "no metrics" field. Classification
never raises for bad or missing data; every path yields a non-empty,
well-formed list of fields.
"""

import logging
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .device import DeviceDirectory, DeviceKind
from .field import DisplayField, Emphasis
from .probe import Probe

logger = logging.getLogger(__name__)

NO_METRICS = DisplayField(
    value="No standard metrics found", emphasis=Emphasis.MUTED
)


def default_probes(alert_above_c: float = 60.0) -> Tuple[Probe, ...]:
    """Return the standard probes in priority order.

    Args:
        alert_above_c: Temperature in degrees Celsius above which
            thermal readings are flagged as alerts

    Returns:
        Tuple of probes, highest priority first
    """
    from sysprobe.probes import NetworkProbe, PowerProbe, ThermalProbe

    return (
        ThermalProbe(alert_above_c=alert_above_c),
        NetworkProbe(),
        PowerProbe(),
    )


class Reading(BaseModel):
    """Result of inspecting one device directory.

    Holds the device, the kind it was classified as and the ordered
    display fields produced for it. Readings are snapshots; nothing in
    them is refreshed after creation.
    """

    model_config = ConfigDict(frozen=True)

    device: DeviceDirectory
    kind: DeviceKind
    fields: List[DisplayField] = Field(min_length=1)


class Classifier(BaseModel):
    """Ordered set of probes with first-match-wins dispatch.

    The order of ``probes`` is the tie-break rule: a directory that
    satisfies several presence tests is assigned the kind of the first
    matching probe.
    """

    model_config = ConfigDict(frozen=True)

    probes: Tuple[Probe, ...] = Field(
        default_factory=default_probes,
        description="Probes in priority order, highest first",
    )

    def select(self, device: DeviceDirectory) -> Probe | None:
        """Return the first probe matching the device, or None."""
        for probe in self.probes:
            if probe.matches(device):
                return probe
        return None

    def classify(self, device: DeviceDirectory) -> DeviceKind:
        """Return the kind of the device directory."""
        probe = self.select(device)
        if probe is None:
            return DeviceKind.UNKNOWN
        return probe.kind

    def classify_and_format(
        self, device: DeviceDirectory
    ) -> List[DisplayField]:
        """Classify the device and build its display fields."""
        return self.inspect(device).fields

    def inspect(self, device: DeviceDirectory) -> Reading:
        """Classify the device and return a full Reading.

        Args:
            device: Device directory to inspect

        Returns:
            Reading with the assigned kind and its display fields
        """
        probe = self.select(device)
        if probe is None:
            logger.debug("No probe matched %s", device.path)
            return Reading(
                device=device, kind=DeviceKind.UNKNOWN, fields=[NO_METRICS]
            )

        logger.debug("Classified %s as %s", device.path, probe.kind.value)
        return Reading(
            device=device, kind=probe.kind, fields=probe.format(device)
        )


def classify_and_format(device: DeviceDirectory) -> List[DisplayField]:
    """Classify a device with the default probes and format its fields."""
    return Classifier().classify_and_format(device)
