"""Per-kind probes for interpreting sysfs device directories."""

from .network import NetworkProbe
from .power import PowerProbe
from .thermal import ThermalProbe

__all__ = [
    "NetworkProbe",
    "PowerProbe",
    "ThermalProbe",
]
