"""Interpreted device metrics for sysfs-style device directories."""

from .base import (
    NO_METRICS,
    Classifier,
    DeviceDirectory,
    DeviceKind,
    DisplayField,
    Emphasis,
    Probe,
    Reading,
    classify_and_format,
    default_probes,
    has_attribute,
    read_attribute,
)
from .catalog import Catalog, Category, CategoryNotFoundError
from .probes import NetworkProbe, PowerProbe, ThermalProbe
from .settings import Settings

__all__ = [
    "NO_METRICS",
    "Catalog",
    "Category",
    "CategoryNotFoundError",
    "Classifier",
    "DeviceDirectory",
    "DeviceKind",
    "DisplayField",
    "Emphasis",
    "NetworkProbe",
    "PowerProbe",
    "Probe",
    "Reading",
    "Settings",
    "ThermalProbe",
    "classify_and_format",
    "default_probes",
    "has_attribute",
    "read_attribute",
]
