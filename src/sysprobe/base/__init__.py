"""Base classes for the sysprobe device-metric interpretation system."""

from sysprobe.base.attribute import has_attribute, read_attribute
from sysprobe.base.classifier import (
    NO_METRICS,
    Classifier,
    Reading,
    classify_and_format,
    default_probes,
)
from sysprobe.base.device import DeviceDirectory, DeviceKind
from sysprobe.base.field import DisplayField, Emphasis
from sysprobe.base.probe import Probe

__all__ = [
    "NO_METRICS",
    "Classifier",
    "DeviceDirectory",
    "DeviceKind",
    "DisplayField",
    "Emphasis",
    "Probe",
    "Reading",
    "classify_and_format",
    "default_probes",
    "has_attribute",
    "read_attribute",
]
