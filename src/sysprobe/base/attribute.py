"""Attribute reader for sysfs-style device directories.

An attribute is a plain-text file under a device directory holding one
value on its first line. Reads are never cached: sysfs content changes
between calls and a stale value is never acceptable. Absent, unreadable
and empty attributes all read as the empty string, so callers must treat
``""`` as "value unavailable", not as a valid reading.
"""

import logging
import os
import stat

from .device import DeviceDirectory

logger = logging.getLogger(__name__)


def read_attribute(device: DeviceDirectory, attribute: str) -> str:
    """Read the first line of an attribute file.

    Only regular files are opened; FIFOs, sockets and device nodes could
    block the caller and read as unavailable instead. Only the first
    line is decoded, so bytes further down the file never affect the
    result.

    Args:
        device: Device directory holding the attribute
        attribute: Attribute name relative to the device directory,
            possibly one level nested (``statistics/rx_bytes``)

    Returns:
        The first line without its terminator, or ``""`` when the
        attribute is missing, not a regular file, unreadable,
        undecodable or empty
    """
    path = device.attribute_path(attribute)
    try:
        mode = os.stat(path).st_mode
    except OSError as exc:
        logger.debug("Cannot stat %s: %s", path, exc)
        return ""
    if not stat.S_ISREG(mode):
        logger.debug("Not a regular file: %s", path)
        return ""

    try:
        with open(path, "rb") as handle:
            line = handle.readline()
    except OSError as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return ""

    try:
        text = line.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.debug("Cannot decode first line of %s: %s", path, exc)
        return ""
    return text.rstrip("\r\n")


def has_attribute(device: DeviceDirectory, attribute: str) -> bool:
    """Check whether an attribute exists under the device directory."""
    return os.path.exists(device.attribute_path(attribute))
