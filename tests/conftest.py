from pathlib import Path
from typing import Callable, Dict
from uuid import UUID

import pytest

from sysprobe.base.device import DeviceDirectory


@pytest.fixture
def sample_uuid() -> UUID:
    """Provides a consistent UUID for testing."""
    return UUID("12345678-1234-5678-9abc-123456789abc")


@pytest.fixture
def sysfs_root(tmp_path: Path) -> Path:
    """Provides an empty directory standing in for /sys/class."""
    root = tmp_path / "class"
    root.mkdir()
    return root


@pytest.fixture
def make_device(sysfs_root: Path) -> Callable[..., DeviceDirectory]:
    """Provides a builder for fake device directories.

    Attribute names may contain one nested level, e.g.
    ``statistics/rx_bytes``. Values are written with a trailing newline
    the way sysfs exposes them.
    """

    def _make(
        name: str,
        attributes: Dict[str, str] | None = None,
        category: str = "thermal",
    ) -> DeviceDirectory:
        device_path = sysfs_root / category / name
        device_path.mkdir(parents=True, exist_ok=True)
        for attribute, value in (attributes or {}).items():
            attribute_path = device_path / attribute
            attribute_path.parent.mkdir(parents=True, exist_ok=True)
            attribute_path.write_text(f"{value}\n", encoding="utf-8")
        return DeviceDirectory(root=str(sysfs_root / category), name=name)

    return _make


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
