"""Tests for the category catalog."""

import pytest
from pydantic import ValidationError

from sysprobe.catalog import DEFAULT_CATEGORIES, Catalog, Category, CategoryNotFoundError


@pytest.mark.unit
class TestCatalog:
    """Test category lookup and device listing."""

    def test_default_categories(self):
        """Test the default category order and directories."""
        assert [(c.title, c.directory) for c in DEFAULT_CATEGORIES] == [
            ("Thermals", "thermal"),
            ("Network", "net"),
            ("Power", "power_supply"),
            ("LEDs", "leds"),
        ]

    @pytest.mark.parametrize("key", ["thermal", "THERMAL", "Thermals", "thermals"])
    def test_find_by_key_or_title(self, key):
        """Test lookup is case-insensitive on key and title."""
        assert Catalog().find(key).directory == "thermal"

    def test_find_unknown(self):
        """Test unknown categories raise CategoryNotFoundError."""
        with pytest.raises(CategoryNotFoundError, match="gpio"):
            Catalog().find("gpio")

    def test_category_not_found_is_lookup_error(self):
        assert issubclass(CategoryNotFoundError, LookupError)

    def test_path(self, sysfs_root):
        catalog = Catalog(root=str(sysfs_root))

        assert catalog.path(catalog.find("power")) == str(sysfs_root / "power_supply")

    def test_list_devices_sorted(self, make_device, sysfs_root):
        """Test device names come back sorted."""
        for name in ["thermal_zone2", "cooling_device0", "thermal_zone0"]:
            make_device(name)
        catalog = Catalog(root=str(sysfs_root))

        assert catalog.list_devices(catalog.find("thermal")) == [
            "cooling_device0",
            "thermal_zone0",
            "thermal_zone2",
        ]

    def test_list_devices_missing_category(self, sysfs_root):
        """Test a missing category directory lists nothing."""
        catalog = Catalog(root=str(sysfs_root))
        leds = catalog.find("leds")

        assert not catalog.exists(leds)
        assert catalog.list_devices(leds) == []

    def test_device(self, sysfs_root):
        """Test building a DeviceDirectory for a category entry."""
        catalog = Catalog(root=str(sysfs_root))

        device = catalog.device(catalog.find("net"), "eth0")

        assert device.path == str(sysfs_root / "net" / "eth0")

    def test_custom_categories(self, make_device, sysfs_root):
        """Test a catalog built with its own category table."""
        make_device("gpiochip0", category="gpio")
        catalog = Catalog(
            root=str(sysfs_root),
            categories=(Category(key="gpio", title="GPIO", directory="gpio"),),
        )

        assert catalog.list_devices(catalog.find("gpio")) == ["gpiochip0"]

    def test_category_requires_directory(self):
        with pytest.raises(ValidationError):
            Category(key="x", title="X", directory="")
