"""Tests for Settings."""

import pytest
from pydantic import ValidationError

from sysprobe import Settings, ThermalProbe
from sysprobe.base.field import Emphasis


@pytest.mark.unit
class TestSettings:
    """Test configuration defaults and the objects built from it."""

    def test_defaults(self):
        settings = Settings()

        assert settings.sysfs_root == "/sys/class"
        assert settings.alert_above_c == 60.0
        assert len(settings.categories) == 4

    def test_catalog_uses_root(self, sysfs_root):
        settings = Settings(sysfs_root=str(sysfs_root))

        assert settings.catalog().root == str(sysfs_root)

    def test_classifier_uses_threshold(self, make_device):
        """Test the alert threshold flows into the thermal probe."""
        device = make_device("thermal_zone0", {"temp": "75000"})
        classifier = Settings(alert_above_c=80.0).classifier()

        assert isinstance(classifier.probes[0], ThermalProbe)
        assert classifier.classify_and_format(device)[0].emphasis is Emphasis.NORMAL

    def test_empty_categories_rejected(self):
        with pytest.raises(ValidationError):
            Settings(categories=())

    def test_frozen(self):
        with pytest.raises(ValidationError):
            Settings().alert_above_c = 1.0
