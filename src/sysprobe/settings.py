"""Runtime configuration for sysprobe."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from sysprobe.base.classifier import Classifier, default_probes
from sysprobe.catalog import DEFAULT_CATEGORIES, Catalog, Category


class Settings(BaseModel):
    """Configuration shared by the catalog and the classifier.

    Settings come from command line flags only; sysprobe reads no
    configuration files or environment variables.
    """

    model_config = ConfigDict(frozen=True)

    sysfs_root: str = Field(
        default="/sys/class",
        min_length=1,
        description="Root directory holding the device class directories",
    )
    alert_above_c: float = Field(
        default=60.0,
        description="Temperature in degrees Celsius above which thermal "
        "readings are alerts",
    )
    categories: Tuple[Category, ...] = Field(
        default=DEFAULT_CATEGORIES,
        min_length=1,
        description="Categories in display order",
    )

    def catalog(self) -> Catalog:
        """Build the category catalog for these settings."""
        return Catalog(root=self.sysfs_root, categories=self.categories)

    def classifier(self) -> Classifier:
        """Build a classifier honouring the configured alert threshold."""
        return Classifier(probes=default_probes(self.alert_above_c))
