"""Device categories and the device directories beneath them."""

import logging
import os
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from sysprobe.base.device import DeviceDirectory

logger = logging.getLogger(__name__)


class CategoryNotFoundError(LookupError):
    """Raised when a category key or title is not in the catalog."""


class Category(BaseModel):
    """A group of devices under one sysfs class directory.

    ``directory`` is relative to the catalog root, e.g. ``thermal`` for
    ``/sys/class/thermal``.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1, description="Short lookup key")
    title: str = Field(min_length=1, description="Human-readable title")
    directory: str = Field(
        min_length=1, description="Directory relative to the catalog root"
    )


DEFAULT_CATEGORIES: Tuple[Category, ...] = (
    Category(key="thermal", title="Thermals", directory="thermal"),
    Category(key="net", title="Network", directory="net"),
    Category(key="power", title="Power", directory="power_supply"),
    Category(key="leds", title="LEDs", directory="leds"),
)


class Catalog(BaseModel):
    """Ordered set of categories resolved under a sysfs root."""

    model_config = ConfigDict(frozen=True)

    root: str = Field(default="/sys/class", min_length=1)
    categories: Tuple[Category, ...] = DEFAULT_CATEGORIES

    def find(self, key: str) -> Category:
        """Look up a category by key or title, ignoring case.

        Raises:
            CategoryNotFoundError: If no category matches
        """
        wanted = key.casefold()
        for category in self.categories:
            if wanted in (category.key.casefold(), category.title.casefold()):
                return category
        raise CategoryNotFoundError(f"Unknown category '{key}'")

    def path(self, category: Category) -> str:
        """Return the filesystem path of a category."""
        return os.path.join(self.root, category.directory)

    def exists(self, category: Category) -> bool:
        """Check whether the category directory exists on this system."""
        return os.path.isdir(self.path(category))

    def list_devices(self, category: Category) -> List[str]:
        """Return the sorted entry names of a category directory.

        A missing or unreadable category directory yields an empty list.
        """
        try:
            names = os.listdir(self.path(category))
        except OSError as exc:
            logger.debug("Cannot list %s: %s", self.path(category), exc)
            return []
        return sorted(names)

    def device(self, category: Category, name: str) -> DeviceDirectory:
        """Build the DeviceDirectory for an entry of a category."""
        return DeviceDirectory(root=self.path(category), name=name)
