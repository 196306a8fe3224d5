"""Command line browser for sysfs device categories."""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from sysprobe.base.classifier import Classifier, Reading
from sysprobe.catalog import Catalog, Category, CategoryNotFoundError
from sysprobe.render import (
    STYLE_TITLE,
    colorize,
    readings_to_json,
    render_reading,
)
from sysprobe.settings import Settings

logger = logging.getLogger(__name__)

MISSING_CATEGORY = "(Category not found on this system)"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="sysprobe",
        description="Browse sysfs device categories and show interpreted "
        "device metrics.",
    )
    parser.add_argument(
        "category",
        nargs="?",
        help="category key or title (thermal, net, power, leds)",
    )
    parser.add_argument(
        "device", nargs="?", help="device entry name within the category"
    )
    parser.add_argument(
        "--root",
        default=Settings().sysfs_root,
        help="sysfs class root (default: %(default)s)",
    )
    parser.add_argument(
        "--alert-above",
        type=float,
        default=Settings().alert_above_c,
        metavar="CELSIUS",
        help="flag temperatures above this value (default: %(default)s)",
    )
    parser.add_argument(
        "--json", action="store_true", help="print readings as JSON"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="disable ANSI colors"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level for diagnostics on stderr (default: %(default)s)",
    )
    return parser.parse_args(argv)


def list_categories(catalog: Catalog, color: bool) -> List[str]:
    """Render the category table with device counts."""
    lines = [colorize("SENSORS", STYLE_TITLE, color)]
    for category in catalog.categories:
        count = len(catalog.list_devices(category))
        lines.append(
            f"  {category.key:<8} {category.title:<10} "
            f"{catalog.path(category)} ({count} devices)"
        )
    return lines


def inspect_category(
    catalog: Catalog,
    classifier: Classifier,
    category: Category,
    device_name: Optional[str] = None,
) -> List[Reading]:
    """Inspect one named device or every device of a category."""
    if device_name is not None:
        names = [device_name]
    else:
        names = catalog.list_devices(category)
    return [
        classifier.inspect(catalog.device(category, name)) for name in names
    ]


def main(argv: Optional[List[str]] = None) -> int:
    """Run the sysprobe command line and return the exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = Settings(sysfs_root=args.root, alert_above_c=args.alert_above)
    catalog = settings.catalog()
    color = not args.no_color and sys.stdout.isatty()

    if args.category is None:
        print("\n".join(list_categories(catalog, color)))
        return 0

    try:
        category = catalog.find(args.category)
    except CategoryNotFoundError as exc:
        print(f"sysprobe: {exc}", file=sys.stderr)
        return 2

    if not catalog.exists(category):
        logger.info("Category directory %s missing", catalog.path(category))
        if args.json:
            print(readings_to_json([]))
        else:
            print(MISSING_CATEGORY)
        return 0

    try:
        readings = inspect_category(
            catalog, settings.classifier(), category, args.device
        )
    except ValidationError as exc:
        print(f"sysprobe: invalid device name {args.device!r}", file=sys.stderr)
        logger.debug("Device validation failed: %s", exc)
        return 2

    if args.json:
        print(readings_to_json(readings))
        return 0

    lines = [colorize(f" {category.title.upper()} ", STYLE_TITLE, color)]
    for reading in readings:
        lines.extend(render_reading(reading, color))
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
