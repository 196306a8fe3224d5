"""Allow running sysprobe as ``python -m sysprobe``."""

import sys

from sysprobe.cli import main

sys.exit(main())
