"""Allow running ChefBot with ``python -m chefbot``."""

import sys

from chefbot.cli import main

sys.exit(main())
