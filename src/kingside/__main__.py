"""Allow ``python -m kingside``."""

import sys

from kingside.app import main

sys.exit(main())
