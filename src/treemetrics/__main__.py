import sys

from treemetrics.cli import main

sys.exit(main())
