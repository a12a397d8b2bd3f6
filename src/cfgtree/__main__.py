"""Allow ``python -m cfgtree``."""

import sys

from cfgtree.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
