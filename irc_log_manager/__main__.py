"""Allow ``python -m irc_log_manager``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
