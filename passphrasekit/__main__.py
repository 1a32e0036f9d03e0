"""Allow ``python -m passphrasekit``."""

import sys

from passphrasekit.cli import main

sys.exit(main())
