#!/usr/bin/env python3
"""Open the audit form, switch to the Image tab and take a screenshot."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from audit_checks.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(["ui", "image-tab"] + sys.argv[1:]))
