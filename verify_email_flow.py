#!/usr/bin/env python3
"""Share the sample audit report by email through the running API."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from audit_checks.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(["email-flow"] + sys.argv[1:]))
