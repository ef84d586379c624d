#!/usr/bin/env python3
"""Check the persona journey transformation used by the report."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from audit_checks.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(["journey-transform"] + sys.argv[1:]))
