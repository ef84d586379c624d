#!/usr/bin/env python3
"""Capture the audit report and deep dive layouts for stripe.com."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from audit_checks.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(["ui", "updated-layout"] + sys.argv[1:]))
