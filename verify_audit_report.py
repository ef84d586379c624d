#!/usr/bin/env python3
"""Run a full audit in the browser and screenshot the finished report."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from audit_checks.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(["ui", "audit-report"] + sys.argv[1:]))
