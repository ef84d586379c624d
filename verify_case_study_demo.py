#!/usr/bin/env python3
"""Check that the report shows relevant case studies for a FinTech site."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from audit_checks.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(["ui", "case-study-demo"] + sys.argv[1:]))
