#!/usr/bin/env python3
"""Send an audit request to the running API and summarize the result."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from audit_checks.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(["audit-api"] + sys.argv[1:]))
