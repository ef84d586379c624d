"""
Health-check handler for the Vercel runtime (GET /api/health).
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from status_server.server import create_app  # noqa: E402
from status_server.vercel import make_handler  # noqa: E402

print("[lambda:health] cold start", flush=True)

app = create_app()
handler = make_handler(app, name="health")
