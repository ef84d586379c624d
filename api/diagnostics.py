"""
Environment diagnostics handler for the Vercel runtime (GET /api/diagnostics).
Reports whether the OpenRouter key is configured without revealing it.
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from status_server.server import create_app  # noqa: E402
from status_server.vercel import make_handler  # noqa: E402

print("[lambda:diagnostics] cold start", flush=True)
print(f"[lambda:diagnostics] python={sys.version.split()[0]}", flush=True)

app = create_app()
handler = make_handler(app, name="diagnostics")
