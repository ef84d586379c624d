#!/usr/bin/env python3
"""Bridge between the Vercel Python runtime and a WSGI application.

Vercel invokes a ``handler`` class derived from ``BaseHTTPRequestHandler``;
``make_handler`` builds one that forwards every request, whatever its
method, into the given Flask app and writes the WSGI response back.
"""

import json
from http.server import BaseHTTPRequestHandler
from typing import Callable

from werkzeug.test import EnvironBuilder, run_wsgi_app


def make_handler(wsgi_app: Callable, name: str = "status") -> type:
    """Return a request handler class serving ``wsgi_app``."""

    class handler(BaseHTTPRequestHandler):  # noqa: N801 - name required by Vercel
        server_version = "VercelPythonWSGI/1.0"

        def __getattr__(self, attr):
            # http.server looks up do_<METHOD>; the app decides what is allowed
            if attr.startswith("do_"):
                return self._dispatch
            raise AttributeError(attr)

        def _environ(self) -> dict:
            length = int(self.headers.get("Content-Length") or 0)
            builder = EnvironBuilder(
                path=self.path,
                method=self.command,
                base_url=f"https://{self.headers.get('Host', 'localhost')}",
                headers=list(self.headers.items()),
                data=self.rfile.read(length) if length > 0 else b"",
            )
            try:
                return builder.get_environ()
            finally:
                builder.close()

        def _write(self, status: int, headers, body: bytes) -> None:
            self.send_response(status)
            for header_name, value in headers:
                if header_name.lower() != "content-length":
                    self.send_header(header_name, value)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(body)

        def _dispatch(self) -> None:
            try:
                app_iter, status, headers = run_wsgi_app(wsgi_app, self._environ(), buffered=True)
                body = b"".join(app_iter)
                self._write(int(status.split(" ", 1)[0]), headers.to_wsgi_list(), body)
            except Exception as exc:
                print(f"[lambda:{name}] request error: {type(exc).__name__}: {exc}", flush=True)
                body = json.dumps({"error": type(exc).__name__, "message": str(exc)}).encode("utf-8")
                self._write(500, [("Content-Type", "application/json")], body)

        def log_message(self, format, *args):  # pragma: no cover - routed to stdout for Vercel logs
            print(f"[lambda:{name}] {self.address_string()} - {format % args}", flush=True)

    return handler
