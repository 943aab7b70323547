"""
Hello site example.

Serves the pages and scripts next to this file plus two API handlers.

Run:
  python examples/hello_site/app.py

Then try:
  curl -i http://127.0.0.1:9000/
  curl -i http://127.0.0.1:9000/js/index.js
  curl -i http://127.0.0.1:9000/api/ping
  curl -i http://127.0.0.1:9000/api/hits
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from pagewire import ApiTable, PageServer, ServerConfig


api = ApiTable()


@api.handler("ping")
def ping(_subpath: str) -> str:
    return "pong\n"


class HitCounter:
    """Handler with captured state. Sync handlers run in worker threads."""

    def __init__(self):
        self.hits = 0
        self._lock = threading.Lock()

    def __call__(self, subpath: str) -> str:
        with self._lock:
            self.hits += 1
            hits = self.hits
        return json.dumps({"path": subpath, "hits": hits})


api.register("hits", HitCounter(), content_type="application/json")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    config = ServerConfig(content_root=Path(__file__).parent)

    print("Listening on http://127.0.0.1:9000")
    print("Press Ctrl-C to stop.")
    PageServer(config, api=api).run()


if __name__ == "__main__":
    main()
