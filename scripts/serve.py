"""Run the playback control API.

Usage:
    uv run python scripts/serve.py
    uv run python scripts/serve.py --host 0.0.0.0 --port 8081
"""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

load_dotenv()


def main() -> None:
    ap = argparse.ArgumentParser(description="Activity player — control API")
    ap.add_argument("--host", default="127.0.0.1", help="Bind address")
    ap.add_argument("--port", type=int, default=8081, help="Bind port")
    ap.add_argument("--log-level", default="info", help="Logging level")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    import uvicorn

    from activity_player.web.app import app

    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
