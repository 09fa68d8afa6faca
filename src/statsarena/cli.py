"""Command-line entry point that serves the gateway with uvicorn."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from statsarena.api import create_app
from statsarena.settings import GatewaySettings


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the stats arena gateway")
    parser.add_argument("--host", default=None, help="Bind address (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: PORT or 5000)")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=Path(".env"),
        help="Optional dotenv file loaded before reading the environment",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level for the server and gateway",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    if args.env_file and args.env_file.exists():
        load_dotenv(args.env_file)

    logging.getLogger("uvicorn.error").setLevel(args.log_level.upper())
    settings = GatewaySettings.from_env()
    host = args.host or settings.host
    port = args.port or settings.port

    app = create_app(settings)
    print(f"Server is running at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=args.log_level)


if __name__ == "__main__":
    main()
