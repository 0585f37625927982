#!/usr/bin/env python3
"""
Card engine server -- runs the API under uvicorn.

Usage:
  python main.py
  python main.py --port 8080
  python main.py --host 127.0.0.1 --reload

Environment variables:
  LOGIN_EMAIL       The single email address that may log in.
  LOGIN_PASSWORD    Its password. Without both, every login is rejected.
  PORT / HOST       Defaults for --port / --host (3001 / 0.0.0.0).
  LOGIN_RATE_LIMIT  slowapi limit string for POST /api/auth/login (default 10/minute).
"""

import argparse

import uvicorn

from core.config import get_settings


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the card engine API server.")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    uvicorn.run(
        "asgi:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="debug" if get_settings().debug else "info",
    )


if __name__ == "__main__":
    main()
