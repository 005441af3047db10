#!/usr/bin/env python3
"""
Hackers Auth -- demo authentication service runner.

Usage:
  python main.py
  python main.py --port 9000
  python main.py --host 127.0.0.1 --reload
  python main.py --log-level debug

Environment variables (see core/config.py for the full list):
  SECRET_KEY   HS256 signing key, at least 32 characters. Required unless DEBUG=true.
  DEBUG        Set to true to auto-generate a throwaway SECRET_KEY.
  HOST / PORT  Default bind address (0.0.0.0:8080).
"""

import argparse

import uvicorn

from core.config import get_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="hackers-auth",
        description="Run the Hackers Auth demo authentication API.",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    parser.add_argument(
        "--log-level",
        default=settings.log_level.lower(),
        choices=["critical", "error", "warning", "info", "debug"],
        help="uvicorn log level",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
