"""
Book Store API server.

Usage:
    python -m bookstore                      # Listen on 0.0.0.0:8080
    python -m bookstore --port 9000          # Override the port
    python -m bookstore --log-format console # Human-readable logs
"""
import argparse
import socket
import sys
from typing import Optional, Sequence

import uvicorn

from bookstore.config import get_settings
from bookstore.core.logging import RequestErrorLogger, get_logger, setup_logging
from bookstore.main import create_app


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="bookstore",
        description="In-memory Book CRUD HTTP service",
    )
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        default=settings.log_format,
        help="Log output format",
    )
    return parser.parse_args(argv)


def bind_socket(host: str, port: int) -> socket.socket:
    """Create a listening TCP socket, raising OSError if the address is unavailable."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings().model_copy(
        update={
            "host": args.host,
            "port": args.port,
            "log_level": args.log_level,
            "log_format": args.log_format,
        }
    )
    setup_logging(settings.log_level, settings.log_format)
    error_logger = RequestErrorLogger()

    try:
        sock = bind_socket(settings.host, settings.port)
    except OSError as e:
        error_logger.fatal("Error when starting the server", e)
        return 1

    app = create_app(error_logger=error_logger, settings=settings)
    config = uvicorn.Config(app, log_level=settings.log_level.lower())
    server = uvicorn.Server(config)
    get_logger("server").info(f"Listening on {settings.host}:{settings.port}")
    server.run(sockets=[sock])
    return 0


if __name__ == "__main__":
    sys.exit(main())
