"""
Process entry point: bind the listening socket and serve the app with uvicorn.

Run from project root: python -m backend.server (or the `backend` console script).
"""

import logging
import socket
import sys

import uvicorn

from backend.core.config import Settings, get_settings
from backend.core.errors import BindError
from backend.core.logging_config import setup_logging
from backend.main import app

logger = logging.getLogger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Bind and listen on host:port.

    Raises BindError if the address is taken or not permitted; the caller decides
    whether that is fatal (it always is for main()).
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen()
    except OSError as e:
        sock.close()
        raise BindError(host, port, e.strerror or str(e)) from e
    return sock


def serve(settings: Settings) -> None:
    """Bind, log the confirmation line, then block in uvicorn until signalled."""
    sock = bind_socket(settings.HOST, settings.PORT)
    logger.info("Backend running on port %s", settings.PORT)

    config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
        log_level=settings.LOG_LEVEL.lower(),
    )
    server = uvicorn.Server(config)
    server.run(sockets=[sock])


def main() -> None:
    """Start the service; exit with status 1 if the port cannot be bound."""
    setup_logging()
    try:
        serve(get_settings())
    except BindError as e:
        logger.error("Backend failed to start: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
