from __future__ import annotations

import logging
import socket
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import Settings, settings as default_settings
from .main import app as default_app

logger = logging.getLogger(__name__)

# uvicorn's default listen backlog
BACKLOG = 2048


class BindError(Exception):
    """The listening socket could not be bound."""

    def __init__(self, host: str, port: int, reason: Exception) -> None:
        super().__init__(f"Failed to bind {host}:{port}: {getattr(reason, 'strerror', None) or reason}")
        self.host = host
        self.port = port


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(stream=sys.stdout, format="%(message)s", level=level, force=True)


def listening_url(port: int, host: str = default_settings.public_host) -> str:
    return f"http://{host}:{port}"


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on ``host:port``, raising :class:`BindError` on failure."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(BACKLOG)
    except (OSError, OverflowError) as exc:
        # OverflowError: port outside 0-65535
        sock.close()
        raise BindError(host, port, exc) from exc
    return sock


def build_server(app: Optional[FastAPI] = None, settings: Optional[Settings] = None) -> uvicorn.Server:
    if settings is None:
        settings = default_settings
    config = uvicorn.Config(
        app if app is not None else default_app,
        host=settings.host,
        port=settings.port,
        # logging is configured by the caller; uvicorn stays quiet below warning
        log_config=None,
        log_level="warning",
        access_log=False,
    )
    return uvicorn.Server(config)


def start(port: int = default_settings.port, app: Optional[FastAPI] = None) -> None:
    """Bind all interfaces on ``port`` and serve until the process is stopped."""
    settings = default_settings.model_copy(update={"port": port})
    sock = bind_socket(settings.host, settings.port)
    bound_port = sock.getsockname()[1]
    server = build_server(app, settings)
    logger.info("App listening at %s", listening_url(bound_port, settings.public_host))
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
