from __future__ import annotations

import logging
from typing import Optional

import uvicorn

from .config import Settings


logger = logging.getLogger(__name__)


class Listener:
    """Handle on the running uvicorn server, used by ``/stop`` to shut it down."""

    def __init__(self) -> None:
        self.server: Optional[uvicorn.Server] = None
        self.stopped = False

    def attach(self, server: uvicorn.Server) -> None:
        self.server = server

    def stop(self) -> None:
        logger.info("Stop requested, shutting down listener")
        self.stopped = True
        if self.server is not None:
            self.server.should_exit = True


def build_server(app, settings: Settings, listener: Listener) -> uvicorn.Server:
    config = uvicorn.Config(
        app,
        host=settings.bind_address,
        port=settings.bind_port,
        ssl_certfile=settings.ssl_cert_path,
        ssl_keyfile=settings.ssl_key_path,
        log_level="info",
    )
    server = uvicorn.Server(config)
    listener.attach(server)
    return server
