"""Process-level service object: owns the app, the listener and its config."""
from __future__ import annotations

import logging
import socket
from types import FrameType

import uvicorn

from packet_ack.app import create_app
from packet_ack.config import Settings
from packet_ack.domain.value_objects.enums import ServiceState

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)


class _Server(uvicorn.Server):
    def __init__(self, config: uvicorn.Config, owner: AckServer) -> None:
        super().__init__(config)
        self._owner = owner

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            self._owner.announce()

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if not self.should_exit:
            logger.info("Shutting down WebSocket server...")
            self._owner.app.state.service_state = ServiceState.STOPPING
        super().handle_exit(sig, frame)


class AckServer:
    """Built once at startup from explicit settings."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.app = create_app(settings)

    @property
    def url(self) -> str:
        scheme = "wss" if self.settings.tls_enabled else "ws"
        path = self.settings.WS_PATH.rstrip("/")
        return f"{scheme}://localhost:{self.settings.PORT}{path}"

    def build_config(self) -> uvicorn.Config:
        tls: dict[str, str] = {}
        key, cert = self.settings.SSL_KEY, self.settings.SSL_CERT
        if self.settings.tls_enabled and key and cert:
            tls = {"ssl_keyfile": key, "ssl_certfile": cert}
        return uvicorn.Config(
            self.app,
            host=self.settings.HOST,
            port=self.settings.PORT,
            log_level=self.settings.LOG_LEVEL.lower(),
            log_config=None,
            timeout_graceful_shutdown=self.settings.GRACEFUL_SHUTDOWN_SECONDS,
            **tls,
        )

    def announce(self) -> None:
        if self.settings.tls_enabled:
            logger.info("Secure WebSocket server started on %s", self.url)
            return
        logger.info("WebSocket server started on %s", self.url)
        if self.settings.is_production:
            logger.info("Note: running in production mode without SSL certificates")
            logger.info("TLS is expected to be terminated by the hosting platform")

    def run(self) -> None:
        """Serve until SIGINT/SIGTERM. Bind failures exit non-zero."""
        _Server(self.build_config(), owner=self).run()
