"""Entrypoint: python -m packet_ack"""
from __future__ import annotations

from packet_ack.config import settings
from packet_ack.server import AckServer, configure_logging


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    AckServer(settings).run()


if __name__ == "__main__":
    main()
