from __future__ import annotations

from enum import IntEnum, StrEnum


class ResponseStatus(IntEnum):
    ERROR = 0
    OK = 1


class ServiceState(StrEnum):
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"


class AppEnv(StrEnum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class ConnectionState(StrEnum):
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"
