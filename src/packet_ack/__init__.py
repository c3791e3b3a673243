"""WebSocket packet acknowledgment service."""
