"""Errors raised by the HTTP service."""


class BindError(RuntimeError):
    """The listening socket could not be bound (port in use, permission denied, ...)."""

    def __init__(self, host: str, port: int, reason: str) -> None:
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Cannot bind {host}:{port}: {reason}")
