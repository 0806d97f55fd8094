"""Exception classes for hello-web.

Every error carries a machine-readable code, a human-readable message and
an optional details dict.
"""

from typing import Any, Dict, Optional


class HelloWebError(Exception):
    """Base for all hello-web errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} - {self.details}"
        return f"{self.code}: {self.message}"


class ListenerError(HelloWebError):
    """Raised when the TCP listener cannot be set up."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="LISTENER_ERROR", message=message, details=details)


class PortInUseError(ListenerError):
    """Raised when another socket already holds the listener port."""

    def __init__(self, host: str, port: int):
        super().__init__(
            message=f"Port {port} is already in use",
            details={"host": host, "port": port},
        )
        self.code = "PORT_IN_USE"
