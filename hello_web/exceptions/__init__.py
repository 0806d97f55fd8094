"""Custom exceptions for hello-web."""

from hello_web.exceptions.base import (
    HelloWebError,
    ListenerError,
    PortInUseError,
)

__all__ = [
    "HelloWebError",
    "ListenerError",
    "PortInUseError",
]
