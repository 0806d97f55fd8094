"""TCP listener setup and serving for the hello-web ASGI app."""

import errno
import socket
from typing import Any

import uvicorn

from hello_web.exceptions import ListenerError, PortInUseError
from hello_web.logger import Logger


def bind_listener(host: str, port: int, backlog: int = 2048) -> socket.socket:
    """
    Create a TCP socket bound to ``host:port`` and start listening on it.

    Args:
        host: Address to bind, IPv4 or IPv6
        port: TCP port
        backlog: Pending connection queue length, uvicorn's default

    Returns:
        The listening socket, ready to hand to uvicorn

    Raises:
        PortInUseError: If another socket already holds the port
        ListenerError: For any other bind failure
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family=family, type=socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen(backlog)
    except OSError as e:
        sock.close()
        if e.errno == errno.EADDRINUSE:
            raise PortInUseError(host, port) from e
        raise ListenerError(
            f"Failed to bind {host}:{port}",
            details={"host": host, "port": port, "error": str(e)},
        ) from e
    return sock


def announce_listening(logger: Logger, port: int) -> None:
    """Emit the startup line once the listener accepts connections."""
    logger.info(f"app listening on port {port}", port=port)


def create_server(app: Any, sock: socket.socket, log_level: str = "info") -> uvicorn.Server:
    """Build a uvicorn server for ``app`` configured with the socket's address."""
    host, port = sock.getsockname()[:2]
    config = uvicorn.Config(app, host=host, port=port, log_level=log_level)
    return uvicorn.Server(config)


def serve(server: uvicorn.Server, sock: socket.socket) -> None:
    """Run ``server`` on an already listening socket until it exits."""
    server.run(sockets=[sock])
