"""Pytest configuration and fixtures

Provides shared fixtures for all tests: the web server under test, an
in-process HTTP client, and a logger that records calls instead of
writing them.
"""

import socket
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest
from starlette.testclient import TestClient

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hello_web.config import reset_settings  # noqa: E402
from hello_web.logger import Logger  # noqa: E402
from hello_web.web_server import HelloWebServer  # noqa: E402


class RecordingLogger(Logger):
    """Logger that keeps (level, message, fields) tuples in memory."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def messages(self, level: str) -> List[str]:
        return [message for lvl, message, _ in self.records if lvl == level]

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("debug", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("info", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("warning", message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.records.append(("error", message, kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self.records.append(("critical", message, kwargs))


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test start from freshly built settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def web_server():
    return HelloWebServer()


@pytest.fixture
def client(web_server):
    """In-process HTTP client for the web server's ASGI app."""
    with TestClient(web_server.get_app()) as test_client:
        yield test_client


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def occupied_port():
    """
    Hold a listening socket on a loopback port for the duration of a test.

    Yields:
        The port number that is in use
    """
    holder = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    holder.bind(("127.0.0.1", 0))
    holder.listen(1)
    try:
        yield holder.getsockname()[1]
    finally:
        holder.close()
