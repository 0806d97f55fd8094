"""hello-web Web Server entry point."""

import logging
import sys

from hello_web.config import get_settings
from hello_web.exceptions import ListenerError
from hello_web.logger import Logger, session_logger
from hello_web.web_server import (
    HelloWebServer,
    announce_listening,
    bind_listener,
    create_server,
    serve,
)

logger: Logger = session_logger


def main() -> None:
    settings = get_settings()
    host, port = settings.server.host, settings.server.port

    web_server = HelloWebServer()

    try:
        sock = bind_listener(host, port)
    except ListenerError as e:
        logger.error(
            "Failed to start web server",
            error=e.message,
            error_code=e.code,
            details=e.details,
        )
        sys.exit(1)

    announce_listening(logger, sock.getsockname()[1])

    try:
        server = create_server(
            web_server.get_app(),
            sock,
            log_level=logging.getLevelName(settings.log.level).lower(),
        )
        serve(server, sock)
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        sys.exit(0)
    finally:
        sock.close()


if __name__ == "__main__":
    main()
