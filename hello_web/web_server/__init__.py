from hello_web.web_server.listener import (
    announce_listening,
    bind_listener,
    create_server,
    serve,
)
from hello_web.web_server.web_server import ROOT_BODY, HelloWebServer

__all__ = [
    "ROOT_BODY",
    "HelloWebServer",
    "announce_listening",
    "bind_listener",
    "create_server",
    "serve",
]
