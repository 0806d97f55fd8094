"""hello-web: a single-route HTTP server on Starlette and uvicorn."""

__version__ = "0.1.0"
