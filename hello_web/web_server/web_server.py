"""hello-web Web Server - a single static HTML route."""

from typing import Any

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse
from starlette.routing import Route


ROOT_BODY = '<h1>express GET "/" hell yeh </h1>'


async def _method_not_allowed_as_not_found(
    request: Request, exc: HTTPException
) -> PlainTextResponse:
    # A known path with the wrong method is answered like an unknown path
    return PlainTextResponse("Not Found", status_code=404)


class HelloWebServer:
    """Web server answering ``GET /`` with a fixed HTML fragment."""

    def __init__(self):
        self.app = self._create_app()

    def _create_app(self) -> Starlette:
        """Create the Starlette application."""
        routes = [
            Route("/", endpoint=self.root, methods=["GET"]),
        ]
        return Starlette(
            debug=False,
            routes=routes,
            exception_handlers={405: _method_not_allowed_as_not_found},
        )

    async def root(self, request: Request) -> HTMLResponse:
        """Root endpoint."""
        return HTMLResponse(ROOT_BODY)

    def get_app(self) -> Any:
        """Return the ASGI application."""
        return self.app
