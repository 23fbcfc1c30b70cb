"""ASGI handler — answers every request with one of two documents.

The only component that touches raw ASGI scopes.  The handler owns the
loaded Documents and nothing else, so requests can run concurrently
without coordination.
"""

from spaserve._internal.asgi import Receive, Scope, Send
from spaserve.documents import Documents
from spaserve.http.response import Response
from spaserve.server.sender import send_response

ROOT_PATH = "/"


class SPAHandler:
    """ASGI 3.0 application serving a single-page app's HTML.

    ``/`` gets the index document with status 200.  Every other path
    gets the not-found document with status 404.  Method, query string,
    and request headers are not consulted.

    Usage::

        handler = SPAHandler(load_documents(config))
        response = handler.respond("/")
    """

    __slots__ = ("_index", "_not_found", "documents")

    def __init__(self, documents: Documents) -> None:
        self.documents = documents
        # Responses are built once; every request reuses the same values
        self._index = Response(body=documents.index)
        self._not_found = Response(body=documents.not_found).with_status(404)

    def respond(self, path: str) -> Response:
        """Return the response for a request path."""
        if path == ROOT_PATH:
            return self._index
        return self._not_found

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan directly, then answers HTTP scopes.  Other scope
        types (websocket, server-specific worker events) are ignored.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        await send_response(self.respond(scope["path"]), send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge lifespan events.

        Documents are loaded before the handler exists, so startup has
        nothing left to fail on.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
