"""Prefix-routing HTTP server built on AnyIO sockets.

Each connection carries exactly one request:

- the request head is read (headers are drained, not parsed)
- the path is classified into a StaticJs, Api or StaticHtml route
- the matching responder builds the full response bytes
- the bytes are written and the connection is closed

Connections run as tasks of the listener's TaskGroup. A CapacityLimiter caps
how many are handled at once; anything over the cap is answered with 503.
"""

from __future__ import annotations

import logging

import anyio
from anyio.abc import SocketAttribute, SocketStream, TaskStatus

from .api import ApiTable
from .config import ServerConfig
from .content import ContentLoader, ContentStore, FileContentStore
from .errors import BadRequestLine, ContentNotFound
from .html import compose
from .http.request import parse_request_line, read_head
from .http.response import build_response, reason_phrase
from .routing import Api, StaticHtml, StaticJs, route


logger = logging.getLogger("pagewire.server")

_BUILTIN_NOT_FOUND = "<h1>404 Not Found</h1>"


class PageServer:
    """HTTP server for pages, scripts and API handlers.

    The API table is frozen when serve() starts; register handlers first.
    """

    def __init__(
        self,
        config: ServerConfig | None = None,
        *,
        store: ContentStore | None = None,
        api: ApiTable | None = None,
    ):
        self.config = config or ServerConfig()
        self.api = api if api is not None else ApiTable()
        if store is None:
            store = FileContentStore(self.config.content_root)
        self.loader = ContentLoader(store, not_found_page=self.config.not_found_page)
        self._limiter: anyio.CapacityLimiter | None = None

    def _response(self, status: int, content_type: str, body: str | bytes) -> bytes:
        reason = reason_phrase(status) if self.config.strict else None
        return build_response(status, content_type, body, reason=reason)

    # --- Responders ---

    async def render_html(self, path: str) -> bytes:
        try:
            page = await self.loader.load_page(path)
        except ContentNotFound:
            if not self.config.strict:
                raise
            logger.error("not-found page %s is missing", self.config.not_found_page)
            return self._response(404, "text/html", compose(_BUILTIN_NOT_FOUND))

        status = 200 if page.found or not self.config.strict else 404
        document = compose(page.fragment, f"js{path}.js")
        return self._response(status, "text/html", document)

    async def render_js(self, subpath: str) -> bytes:
        body = await self.loader.load_script(subpath)
        return self._response(200, "application/javascript", body)

    async def dispatch(self, subpath: str) -> bytes:
        handler = self.api.lookup(subpath)
        if handler is None:
            logger.debug("no API handler for %r", subpath)
            if self.config.strict:
                return self._response(404, "text/plain", "not found")
            return b""
        body = await handler(subpath)
        return self._response(200, handler.content_type, body)

    async def respond(self, path: str) -> bytes:
        """Route ``path`` and return the full response bytes."""
        match route(path):
            case StaticJs(subpath):
                return await self.render_js(subpath)
            case Api(subpath):
                return await self.dispatch(subpath)
            case StaticHtml(page_path):
                return await self.render_html(page_path)

    async def handle_request(self, head: bytes) -> bytes:
        request = parse_request_line(head)
        return await self.respond(request.path)

    # --- Connections ---

    async def handle_client(self, stream: SocketStream) -> None:
        async with stream:
            try:
                if self._limiter is not None:
                    try:
                        self._limiter.acquire_nowait()
                    except anyio.WouldBlock:
                        logger.warning("connection limit reached, rejecting client")
                        await stream.send(self._response(503, "text/plain", "server busy"))
                        return
                    try:
                        await self._serve_connection(stream)
                    finally:
                        self._limiter.release()
                else:
                    await self._serve_connection(stream)
            except (anyio.BrokenResourceError, anyio.ClosedResourceError, OSError) as e:
                logger.debug("connection dropped: %r", e)

    async def _serve_connection(self, stream: SocketStream) -> None:
        head = b""
        with anyio.move_on_after(self.config.request_timeout) as scope:
            head = await self._read_request(stream)
        if scope.cancelled_caught:
            logger.warning("timed out waiting for request head")
            return
        if not head:
            return

        try:
            response = await self.handle_request(head)
        except BadRequestLine as e:
            logger.warning("bad request: %s", e)
            if not self.config.strict:
                return
            response = self._response(400, "text/plain", f"bad request: {e}")
        except ContentNotFound as e:
            logger.error("%s", e)
            return
        except Exception:
            logger.exception("request handling failed")
            if not self.config.strict:
                return
            response = self._response(500, "text/plain", "server error")

        if response:
            await stream.send(response)

    async def _read_request(self, stream: SocketStream) -> bytes:
        try:
            return await read_head(stream, self.config.max_header_bytes)
        except BadRequestLine as e:
            logger.warning("bad request: %s", e)
            if self.config.strict:
                await stream.send(self._response(400, "text/plain", f"bad request: {e}"))
            return b""

    # --- Lifecycle ---

    async def serve(self, *, task_status: TaskStatus[int] = anyio.TASK_STATUS_IGNORED) -> None:
        """Listen and serve until cancelled.

        Reports the bound port through ``task_status``, so a test can do
        ``port = await tg.start(server.serve)`` with ``port=0``.
        """
        self.api.freeze()
        self._limiter = anyio.CapacityLimiter(self.config.max_connections)

        listener = await anyio.create_tcp_listener(
            local_host=self.config.host, local_port=self.config.port
        )
        port = listener.extra(SocketAttribute.local_port)
        logger.info(
            "serving %d API handler(s) on http://%s:%d", len(self.api), self.config.host, port
        )
        async with listener:
            task_status.started(port)
            await listener.serve(self.handle_client)

    def run(self) -> None:
        anyio.run(self.serve)
