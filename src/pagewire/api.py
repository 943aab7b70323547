"""API handler table.

Handlers are registered against an API subpath before the server starts and
looked up, never mutated, while requests are served::

    table = ApiTable()

    @table.handler("ping")
    def ping(subpath: str) -> str:
        return "pong"

    table.register("time", clock, content_type="application/json")
    table.freeze()
"""

from __future__ import annotations

import inspect
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Awaitable, Callable, Mapping, Optional

import anyio.to_thread

from .errors import TableFrozenError


HandlerFunc = Callable[[str], "str | Awaitable[str]"]


@dataclass(frozen=True, slots=True)
class ApiHandler:
    """A response-producing callable and the content type of its output."""

    func: HandlerFunc
    content_type: str = "text/plain"

    async def __call__(self, subpath: str) -> str:
        if _is_async(self.func):
            return await self.func(subpath)
        # Sync handlers run in a worker thread.
        result = await anyio.to_thread.run_sync(self.func, subpath)
        if inspect.isawaitable(result):
            result = await result
        return result


def _is_async(func: HandlerFunc) -> bool:
    return inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(
        getattr(func, "__call__", None)
    )


class ApiTable:
    """
    Thread-safe API handler table.

    Writers take a lock and publish a fresh read-only snapshot; readers use the
    current snapshot without locking. Once frozen, the table rejects writes.
    """

    def __init__(self, handlers: Mapping[str, ApiHandler | HandlerFunc] | None = None):
        self._handlers: Mapping[str, ApiHandler] = MappingProxyType({})
        self._lock = threading.Lock()
        self._frozen = False
        for name, handler in (handlers or {}).items():
            self.register(name, handler)

    def register(
        self,
        name: str,
        handler: ApiHandler | HandlerFunc,
        *,
        content_type: str = "text/plain",
    ) -> bool:
        """
        Register a handler under ``name``.

        Returns True if successful, False if the name is already taken.
        """
        if not isinstance(handler, ApiHandler):
            handler = ApiHandler(handler, content_type=content_type)
        with self._lock:
            self._check_writable()
            if name in self._handlers:
                return False
            self._handlers = MappingProxyType({**self._handlers, name: handler})
            return True

    def unregister(self, name: str) -> bool:
        """
        Remove the handler registered under ``name``.

        Returns True if successful, False if name not found.
        """
        with self._lock:
            self._check_writable()
            if name not in self._handlers:
                return False
            remaining = dict(self._handlers)
            del remaining[name]
            self._handlers = MappingProxyType(remaining)
            return True

    def handler(self, name: str, *, content_type: str = "text/plain"):
        """Decorator form of register(). Duplicate names raise ValueError."""

        def decorator(func: HandlerFunc) -> HandlerFunc:
            if not self.register(name, func, content_type=content_type):
                raise ValueError(f"API handler already registered: {name!r}")
            return func

        return decorator

    def lookup(self, name: str) -> Optional[ApiHandler]:
        return self._handlers.get(name)

    def registered(self) -> list[str]:
        """Return list of all registered names."""
        return list(self._handlers.keys())

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def snapshot(self) -> Mapping[str, ApiHandler]:
        return self._handlers

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def _check_writable(self) -> None:
        if self._frozen:
            raise TableFrozenError("API table is frozen once the server is running")
