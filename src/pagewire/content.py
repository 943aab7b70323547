"""Content stores and the loader that resolves logical paths against them.

Store layout::

    pages/<path>.html     page body fragments
    pages/404.html        fallback fragment for missing pages
    js/pages/<subpath>    JavaScript assets
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable

import anyio

from .errors import ContentNotFound


logger = logging.getLogger("pagewire.content")


@runtime_checkable
class ContentStore(Protocol):
    """Byte lookup by logical key. ``None`` means not found."""

    async def read(self, key: str) -> bytes | None: ...


class FileContentStore:
    """Filesystem-backed store rooted at ``root``.

    Reads run in a worker thread so a slow disk only stalls the connection
    that asked for the file.
    """

    def __init__(self, root: str | Path = "."):
        self._root = anyio.Path(root)

    @property
    def root(self) -> anyio.Path:
        return self._root

    async def read(self, key: str) -> bytes | None:
        try:
            return await (self._root / key).read_bytes()
        except OSError:
            return None


class MemoryContentStore:
    """In-memory store, mostly for tests and embedding."""

    def __init__(self, files: Mapping[str, bytes | str] | None = None):
        self._files: dict[str, bytes] = {}
        for key, value in (files or {}).items():
            self.put(key, value)

    def put(self, key: str, value: bytes | str) -> None:
        if isinstance(value, str):
            value = value.encode("utf-8")
        self._files[key] = value

    async def read(self, key: str) -> bytes | None:
        return self._files.get(key)


def page_key(path: str) -> str:
    return f"pages{path}.html"


def script_key(subpath: str) -> str:
    return f"js/pages/{subpath}"


@dataclass(frozen=True, slots=True)
class Page:
    fragment: str
    found: bool


class ContentLoader:
    """Resolves pages and scripts, substituting fallbacks on a miss."""

    def __init__(self, store: ContentStore, *, not_found_page: str = "pages/404.html"):
        self._store = store
        self._not_found_page = not_found_page

    @property
    def store(self) -> ContentStore:
        return self._store

    async def _read_text(self, key: str) -> str | None:
        data = await self._store.read(key)
        if data is None:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("%s is not valid UTF-8, treating as missing", key)
            return None

    async def load_page(self, path: str) -> Page:
        """Load the fragment for ``path``, falling back to the not-found page.

        Raises ContentNotFound when the fallback is missing too.
        """
        key = page_key(path)
        logger.debug("page %s", key)

        text = await self._read_text(key)
        if text is not None:
            return Page(fragment=text, found=True)

        fallback = await self._read_text(self._not_found_page)
        if fallback is None:
            raise ContentNotFound(self._not_found_page)
        return Page(fragment=fallback, found=False)

    async def load_script(self, subpath: str) -> bytes:
        """Load a JavaScript asset. A miss or invalid UTF-8 yields an empty body."""
        key = script_key(subpath)
        logger.debug("script %s", key)
        text = await self._read_text(key)
        return text.encode("utf-8") if text is not None else b""
