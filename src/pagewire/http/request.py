"""Request head reading and request line parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass

import anyio
from anyio.abc import ByteReceiveStream

from ..errors import BadRequestLine


_BLANK_LINE = re.compile(rb"\r?\n\r?\n")


@dataclass(frozen=True, slots=True)
class HttpRequest:
    method: str
    path: str
    version: str = ""


async def read_head(stream: ByteReceiveStream, max_bytes: int) -> bytes:
    """Read up to and including the blank line that ends the header block.

    Lines may end in CRLF or a bare LF. Returns whatever arrived if the peer
    closes the stream first. Headers are drained but never interpreted.
    """
    buf = bytearray()
    while True:
        blank = _BLANK_LINE.search(buf)
        end = blank.end() if blank is not None else len(buf)
        if end > max_bytes:
            raise BadRequestLine("request head too large")
        if blank is not None:
            return bytes(buf[:end])
        try:
            buf.extend(await stream.receive(4096))
        except anyio.EndOfStream:
            return bytes(buf)


def parse_request_line(head: bytes | str) -> HttpRequest:
    """Parse the first line of ``head``.

    Only the path is required: the line must carry at least two
    whitespace-separated tokens. The version is optional.
    """
    if isinstance(head, bytes):
        head = head.decode("iso-8859-1")

    line = head.split("\n", 1)[0].rstrip("\r")
    parts = line.split()
    if len(parts) < 2:
        raise BadRequestLine(f"invalid request line: {line!r}")

    method, path = parts[0], parts[1]
    version = parts[2] if len(parts) > 2 else ""
    return HttpRequest(method=method, path=path, version=version)
