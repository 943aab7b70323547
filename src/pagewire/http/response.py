"""HTTP/1.1 response construction.

Every response pagewire writes has the same shape: a status line, a
``Content-Type`` header, a ``Content-Length`` header, a blank line and the
body. No other headers are emitted and nothing is appended after the body.
"""

from __future__ import annotations

from dataclasses import dataclass


STATUS_TEXT: dict[int, str] = {
    200: "OK",
    400: "Bad Request",
    404: "Not Found",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def reason_phrase(status: int) -> str:
    return STATUS_TEXT.get(status, "OK")


def _status_line(status: int, reason: str) -> str:
    return f"HTTP/1.1 {status} {reason}\r\n"


def build_response(
    status: int,
    content_type: str,
    body: str | bytes,
    *,
    reason: str | None = None,
) -> bytes:
    """Return the full response bytes for ``body``.

    ``reason`` defaults to ``"OK"`` whatever the status code. Text bodies are
    UTF-8 encoded before ``Content-Length`` is computed, so the header always
    counts bytes, not characters.
    """
    if isinstance(body, str):
        body = body.encode("utf-8")
    head = (
        _status_line(status, reason or "OK")
        + f"Content-Type: {content_type}\r\n"
        + f"Content-Length: {len(body)}\r\n"
        + "\r\n"
    )
    return head.encode("ascii") + body


@dataclass(frozen=True, slots=True)
class ParsedResponse:
    status: int
    reason: str
    headers: dict[str, str]
    body: bytes


def parse_response(data: bytes) -> ParsedResponse:
    """Split raw response bytes back into status, headers and body.

    Header names are lower-cased. Raises ValueError when ``data`` has no
    status line or no header terminator.
    """
    head, sep, body = data.partition(b"\r\n\r\n")
    if not sep:
        raise ValueError("missing header terminator")

    lines = head.decode("iso-8859-1").split("\r\n")
    parts = lines[0].split(" ", 2)
    if len(parts) < 2 or not parts[0].startswith("HTTP/"):
        raise ValueError(f"invalid status line: {lines[0]!r}")

    headers: dict[str, str] = {}
    for line in lines[1:]:
        if ":" not in line:
            continue
        k, v = line.split(":", 1)
        headers[k.strip().lower()] = v.strip()

    reason = parts[2] if len(parts) == 3 else ""
    return ParsedResponse(status=int(parts[1]), reason=reason, headers=headers, body=body)
