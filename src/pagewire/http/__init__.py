"""HTTP wire helpers: request line parsing and response construction."""

from .request import HttpRequest, parse_request_line, read_head
from .response import (
    STATUS_TEXT,
    ParsedResponse,
    build_response,
    parse_response,
    reason_phrase,
)

__all__ = [
    "HttpRequest",
    "parse_request_line",
    "read_head",
    "STATUS_TEXT",
    "ParsedResponse",
    "build_response",
    "parse_response",
    "reason_phrase",
]
