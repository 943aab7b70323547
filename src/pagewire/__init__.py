"""Prefix-routing HTTP server for static pages, scripts and API handlers."""

from .api import ApiHandler, ApiTable
from .config import ServerConfig
from .content import ContentLoader, ContentStore, FileContentStore, MemoryContentStore
from .errors import (
    BadRequestLine,
    ConfigurationError,
    ContentNotFound,
    PagewireError,
    TableFrozenError,
)
from .html import compose
from .http import build_response, parse_request_line, parse_response
from .routing import Api, RouteDecision, StaticHtml, StaticJs, route
from .server import PageServer

__all__ = [
    # Server
    "PageServer",
    "ServerConfig",
    # Routing
    "route",
    "RouteDecision",
    "StaticJs",
    "Api",
    "StaticHtml",
    # Content
    "ContentStore",
    "ContentLoader",
    "FileContentStore",
    "MemoryContentStore",
    "compose",
    # API
    "ApiTable",
    "ApiHandler",
    # Wire
    "build_response",
    "parse_request_line",
    "parse_response",
    # Errors
    "PagewireError",
    "BadRequestLine",
    "ConfigurationError",
    "ContentNotFound",
    "TableFrozenError",
]
