"""Server configuration.

ServerConfig is a frozen dataclass, immutable after creation::

    config = ServerConfig(port=8080, content_root="site", strict=True)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Runtime settings for a PageServer. All fields have defaults."""

    # Network
    host: str = "127.0.0.1"
    port: int = 9000

    # Content
    content_root: str | Path = "."
    not_found_page: str = "pages/404.html"

    # Legacy mode keeps 200 for missing pages, a headerless reply for unknown
    # API paths and "OK" as every reason phrase. Strict mode corrects all three.
    strict: bool = False

    # Limits
    max_connections: int = 100
    max_header_bytes: int = 64 * 1024
    request_timeout: float | None = 30.0

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            raise ConfigurationError(f"port out of range: {self.port}")
        if self.max_connections < 1:
            raise ConfigurationError("max_connections must be at least 1")
        if self.max_header_bytes < 16:
            raise ConfigurationError("max_header_bytes is too small")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError("request_timeout must be positive or None")
