"""pagewire exception hierarchy.

Shared by the loader, the dispatcher and the connection handler so every
module raises and catches the same types.
"""


class PagewireError(Exception):
    """Base for all pagewire-specific errors."""


class ConfigurationError(PagewireError):
    """Raised when a ServerConfig value is invalid."""


class BadRequestLine(PagewireError, ValueError):
    """The request line could not be split into method and path."""


class ContentNotFound(PagewireError, LookupError):
    """Neither the requested content nor its fallback exists in the store."""

    def __init__(self, key: str):
        super().__init__(f"content not found: {key}")
        self.key = key


class TableFrozenError(PagewireError, RuntimeError):
    """Raised when the API table is mutated after the server started."""
