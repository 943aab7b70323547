"""Path classification.

A request path maps to exactly one of three route decisions::

    /js/<rest>   -> StaticJs(rest)
    /api/<rest>  -> Api(rest)
    anything     -> StaticHtml(path)

The bare root ``/`` is treated as ``/index``.
"""

from __future__ import annotations

from dataclasses import dataclass


INDEX_PATH = "/index"


@dataclass(frozen=True, slots=True)
class StaticJs:
    subpath: str


@dataclass(frozen=True, slots=True)
class Api:
    subpath: str


@dataclass(frozen=True, slots=True)
class StaticHtml:
    path: str


RouteDecision = StaticJs | Api | StaticHtml


def route(path: str) -> RouteDecision:
    if path == "/":
        path = INDEX_PATH

    prefix, sep, rest = path[1:].partition("/")
    match (prefix, sep):
        case ("js", "/"):
            return StaticJs(rest)
        case ("api", "/"):
            return Api(rest)
        case _:
            return StaticHtml(path)
