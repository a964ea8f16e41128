from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_LOTTERY = "lotofacil"


class RouteKind(str, Enum):
    DISCOVERY = "discovery"
    API = "api"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Route:
    kind: RouteKind
    full_view: bool = False
    lottery: str | None = None
    # None means the latest contest
    contest: str | None = None


def split_path(path: str) -> list[str]:
    return [segment for segment in path.split("/") if segment]


def parse_route(path: str) -> Route:
    """Resolve a raw request path into the route the gateway serves.

    ``/v1/full/...`` selects the full view and shifts the lottery and contest
    segments one position to the right.
    """
    segments = split_path(path)
    if not segments:
        return Route(kind=RouteKind.DISCOVERY)
    if segments[0] != "v1":
        return Route(kind=RouteKind.NOT_FOUND)

    full_view = len(segments) > 1 and segments[1] == "full"
    base = 2 if full_view else 1
    lottery = segments[base] if len(segments) > base else DEFAULT_LOTTERY
    contest = segments[base + 1] if len(segments) > base + 1 else None
    return Route(kind=RouteKind.API, full_view=full_view, lottery=lottery, contest=contest)
