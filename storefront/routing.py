"""
Storefront API — Route Table
==============================

What:  Maps an HTTP method + path pattern to a handler returning a text body.
How:   Patterns like ``/orders/:id`` are parsed once into segments at
       registration time. A request path is split into segments and compared
       against each route in registration order: literal segments must be
       equal, ``:name`` segments bind whatever non-empty segment sits there.
Who:   Route groups in storefront.routes declare their handlers on a Router;
       main.py merges the groups and mounts them on FastAPI.

Example:
    router = Router(tags=["Orders"])

    @router.get("/orders/:id")
    def show(id: str) -> str:
        return f"Order {id} Show"

    router.handle_request("GET", "/orders/42")   # "Order 42 Show"
    app.include_router(router.to_api_router())   # same route over HTTP
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import unquote

from fastapi import APIRouter, Path
from fastapi.responses import PlainTextResponse

from storefront.exceptions import InvalidRoutePatternError, RouteNotFoundError

logger = logging.getLogger(__name__)

Handler = Callable[..., str]


@dataclass(frozen=True)
class PathSegment:
    """One parsed segment of a route pattern: a literal, or a named parameter."""

    value: str
    param_name: Optional[str] = None

    @property
    def is_param(self) -> bool:
        return self.param_name is not None


@dataclass(frozen=True)
class Route:
    """An immutable route definition, created once at startup."""

    method: str
    pattern: str
    handler: Handler
    segments: Tuple[PathSegment, ...]
    name: str
    tags: Tuple[str, ...] = ()

    @property
    def param_names(self) -> List[str]:
        return [s.param_name for s in self.segments if s.is_param]

    @property
    def api_path(self) -> str:
        """The pattern in FastAPI/Starlette syntax (``/orders/{id}``)."""
        if not self.segments:
            return "/"
        return "/" + "/".join(
            "{%s}" % s.param_name if s.is_param else s.value for s in self.segments
        )

    def match(self, method: str, parts: List[str]) -> Optional[Dict[str, str]]:
        """
        Return the bound path parameters if this route accepts the request.

        ``parts`` is the already-split, percent-decoded request path.
        Returns None on any mismatch.
        """
        if method != self.method or len(parts) != len(self.segments):
            return None

        params: Dict[str, str] = {}
        for segment, part in zip(self.segments, parts):
            if segment.is_param:
                if not part:
                    return None
                params[segment.param_name] = part
            elif segment.value != part:
                return None
        return params


@dataclass(frozen=True)
class RouteMatch:
    """Result of a successful lookup."""

    route: Route
    path_params: Dict[str, str]


def _split_path(path: str) -> List[str]:
    # "/" has no segments; "/orders/" keeps its trailing empty segment
    if path == "/":
        return []
    return path[1:].split("/")


def parse_pattern(pattern: str) -> Tuple[PathSegment, ...]:
    """
    Parse a route pattern into segments.

        "/orders"      -> (PathSegment("orders"),)
        "/orders/:id"  -> (PathSegment("orders"), PathSegment(":id", "id"))

    Raises:
        InvalidRoutePatternError: pattern does not start with '/', has a bare
            ':' segment, a parameter name that is not an identifier, or
            repeats a parameter name.
    """
    if not pattern.startswith("/"):
        raise InvalidRoutePatternError(pattern, "must start with '/'")

    segments: List[PathSegment] = []
    seen = set()
    for part in _split_path(pattern):
        if not part.startswith(":"):
            segments.append(PathSegment(value=part))
            continue

        name = part[1:]
        if not name:
            raise InvalidRoutePatternError(pattern, "parameter segment has no name")
        if not name.isidentifier():
            raise InvalidRoutePatternError(
                pattern, f"parameter name '{name}' is not an identifier"
            )
        if name in seen:
            raise InvalidRoutePatternError(
                pattern, f"parameter name '{name}' is used more than once"
            )
        seen.add(name)
        segments.append(PathSegment(value=part, param_name=name))
    return tuple(segments)


class Router:
    """
    Ordered route table.

    Routes are matched in the order they were registered; the first match
    wins. Registering the same method and pattern twice is allowed, and the
    later registration is simply never reached.
    """

    def __init__(self, tags: Optional[List[str]] = None):
        self.tags = list(tags or [])
        self._routes: List[Route] = []

    @property
    def routes(self) -> List[Route]:
        return list(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def add_route(
        self,
        method: str,
        pattern: str,
        handler: Handler,
        name: Optional[str] = None,
    ) -> Route:
        """Register ``handler`` for ``method`` requests matching ``pattern``."""
        normalized_method = method.upper().strip()
        if not normalized_method:
            raise InvalidRoutePatternError(pattern, "HTTP method cannot be empty")

        route = Route(
            method=normalized_method,
            pattern=pattern,
            handler=handler,
            segments=parse_pattern(pattern),
            name=name or handler.__name__,
            tags=tuple(self.tags),
        )
        self._routes.append(route)
        logger.debug("Registered route %s %s -> %s", route.method, pattern, route.name)
        return route

    def get(self, pattern: str, name: Optional[str] = None) -> Callable[[Handler], Handler]:
        """Decorator form of ``add_route("GET", pattern, handler)``."""

        def decorator(handler: Handler) -> Handler:
            self.add_route("GET", pattern, handler, name=name)
            return handler

        return decorator

    def include(self, other: "Router") -> None:
        """Append every route of ``other``; each route keeps its own tags."""
        self._routes.extend(other.routes)

    def match(self, method: str, path: str) -> RouteMatch:
        """
        Find the first route accepting ``method`` and ``path``.

        The query string, if any, is ignored. The path is percent-decoded
        before it is split, the same way Starlette decodes ``scope["path"]``.

        Raises:
            RouteNotFoundError: nothing matches, including a known path
                requested with an unregistered method.
        """
        normalized_method = method.upper().strip()
        raw_path = path.split("?", 1)[0]
        decoded = unquote(raw_path)

        if decoded.startswith("/"):
            parts = _split_path(decoded)
            for route in self._routes:
                params = route.match(normalized_method, parts)
                if params is not None:
                    return RouteMatch(route=route, path_params=params)

        raise RouteNotFoundError(method=normalized_method, path=raw_path)

    def handle_request(self, method: str, path: str) -> str:
        """Dispatch a request in-process and return the handler's response body."""
        found = self.match(method, path)
        return found.route.handler(**found.path_params)

    def to_api_router(self) -> APIRouter:
        """
        Export the table as a FastAPI APIRouter.

        Every route becomes an endpoint returning its handler's string as a
        ``text/plain`` 200 response. Unmatched requests fall through to the
        framework's default 404; main.py turns Starlette's 405 for a known
        path into that same 404, as ``match`` does.
        """
        api_router = APIRouter()
        for route in self._routes:
            api_router.add_api_route(
                route.api_path,
                _make_endpoint(route),
                methods=[route.method],
                name=route.name,
                tags=list(route.tags),
                response_class=PlainTextResponse,
            )
        return api_router


def _make_endpoint(route: Route) -> Callable:
    """
    Wrap a handler as a FastAPI endpoint.

    FastAPI builds path parameters and the OpenAPI entry from the endpoint's
    signature, so one keyword-only ``str`` parameter is declared per ``:name``
    segment.
    """

    async def endpoint(**path_params: str) -> PlainTextResponse:
        return PlainTextResponse(route.handler(**path_params))

    endpoint.__name__ = route.name
    endpoint.__signature__ = inspect.Signature(
        [
            inspect.Parameter(
                name,
                inspect.Parameter.KEYWORD_ONLY,
                default=Path(description=f"`{name}` segment of {route.pattern}"),
                annotation=str,
            )
            for name in route.param_names
        ]
    )
    return endpoint
