"""
Storefront API — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions raised by the routing layer.
How:   Each exception carries a message and an optional context dict.
       The message is safe to show a client; the context is for logs.
Who:   Raised by storefront.routing; caught by callers of Router.handle_request
       and by the catch-all handler registered in main.py.

Exception Hierarchy:
    StorefrontError (base)
    ├── RouteNotFoundError        → 404 Not Found
    └── InvalidRoutePatternError  → raised at startup, never during a request
"""

from typing import Any, Dict, Optional


class StorefrontError(Exception):
    """
    Base exception for all Storefront application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged, not returned to clients)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class RouteNotFoundError(StorefrontError):
    """
    Raised when no registered route matches a request's method and path.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        method: str,
        path: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["method"] = method
        ctx["path"] = path
        super().__init__(message=f"No route matches {method} {path}", context=ctx)
        self.method = method
        self.path = path


class InvalidRoutePatternError(StorefrontError):
    """
    Raised when a route is registered with a malformed method or pattern.

    When:    Pattern not starting with '/', a ':' segment without a name,
             a parameter name used twice, or an empty method.
    """

    def __init__(
        self,
        pattern: str,
        reason: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["pattern"] = pattern
        ctx["reason"] = reason
        super().__init__(
            message=f"Invalid route pattern '{pattern}': {reason}",
            context=ctx,
        )
        self.pattern = pattern
        self.reason = reason
