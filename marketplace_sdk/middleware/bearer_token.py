"""Bearer token context middleware.

Copies the incoming Authorization bearer token into the caller identity
context so files clients forward it to the gateway. The context is reset
when the request finishes. Raw ASGI (no BaseHTTPMiddleware) so streaming
responses and background tasks keep working.
"""

from typing import Callable

from marketplace_sdk.shared.context import bearer_token

_BEARER_PREFIX = "bearer "


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("latin-1")
    return None


def _token_from_scope(scope: dict) -> str | None:
    auth = _get_header(scope, "Authorization")
    if not auth or not auth.lower().startswith(_BEARER_PREFIX):
        return None
    return auth[len(_BEARER_PREFIX):].strip() or None


def BearerTokenContextMiddleware(app: Callable) -> Callable:
    """Set the caller's bearer token in context for the duration of each HTTP request."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        with bearer_token(_token_from_scope(scope)):
            await app(scope, receive, send)

    return asgi_app
