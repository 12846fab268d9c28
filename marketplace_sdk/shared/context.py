"""Caller identity context using contextvars.

Thread-safe, async-safe storage for the bearer token of the caller the
host app is currently serving. The host's auth layer (or
BearerTokenContextMiddleware) sets it; the files client reads it through a
TokenProvider injected at construction.

Usage:
    set_current_token(jwt_string)
    token = get_current_token()
    clear_current_token()
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar

# Zero-argument callable returning the caller's bearer token, or None.
TokenProvider = Callable[[], str | None]

_current_token: ContextVar[str | None] = ContextVar("current_bearer_token", default=None)


def set_current_token(token: str | None) -> None:
    """Set the bearer token for the current request/task."""
    _current_token.set(token or None)


def clear_current_token() -> None:
    """Clear the bearer token for the current request/task."""
    _current_token.set(None)


def get_current_token() -> str | None:
    """Return the current bearer token, or None if unauthenticated.

    This is the default TokenProvider for the files clients.
    """
    return _current_token.get()


@contextmanager
def bearer_token(token: str | None) -> Iterator[None]:
    """Run a block with the given bearer token as caller identity.

    Restores the previous value on exit, so it nests safely inside requests.
    """
    previous = _current_token.set(token or None)
    try:
        yield
    finally:
        _current_token.reset(previous)


def static_token_provider(token: str) -> TokenProvider:
    """Return a TokenProvider that always yields the same token (service accounts, scripts)."""
    return lambda: token
