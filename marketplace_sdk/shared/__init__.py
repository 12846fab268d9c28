"""Shared utilities: caller identity context and telemetry.

Used by infrastructure and middleware. No gateway logic.
"""

from marketplace_sdk.shared.context import (
    TokenProvider,
    bearer_token,
    clear_current_token,
    get_current_token,
    set_current_token,
    static_token_provider,
)

__all__ = [
    "TokenProvider",
    "bearer_token",
    "clear_current_token",
    "get_current_token",
    "set_current_token",
    "static_token_provider",
]
