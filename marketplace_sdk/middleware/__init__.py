"""ASGI middleware for host apps (FastAPI / Starlette).

Add with app.add_middleware(BearerTokenContextMiddleware).
"""

from marketplace_sdk.middleware.bearer_token import BearerTokenContextMiddleware

__all__ = ["BearerTokenContextMiddleware"]
