"""FastAPI integration helpers."""

from marketplace_sdk.api.dependencies import get_gateway_files_client

__all__ = ["get_gateway_files_client"]
