"""Core: config and gateway contract constants."""

from marketplace_sdk.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
