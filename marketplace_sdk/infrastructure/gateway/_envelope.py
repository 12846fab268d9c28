"""Files-proxy JSON envelope decoding.

The gateway answers either ``{"data": {...}}`` or with fields at top level.
Fallback order is fixed: when ``data`` is a mapping the field is read from
it only; otherwise the top-level field is used.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any

import httpx

from marketplace_sdk.core.constants import ENVELOPE_DATA_KEY
from marketplace_sdk.infrastructure.exceptions import GatewayResponseError


def decode_json_body(response: httpx.Response) -> Any | None:
    """Return the decoded JSON body, or None when the body is empty."""
    raw = response.content
    if not raw or not raw.strip():
        return None
    try:
        return json.loads(raw.decode())
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise GatewayResponseError(response.request.url.path, f"invalid JSON: {e}") from e


def unwrap_envelope_field(payload: Any, field: str) -> Any | None:
    """Return ``field`` from an enveloped or flat payload, or None if missing."""
    if not isinstance(payload, Mapping):
        return None
    data = payload.get(ENVELOPE_DATA_KEY)
    if isinstance(data, Mapping):
        return data.get(field)
    return payload.get(field)


def parse_presigned_url(response: httpx.Response) -> str | None:
    url = unwrap_envelope_field(decode_json_body(response), "url")
    return url if isinstance(url, str) else None


def parse_object_size(response: httpx.Response) -> int:
    """Return the ``size`` field; 0 when the body or the field is absent.

    Raises GatewayResponseError unless the size is a finite, non-negative number.
    """
    size = unwrap_envelope_field(decode_json_body(response), "size")
    if size is None:
        return 0
    # bool is an int subclass but never a valid size
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        raise GatewayResponseError(
            response.request.url.path, f"size is not a number: {size!r}"
        )
    if isinstance(size, float) and not math.isfinite(size):
        raise GatewayResponseError(
            response.request.url.path, f"size is not finite: {size!r}"
        )
    if size < 0:
        raise GatewayResponseError(response.request.url.path, f"size is negative: {size!r}")
    return int(size)
