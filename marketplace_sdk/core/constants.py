"""Core constants: gateway paths and header names.

Single source of truth for the files-proxy HTTP contract used by the
sync and async clients.
"""

# Files proxy routes (relative to the gateway base URL)
FILES_PROXY_PREFIX = "/api/files-proxy"
STORE_BYTES_PATH = f"{FILES_PROXY_PREFIX}/store-bytes"
BY_KEY_PATH = f"{FILES_PROXY_PREFIX}/by-key"
PRESIGNED_URL_PATH = f"{BY_KEY_PATH}/presigned-url"
EXISTS_PATH = f"{BY_KEY_PATH}/exists"
SIZE_PATH = f"{BY_KEY_PATH}/size"
DOWNLOAD_PATH = f"{BY_KEY_PATH}/download"

# Upload metadata headers
HEADER_FILE_PATH = "X-File-Path"
HEADER_SOURCE_SERVICE = "X-Source-Service"
HEADER_ORG_ID = "X-Org-Id"
HEADER_REFERENCE_ID = "X-Reference-Id"
HEADER_ORIGINAL_FILENAME = "X-Original-Filename"

DEFAULT_SOURCE_SERVICE = "unknown"

# Envelope wrapper key
ENVELOPE_DATA_KEY = "data"
