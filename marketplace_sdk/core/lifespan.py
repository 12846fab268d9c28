"""Host app lifespan: open and close the shared async files client.

Use directly as FastAPI(lifespan=files_client_lifespan), or enter it from
the host's own lifespan.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from marketplace_sdk.core.config import get_settings
from marketplace_sdk.infrastructure.gateway.factory import FilesClientFactory
from marketplace_sdk.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def files_client_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create app.state.files_client on startup; close it on shutdown.

    An already-set app.state.files_client (e.g. a test stub) is kept and not closed.
    """
    injected = getattr(app.state, "files_client", None)
    if injected is None:
        app.state.files_client = FilesClientFactory.create_async_files_client(get_settings())
        logger.info("Gateway files client opened: %s", app.state.files_client.base_url)

    yield

    if injected is None and getattr(app.state, "files_client", None) is not None:
        await app.state.files_client.aclose()
        app.state.files_client = None
        logger.info("Gateway files client closed")
