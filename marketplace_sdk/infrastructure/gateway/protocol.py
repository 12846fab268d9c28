"""Files client protocol (DIP). Implementations: GatewayFileClient, AsyncGatewayFileClient."""

from typing import BinaryIO, Protocol, runtime_checkable

from marketplace_sdk.domain.value_objects import ExistenceStatus


@runtime_checkable
class FilesClientProtocol(Protocol):
    """Protocol for blocking file storage clients used by marketplace apps."""

    def upload_bytes(
        self,
        data: bytes,
        content_type: str,
        key: str,
        org_id: str | None = None,
        source_service: str | None = None,
        reference_id: str | None = None,
        original_filename: str | None = None,
    ) -> None:
        """Store bytes under key."""
        ...

    def upload_stream(
        self,
        stream: BinaryIO,
        content_length: int | None,
        content_type: str,
        key: str,
        org_id: str | None = None,
        source_service: str | None = None,
        reference_id: str | None = None,
        original_filename: str | None = None,
    ) -> None:
        """Read the whole stream, then store it under key."""
        ...

    def get_presigned_url(self, key: str, expiry_seconds: int) -> str | None:
        """Return a time-limited download URL, or None if the gateway gave none."""
        ...

    def exists(self, key: str) -> bool:
        """Return True if the object exists; False on absence or any error."""
        ...

    def check_exists(self, key: str) -> ExistenceStatus:
        """Return PRESENT, ABSENT or INDETERMINATE."""
        ...

    def get_object_size(self, key: str) -> int:
        """Return size in bytes; 0 when unknown."""
        ...

    def delete(self, key: str) -> None:
        """Delete the object at key."""
        ...

    def download(self, key: str) -> bytes:
        """Return the object's content."""
        ...


@runtime_checkable
class AsyncFilesClientProtocol(Protocol):
    """Coroutine counterpart of FilesClientProtocol."""

    async def upload_bytes(
        self,
        data: bytes,
        content_type: str,
        key: str,
        org_id: str | None = None,
        source_service: str | None = None,
        reference_id: str | None = None,
        original_filename: str | None = None,
    ) -> None: ...

    async def upload_stream(
        self,
        stream: BinaryIO,
        content_length: int | None,
        content_type: str,
        key: str,
        org_id: str | None = None,
        source_service: str | None = None,
        reference_id: str | None = None,
        original_filename: str | None = None,
    ) -> None: ...

    async def get_presigned_url(self, key: str, expiry_seconds: int) -> str | None: ...

    async def exists(self, key: str) -> bool: ...

    async def check_exists(self, key: str) -> ExistenceStatus: ...

    async def get_object_size(self, key: str) -> int: ...

    async def delete(self, key: str) -> None: ...

    async def download(self, key: str) -> bytes: ...
