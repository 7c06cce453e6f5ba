"""
Storage gateway: upload, list, download and delete blobs in a named container.

Upload, download and delete never raise; they return a GatewayResult carrying
the classified error and the text to show the operator. Upload and delete
always leave a record in the operation log; downloads only when log_reads is
set. Failures of the log write itself are not caught here.
"""

import contextlib
import logging
import os
import tempfile
from typing import AsyncIterator, Optional

from common.errors import ErrorKind, GatewayError
from persistence.operation_log import OperationLogger
from systems.interface import ObjectStore

logger = logging.getLogger(__name__)

UPLOAD_ACTION = "UploadBlob"
DOWNLOAD_ACTION = "DownloadBlob"
DELETE_ACTION = "DeleteBlob"


class GatewayResult:
    """Outcome of a gateway operation."""

    def __init__(self, message: str, error: Optional[GatewayError] = None):
        self.message = message
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self):
        status = "ok" if self.ok else self.error.kind.value
        return f"GatewayResult({status}, {self.message!r})"


def _failure_message(error: GatewayError, service_prefix: str) -> str:
    if error.is_service_failure:
        return f"{service_prefix}: {error.detail}"
    return f"An unexpected error occurred: {error.detail}"


class StorageGateway:
    """Blob operations against an object store, with operation logging."""

    def __init__(self, store: ObjectStore, operation_log: OperationLogger, log_reads: bool = False):
        self.store = store
        self.operation_log = operation_log
        self.log_reads = log_reads

    async def upload(self, container: str, source_path: str, blob_name: str) -> GatewayResult:
        """Upload a local file to a blob, creating the container if needed."""
        try:
            await self.store.ensure_container(container)
            with open(source_path, "rb") as source:
                await self.store.put_object(container, blob_name, source)
        except Exception as e:
            error = GatewayError.from_exception(e)
            logger.error(f"Upload of {source_path} to {container}/{blob_name} failed: {error}")
            await self.operation_log.record_error(UPLOAD_ACTION, container, blob_name, error.detail)
            return GatewayResult(_failure_message(error, "Error uploading file to blob"), error)

        logger.info(f"Uploaded {source_path} to {container}/{blob_name}")
        await self.operation_log.record_success(UPLOAD_ACTION, container, blob_name)
        return GatewayResult(f"File '{source_path}' uploaded to blob '{blob_name}' successfully.")

    async def list_blobs(self, container: str) -> AsyncIterator[str]:
        """Yield blob names in store order.

        Raises:
            GatewayError: If the store fails while enumerating
        """
        try:
            async for name in self.store.list_objects(container):
                yield name
        except Exception as e:
            error = GatewayError.from_exception(e)
            logger.error(f"Listing {container} failed: {error}")
            raise error from e

    async def download(
        self, container: str, blob_name: str, dest_path: str, overwrite: bool = False
    ) -> GatewayResult:
        """Stream a blob to a local file.

        An existing destination is refused before any request is made unless
        overwrite is set.
        """
        try:
            if not overwrite and os.path.exists(dest_path):
                raise GatewayError(
                    ErrorKind.DESTINATION_EXISTS,
                    "File already exists and overwrite is not enabled.",
                )
            chunks = await self.store.get_object(container, blob_name)
            await self._write_atomically(dest_path, chunks)
        except Exception as e:
            error = GatewayError.from_exception(e)
            logger.error(f"Download of {container}/{blob_name} to {dest_path} failed: {error}")
            if self.log_reads:
                await self.operation_log.record_error(DOWNLOAD_ACTION, container, blob_name, error.detail)
            return GatewayResult(_failure_message(error, "Error downloading blob"), error)

        logger.info(f"Downloaded {container}/{blob_name} to {dest_path}")
        if self.log_reads:
            await self.operation_log.record_success(DOWNLOAD_ACTION, container, blob_name)
        return GatewayResult(f"Blob '{blob_name}' downloaded to '{dest_path}' successfully.")

    async def _write_atomically(self, dest_path: str, chunks: AsyncIterator[bytes]) -> None:
        """Write chunks to a sibling temp file and move it over dest_path when complete."""
        directory = os.path.dirname(os.path.abspath(dest_path))
        fd, partial_path = tempfile.mkstemp(dir=directory, prefix=".download-", suffix=".part")
        try:
            with os.fdopen(fd, "wb") as destination:
                async for chunk in chunks:
                    destination.write(chunk)
            os.replace(partial_path, dest_path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.remove(partial_path)
            raise

    async def delete(self, container: str, blob_name: str) -> GatewayResult:
        """Delete a blob that is known to exist."""
        try:
            # The blob may still vanish between this check and the delete
            if not await self.store.object_exists(container, blob_name):
                raise GatewayError(ErrorKind.NOT_FOUND, f"Blob '{blob_name}' does not exist.")
            await self.store.delete_object(container, blob_name)
        except Exception as e:
            error = GatewayError.from_exception(e)
            logger.error(f"Delete of {container}/{blob_name} failed: {error}")
            await self.operation_log.record_error(DELETE_ACTION, container, blob_name, error.detail)
            return GatewayResult(_failure_message(error, "Error deleting blob"), error)

        logger.info(f"Deleted {container}/{blob_name}")
        await self.operation_log.record_success(DELETE_ACTION, container, blob_name)
        return GatewayResult(f"Blob '{blob_name}' deleted successfully.")
