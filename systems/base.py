"""
Async base class for S3-compatible object storage systems.
"""

import logging
from typing import AsyncIterator, BinaryIO, Optional, Union

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

# aiohttp is a required dependency of aioboto3, so it's always available
from aiohttp.client_exceptions import ClientPayloadError

from common.errors import RequestFailedError
from configuration import (
    CONNECT_TIMEOUT_SECONDS,
    DOWNLOAD_CHUNK_BYTES,
    HTTP_NOT_FOUND_STATUS,
    MAX_RETRIES,
    REQUEST_TIMEOUT_SECONDS,
)
from systems.interface import ObjectStore

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = {"404", "NoSuchBucket", "NoSuchKey", "NotFound"}


def _request_failed(error: Union[ClientError, BotoCoreError]) -> RequestFailedError:
    """Translate a botocore error into the store's request-failed error.

    Transport failures (connection, timeout) carry no HTTP status.
    """
    if isinstance(error, BotoCoreError):
        logger.debug(f"Transport error {type(error).__name__}: {error}")
        return RequestFailedError(str(error), type(error).__name__, 0)
    error_info = error.response.get('Error', {})
    error_code = error_info.get('Code', 'Unknown')
    status_code = error.response.get('ResponseMetadata', {}).get('HTTPStatusCode', 0)
    message = error_info.get('Message') or str(error)
    logger.debug(f"S3 error {error_code} (HTTP {status_code}): {message}")
    return RequestFailedError(message, error_code, status_code)


def _is_not_found(error: ClientError) -> bool:
    error_code = error.response.get('Error', {}).get('Code', '')
    status_code = error.response.get('ResponseMetadata', {}).get('HTTPStatusCode', 0)
    return status_code == HTTP_NOT_FOUND_STATUS or error_code in _NOT_FOUND_CODES


class ObjectStorageSystem(ObjectStore):
    """Async object store backed by an aioboto3 S3 client."""

    def __init__(
        self,
        endpoint: Optional[str],
        credentials: dict,
        addressing_style: str = "virtual",
        location_constraint: Optional[str] = None,
    ):
        self.endpoint = endpoint or None
        self.credentials = credentials
        self.location_constraint = location_constraint

        self._config = self._create_config(addressing_style)

        self.session = aioboto3.Session(
            aws_access_key_id=credentials.get("access_key_id") or None,
            aws_secret_access_key=credentials.get("secret_access_key") or None,
            region_name=credentials.get("region_name", "auto"),
        )

        self.client = None

        logger.debug(f"Initialized async storage for {self.endpoint or 'default AWS endpoint'}")

    def _create_config(self, addressing_style: str) -> Config:
        """Create the botocore client config."""
        return Config(
            connect_timeout=CONNECT_TIMEOUT_SECONDS,
            read_timeout=REQUEST_TIMEOUT_SECONDS,
            retries={
                'max_attempts': MAX_RETRIES,
                'mode': 'standard',
            },
            s3={
                'addressing_style': addressing_style,
            },
            tcp_keepalive=True,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        self.client = await self.session.client(
            "s3",
            endpoint_url=self.endpoint,
            config=self._config,
        ).__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.client:
            await self.client.__aexit__(exc_type, exc_val, exc_tb)
            self.client = None

    def _require_client(self):
        if not self.client:
            raise RuntimeError("Storage client not initialized. Use async context manager.")
        return self.client

    async def ensure_container(self, container: str) -> None:
        client = self._require_client()
        try:
            await client.head_bucket(Bucket=container)
            return
        except ClientError as e:
            if not _is_not_found(e):
                raise _request_failed(e) from e
        except BotoCoreError as e:
            raise _request_failed(e) from e

        create_args = {"Bucket": container}
        if self.location_constraint:
            create_args["CreateBucketConfiguration"] = {
                "LocationConstraint": self.location_constraint
            }
        try:
            await client.create_bucket(**create_args)
            logger.info(f"Created container {container}")
        except ClientError as e:
            # Someone else created it between the lookup and the create
            if e.response.get('Error', {}).get('Code') == 'BucketAlreadyOwnedByYou':
                return
            raise _request_failed(e) from e
        except BotoCoreError as e:
            raise _request_failed(e) from e

    async def put_object(self, container: str, name: str, body: Union[bytes, BinaryIO]) -> None:
        client = self._require_client()
        try:
            if isinstance(body, (bytes, bytearray)):
                await client.put_object(Bucket=container, Key=name, Body=bytes(body))
            else:
                await client.upload_fileobj(body, container, name)
        except (ClientError, BotoCoreError) as e:
            raise _request_failed(e) from e

    async def list_objects(self, container: str) -> AsyncIterator[str]:
        client = self._require_client()
        paginator = client.get_paginator('list_objects_v2')
        try:
            async for page in paginator.paginate(Bucket=container):
                for item in page.get('Contents', []):
                    yield item['Key']
        except (ClientError, BotoCoreError) as e:
            raise _request_failed(e) from e

    async def get_object(self, container: str, name: str) -> AsyncIterator[bytes]:
        client = self._require_client()
        try:
            response = await client.get_object(Bucket=container, Key=name)
        except (ClientError, BotoCoreError) as e:
            raise _request_failed(e) from e
        return self._iter_body(response["Body"], name)

    async def _iter_body(self, body, name: str) -> AsyncIterator[bytes]:
        """Read a response body in fixed-size chunks."""
        async with body as stream:
            try:
                while True:
                    chunk = await stream.read(DOWNLOAD_CHUNK_BYTES)
                    if not chunk:
                        break
                    yield chunk
            except ClientPayloadError as e:
                raise RequestFailedError(
                    f"Incomplete payload for {name}: connection closed before all data was received"
                ) from e
            except BotoCoreError as e:
                raise _request_failed(e) from e

    async def object_exists(self, container: str, name: str) -> bool:
        client = self._require_client()
        try:
            await client.head_object(Bucket=container, Key=name)
            return True
        except ClientError as e:
            if _is_not_found(e):
                return False
            raise _request_failed(e) from e
        except BotoCoreError as e:
            raise _request_failed(e) from e

    async def delete_object(self, container: str, name: str) -> None:
        client = self._require_client()
        try:
            await client.delete_object(Bucket=container, Key=name)
        except (ClientError, BotoCoreError) as e:
            raise _request_failed(e) from e
