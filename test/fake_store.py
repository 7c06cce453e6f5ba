"""
In-memory object store used by the tests.
"""

import os
import sys
from typing import AsyncIterator, Dict, List, Optional, Tuple

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from common.errors import RequestFailedError
from systems.interface import ObjectStore


class FakeObjectStore(ObjectStore):
    """Keeps containers in dicts and records every call made to it."""

    def __init__(self, chunk_size: int = 4):
        self.containers: Dict[str, Dict[str, bytes]] = {}
        self.calls: List[Tuple[str, str, Optional[str]]] = []
        self.failures: Dict[Tuple[str, Optional[str]], BaseException] = {}
        self.stream_failures: Dict[str, BaseException] = {}
        self.chunk_size = chunk_size

    def fail_on(self, operation: str, error: BaseException, container: Optional[str] = None):
        """Make later calls of `operation` raise `error`, optionally only for one container."""
        self.failures[(operation, container)] = error

    def break_stream(self, name: str, error: BaseException):
        """Make downloads of `name` raise `error` after the first chunk."""
        self.stream_failures[name] = error

    def calls_to(self, operation: str, container: Optional[str] = None):
        return [
            call for call in self.calls
            if call[0] == operation and (container is None or call[1] == container)
        ]

    def _enter(self, operation: str, container: str, name: Optional[str] = None):
        self.calls.append((operation, container, name))
        for key in ((operation, container), (operation, None)):
            if key in self.failures:
                raise self.failures[key]

    def _container(self, container: str) -> Dict[str, bytes]:
        if container not in self.containers:
            raise RequestFailedError(
                "The specified bucket does not exist", "NoSuchBucket", 404
            )
        return self.containers[container]

    async def ensure_container(self, container: str) -> None:
        self._enter("ensure_container", container)
        self.containers.setdefault(container, {})

    async def put_object(self, container: str, name: str, body) -> None:
        self._enter("put_object", container, name)
        data = body if isinstance(body, (bytes, bytearray)) else body.read()
        self._container(container)[name] = bytes(data)

    async def list_objects(self, container: str) -> AsyncIterator[str]:
        self._enter("list_objects", container)
        for name in list(self._container(container)):
            yield name

    async def get_object(self, container: str, name: str) -> AsyncIterator[bytes]:
        self._enter("get_object", container, name)
        blobs = self._container(container)
        if name not in blobs:
            raise RequestFailedError("The specified key does not exist.", "NoSuchKey", 404)
        return self._chunks(blobs[name], self.stream_failures.get(name))

    async def _chunks(self, data: bytes, error: Optional[BaseException] = None) -> AsyncIterator[bytes]:
        for start in range(0, len(data), self.chunk_size):
            yield data[start:start + self.chunk_size]
            if error is not None:
                raise error

    async def object_exists(self, container: str, name: str) -> bool:
        self._enter("object_exists", container, name)
        return name in self.containers.get(container, {})

    async def delete_object(self, container: str, name: str) -> None:
        self._enter("delete_object", container, name)
        self._container(container).pop(name, None)


class FakeStreamingBody:
    """Stands in for an aiobotocore StreamingBody: fixed chunks, then an optional error."""

    def __init__(self, chunks, error: Optional[BaseException] = None):
        self.chunks = list(chunks)
        self.error = error
        self.released = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.released = True

    async def read(self, amt=None):
        if self.chunks:
            return self.chunks.pop(0)
        if self.error is not None:
            raise self.error
        return b""
