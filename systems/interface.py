from abc import ABC, abstractmethod
from typing import AsyncIterator, BinaryIO, Union


class ObjectStore(ABC):
    """Abstract interface for container/blob object storage backends."""

    @abstractmethod
    async def ensure_container(self, container: str) -> None:
        """Create the container if it does not exist yet."""
        pass

    @abstractmethod
    async def put_object(self, container: str, name: str, body: Union[bytes, BinaryIO]) -> None:
        """Write body to the named object, replacing any previous content."""
        pass

    @abstractmethod
    def list_objects(self, container: str) -> AsyncIterator[str]:
        """Iterate over the object names in the container."""
        pass

    @abstractmethod
    async def get_object(self, container: str, name: str) -> AsyncIterator[bytes]:
        """Request an object and return an iterator over its content chunks."""
        pass

    @abstractmethod
    async def object_exists(self, container: str, name: str) -> bool:
        """Check whether the named object exists."""
        pass

    @abstractmethod
    async def delete_object(self, container: str, name: str) -> None:
        """Remove the named object."""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None
