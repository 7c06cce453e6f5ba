"""
Error taxonomy shared by the object store and the storage gateway.
"""

from enum import Enum


class RequestFailedError(Exception):
    """A request the object store service answered with a failure."""

    def __init__(self, message: str, error_code: str = "Unknown", status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code

    def __str__(self):
        return self.message


class ErrorKind(Enum):
    SERVICE_REQUEST_FAILED = "service_request_failed"
    UNEXPECTED = "unexpected"
    # Precondition failures, reported like unexpected faults
    DESTINATION_EXISTS = "destination_exists"
    NOT_FOUND = "not_found"


class GatewayError(Exception):
    """Failure of a gateway operation, already classified for the operator."""

    def __init__(self, kind: ErrorKind, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail

    @property
    def is_service_failure(self) -> bool:
        return self.kind is ErrorKind.SERVICE_REQUEST_FAILED

    @classmethod
    def from_exception(cls, exc: BaseException) -> "GatewayError":
        """Classify an arbitrary exception raised while talking to the store."""
        if isinstance(exc, GatewayError):
            return exc
        if isinstance(exc, RequestFailedError):
            error = cls(ErrorKind.SERVICE_REQUEST_FAILED, str(exc))
        else:
            error = cls(ErrorKind.UNEXPECTED, str(exc))
        error.__cause__ = exc
        return error

    def __str__(self):
        return self.detail
