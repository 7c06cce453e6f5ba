"""
Common utilities for the blob console.
"""

from .errors import ErrorKind, GatewayError, RequestFailedError

__all__ = ['ErrorKind', 'GatewayError', 'RequestFailedError']
