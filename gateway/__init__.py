"""
Blob operations exposed to the console.
"""

from .storage_gateway import GatewayResult, StorageGateway

__all__ = ['GatewayResult', 'StorageGateway']
